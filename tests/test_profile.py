"""个人资料与主页创建提示测试。"""
import tempfile
from pathlib import Path

from workout_tracker.auth.store import SettingsStore
from workout_tracker.profile.models import LocalProfile
from workout_tracker.profile.setup import (
    is_valid_profile_input,
    is_valid_username,
    normalize_username,
    profile_error_message,
    share_error_message,
)
from workout_tracker.profile.store import ProfileStore
from workout_tracker.social.models import SocialError, SocialErrorKind


def test_avatar_initial() -> None:
    assert LocalProfile(display_name="  mia ").avatar_initial() == "M"
    assert LocalProfile().avatar_initial() == "V"


def test_profile_store_save_load() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        settings = SettingsStore(Path(tmp) / "settings.json")
        ProfileStore(settings).save(LocalProfile(display_name="Mia", bio="Runner", link="https://mia.run"))
        loaded = ProfileStore(SettingsStore(Path(tmp) / "settings.json")).load()
        assert loaded == LocalProfile(display_name="Mia", bio="Runner", link="https://mia.run")


def test_username_rules() -> None:
    assert normalize_username("  Big_Lifter ") == "big_lifter"
    assert is_valid_username("abc")
    assert is_valid_username("lift_3r")
    assert not is_valid_username("ab")
    assert not is_valid_username("has space")
    assert not is_valid_username("dash-ed")
    assert is_valid_profile_input("lifter", "Lifter")
    assert not is_valid_profile_input("lifter", "")


def test_profile_error_messages() -> None:
    taken = profile_error_message(SocialError(SocialErrorKind.USERNAME_ALREADY_TAKEN), "bob")
    assert taken == "Username 'bob' is already taken. Please choose another."
    assert profile_error_message(SocialError(SocialErrorKind.USERNAME_TAKEN), "bob") == taken
    assert "sign in to iCloud" in profile_error_message(SocialError(SocialErrorKind.NOT_AUTHENTICATED), "bob")
    network = SocialError(SocialErrorKind.NETWORK_ERROR)
    assert profile_error_message(network, "bob") == network.message
    assert profile_error_message(ValueError("boom"), "bob") == "Failed to create profile: boom"


def test_share_error_message() -> None:
    err = SocialError(SocialErrorKind.NOT_AUTHENTICATED)
    assert share_error_message(err) == err.message
    assert share_error_message(RuntimeError("nope")) == "nope"
