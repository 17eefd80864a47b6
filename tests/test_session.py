"""会话状态测试：登录、访客、退出、持久化。"""
import json
import tempfile
from pathlib import Path

import pytest

from workout_tracker.auth.models import SignInCredential, SignInError
from workout_tracker.auth.session import SessionState, derive_display_name
from workout_tracker.auth.store import SettingsStore


def _session(tmp: str, **kwargs) -> SessionState:
    return SessionState(SettingsStore(Path(tmp) / "settings.json"), **kwargs)


def test_full_name_is_joined_and_trimmed() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.complete_sign_in(SignInCredential(user_id="u1", given_name="Ada", family_name="Lovelace"))
        assert session.display_name == "Ada Lovelace"
        assert session.needs_name_prompt is False

        other = _session(tmp)
        other.complete_sign_in(SignInCredential(user_id="u2", given_name="Ada", family_name=""))
        assert other.display_name == "Ada"


def test_display_name_derived_from_email() -> None:
    assert derive_display_name("john.doe_smith@x.com") == "John Doe Smith"
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.complete_sign_in(SignInCredential(user_id="u3", email="john.doe_smith@x.com"))
        assert session.display_name == "John Doe Smith"
        assert session.email == "john.doe_smith@x.com"


def test_email_only_sign_in_scenario() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        snapshot = session.complete_sign_in(SignInCredential(user_id="u1", email="jane.doe@test.com"))
        assert snapshot.display_name == "Jane Doe"
        assert snapshot.needs_name_prompt is False
        assert snapshot.authenticated is True
        assert snapshot.user_id == "u1"


def test_no_name_and_no_email_needs_prompt() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.complete_sign_in(SignInCredential(user_id="u4"))
        assert session.authenticated is True
        assert session.needs_name_prompt is True
        assert session.display_name == ""


def test_failed_sign_in_leaves_session_and_store_untouched() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "settings.json"
        session = SessionState(SettingsStore(path))
        with pytest.raises(SignInError) as excinfo:
            session.complete_sign_in(ConnectionError("provider unavailable"))
        assert isinstance(excinfo.value.__cause__, ConnectionError)
        assert session.authenticated is False
        assert session.user_id == ""
        assert not path.exists()


def test_set_display_name_clears_prompt() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.continue_as_guest()
        assert session.needs_name_prompt is True
        session.set_display_name("Alex")
        assert session.display_name == "Alex"
        assert session.needs_name_prompt is False
        session.set_display_name("Alex")
        assert session.needs_name_prompt is False


def test_guest_ids_are_unique() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        first = session.continue_as_guest().user_id
        second = session.continue_as_guest().user_id
        assert first != second
        assert first.startswith("guest_") and second.startswith("guest_")
        assert session.is_guest
        assert session.email == ""
        assert session.authenticated is True


def test_sign_out_then_reload_is_default() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.complete_sign_in(SignInCredential(user_id="u1", given_name="A", family_name="B", email="a@b.c"))
        session.sign_out()
        reloaded = _session(tmp)
        snapshot = reloaded.snapshot()
        assert snapshot.authenticated is False
        assert snapshot.user_id == ""
        assert snapshot.display_name == ""
        assert snapshot.email == ""
        assert snapshot.needs_name_prompt is False


def test_state_persists_under_original_keys() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.complete_sign_in(SignInCredential(user_id="u9", email="sam_lee@example.com"))
        with open(Path(tmp) / "settings.json", "r", encoding="utf-8") as f:
            data = json.load(f)
        assert data == {
            "isAuthenticated": True,
            "userID": "u9",
            "userName": "Sam Lee",
            "userEmail": "sam_lee@example.com",
            "needsNamePrompt": False,
        }
        assert _session(tmp).display_name == "Sam Lee"


def test_debug_skip_requires_flag() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        with pytest.raises(RuntimeError):
            session.debug_skip_sign_in()
        assert session.authenticated is False

        debug = _session(tmp, allow_debug_sign_in=True)
        snapshot = debug.debug_skip_sign_in()
        assert snapshot.user_id.startswith("debug_")
        assert snapshot.email == "debug@example.com"
        assert snapshot.needs_name_prompt is True


def test_listeners_receive_snapshots() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        seen = []
        session.subscribe(seen.append)
        session.continue_as_guest()
        session.set_display_name("Kim")
        session.unsubscribe(seen.append)
        session.sign_out()
        assert [s.display_name for s in seen] == ["", "Kim"]


def test_sign_in_with_name_after_guest_clears_prompt() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.continue_as_guest()
        assert session.needs_name_prompt is True
        session.complete_sign_in(SignInCredential(user_id="u1", given_name="Ada", family_name="Lovelace"))
        assert session.display_name == "Ada Lovelace"
        assert session.needs_name_prompt is False
        assert _session(tmp).needs_name_prompt is False


def test_sign_in_with_email_after_guest_clears_prompt() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        session = _session(tmp)
        session.continue_as_guest()
        session.complete_sign_in(SignInCredential(user_id="u1", email="jane.doe@test.com"))
        assert session.display_name == "Jane Doe"
        assert session.needs_name_prompt is False


def _write_settings(tmp: str, data: dict) -> None:
    with open(Path(tmp) / "settings.json", "w", encoding="utf-8") as f:
        json.dump(data, f)


def test_stored_session_without_user_id_loads_signed_out() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        _write_settings(tmp, {
            "isAuthenticated": True,
            "userID": "",
            "userName": "",
            "userEmail": "",
            "needsNamePrompt": True,
        })
        session = _session(tmp)
        assert session.authenticated is False
        assert session.needs_name_prompt is False


def test_stored_prompt_flag_ignored_while_signed_out() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        _write_settings(tmp, {"isAuthenticated": False, "userID": "u1", "needsNamePrompt": True})
        session = _session(tmp)
        assert session.authenticated is False
        assert session.needs_name_prompt is False


def test_stored_prompt_flag_kept_while_signed_in() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        _write_settings(tmp, {"isAuthenticated": True, "userID": "guest_1", "needsNamePrompt": True})
        session = _session(tmp)
        assert session.authenticated is True
        assert session.needs_name_prompt is True
