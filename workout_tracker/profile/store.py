"""本地公开资料存储，与会话共用同一个设置文件。"""
from workout_tracker.auth.store import SettingsStore
from workout_tracker.profile.models import LocalProfile

KEY_DISPLAY_NAME = "displayName"
KEY_BIO = "profile.bio"
KEY_LINK = "profile.link"


class ProfileStore:
    def __init__(self, settings: SettingsStore):
        self._settings = settings

    def load(self) -> LocalProfile:
        return LocalProfile(
            display_name=self._settings.get_str(KEY_DISPLAY_NAME),
            bio=self._settings.get_str(KEY_BIO),
            link=self._settings.get_str(KEY_LINK),
        )

    def save(self, profile: LocalProfile) -> None:
        self._settings.set_many({
            KEY_DISPLAY_NAME: profile.display_name,
            KEY_BIO: profile.bio,
            KEY_LINK: profile.link,
        })
