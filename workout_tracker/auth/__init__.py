"""登录与会话：本地设置存储、会话状态、登录提供方。"""
from workout_tracker.auth.models import Session, SignInCredential, SignInError
from workout_tracker.auth.store import SettingsStore
from workout_tracker.auth.session import SessionState, derive_display_name
from workout_tracker.auth.provider import IdentityProvider

__all__ = [
    "Session",
    "SignInCredential",
    "SignInError",
    "SettingsStore",
    "SessionState",
    "derive_display_name",
    "IdentityProvider",
]
