"""个人资料：本地公开资料、用户名规则与错误提示。"""
from workout_tracker.profile.models import LocalProfile
from workout_tracker.profile.store import ProfileStore
from workout_tracker.profile.setup import (
    is_valid_profile_input,
    is_valid_username,
    normalize_username,
    profile_error_message,
    share_error_message,
)

__all__ = [
    "LocalProfile",
    "ProfileStore",
    "is_valid_profile_input",
    "is_valid_username",
    "normalize_username",
    "profile_error_message",
    "share_error_message",
]
