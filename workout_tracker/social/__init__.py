"""社交：个人主页、分享训练。"""
from workout_tracker.social.models import (
    PublicWorkout,
    SetEntry,
    SocialError,
    SocialErrorKind,
    UserProfile,
    Workout,
)
from workout_tracker.social.service import SocialService

__all__ = [
    "PublicWorkout",
    "SetEntry",
    "SocialError",
    "SocialErrorKind",
    "UserProfile",
    "Workout",
    "SocialService",
]
