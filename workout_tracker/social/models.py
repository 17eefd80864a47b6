"""训练与社交数据模型、社交错误。"""
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class SetEntry(BaseModel):
    """一组动作记录。"""
    exercise_name: str
    weight: float = Field(0, ge=0, description="重量")
    reps: int = Field(0, ge=0, description="次数")
    timestamp: datetime = Field(default_factory=_now)

    @property
    def volume(self) -> float:
        return self.weight * self.reps


class Workout(BaseModel):
    """一次训练（本地数据由外部保存，这里只用于分享）。"""
    name: str
    date: datetime = Field(default_factory=_now)
    is_completed: bool = False
    main_exercises: List[str] = Field(default_factory=list)
    sets: List[SetEntry] = Field(default_factory=list)

    @property
    def total_volume(self) -> float:
        return sum(s.volume for s in self.sets)


class UserProfile(BaseModel):
    """公开的个人主页。"""
    id: str = Field(default_factory=_new_id)
    user_id: str = Field("", description="登录用户 ID")
    username: str
    display_name: str
    bio: str = ""
    avatar_url: Optional[str] = None
    created_date: datetime = Field(default_factory=_now)
    is_public: bool = True
    total_workouts: int = 0
    total_volume: float = 0


class PublicWorkout(BaseModel):
    """分享给好友的训练摘要。"""
    id: str = Field(default_factory=_new_id)
    user_id: str
    workout_name: str
    date: datetime
    total_volume: float = 0
    exercise_count: int = 0
    is_completed: bool = False


class SocialErrorKind(str, Enum):
    NOT_AUTHENTICATED = "not_authenticated"
    USERNAME_TAKEN = "username_taken"
    USERNAME_ALREADY_TAKEN = "username_already_taken"
    ALREADY_FOLLOWING = "already_following"
    USER_NOT_FOUND = "user_not_found"
    NETWORK_ERROR = "network_error"
    SERVER_ERROR = "server_error"
    NOT_CONFIGURED = "not_configured"
    PROFILE_EXISTS = "profile_exists"


_MESSAGES = {
    SocialErrorKind.NOT_AUTHENTICATED: (
        "You must be signed in to iCloud to use social features. Please sign in to iCloud in Settings."
    ),
    SocialErrorKind.USERNAME_TAKEN: "This username is already taken. Please choose a different one.",
    SocialErrorKind.USERNAME_ALREADY_TAKEN: "This username is already taken. Please choose a different one.",
    SocialErrorKind.ALREADY_FOLLOWING: "You're already following this user.",
    SocialErrorKind.USER_NOT_FOUND: "User not found.",
    SocialErrorKind.NETWORK_ERROR: (
        "Network connection error. Please check your internet connection and try again."
    ),
    SocialErrorKind.SERVER_ERROR: "The social service is temporarily unavailable. Please try again later.",
    SocialErrorKind.NOT_CONFIGURED: "The social service is not configured. Set SOCIAL_API_URL and try again.",
    SocialErrorKind.PROFILE_EXISTS: "You already have a social profile.",
}


class SocialError(Exception):
    """社交服务错误，带可展示给用户的信息。"""

    def __init__(self, kind: SocialErrorKind, detail: Optional[str] = None):
        self.kind = kind
        self.detail = detail
        super().__init__(_MESSAGES[kind])

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]

    @property
    def is_username_taken(self) -> bool:
        return self.kind in (SocialErrorKind.USERNAME_TAKEN, SocialErrorKind.USERNAME_ALREADY_TAKEN)
