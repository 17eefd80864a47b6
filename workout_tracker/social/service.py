"""社交服务客户端（REST JSON）：创建/读取/更新个人主页、分享训练。

各个操作可能同时在多个后台线程里运行；读改写 current_user_profile 的操作
由同一把锁串行执行。
"""
import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from workout_tracker.config import API_TOKEN, HTTP_TIMEOUT, SOCIAL_API_URL
from workout_tracker.social.models import (
    PublicWorkout,
    SocialError,
    SocialErrorKind,
    UserProfile,
    Workout,
)
from workout_tracker.sync.client import AccountStatusClient, SyncUnavailableError
from workout_tracker.sync.status import AccountStatus

logger = logging.getLogger(__name__)


class SocialService:
    """当前用户的社交操作。需要云账号可用才能创建主页。"""

    def __init__(
        self,
        user_id: str,
        base_url: Optional[str] = None,
        account_client: Optional[AccountStatusClient] = None,
        token: Optional[str] = None,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.user_id = user_id
        self.base_url = (base_url if base_url is not None else SOCIAL_API_URL).rstrip("/")
        self._account_client = account_client or AccountStatusClient()
        self._token = token if token is not None else API_TOKEN
        self._timeout = timeout
        self._http = session or requests.Session()
        self._lock = threading.RLock()
        self.current_user_profile: Optional[UserProfile] = None

    # ---- HTTP ----

    def _request(
        self,
        method: str,
        path: str,
        not_found: SocialErrorKind = SocialErrorKind.SERVER_ERROR,
        **kwargs: Any,
    ) -> Any:
        """发请求并把 HTTP 状态映射为 SocialError；404 的含义由调用方给出。"""
        if not self.base_url:
            raise SocialError(SocialErrorKind.NOT_CONFIGURED)
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        url = f"{self.base_url}{path}"
        try:
            resp = self._http.request(method, url, headers=headers, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise SocialError(SocialErrorKind.NETWORK_ERROR, str(e)) from e
        if resp.status_code in (401, 403):
            raise SocialError(SocialErrorKind.NOT_AUTHENTICATED)
        if resp.status_code == 404:
            logger.warning("%s %s returned 404", method, url)
            raise SocialError(not_found, "HTTP 404")
        if resp.status_code == 409:
            raise SocialError(SocialErrorKind.USERNAME_TAKEN)
        if resp.status_code >= 400:
            logger.warning("%s %s returned %s", method, url, resp.status_code)
            raise SocialError(SocialErrorKind.SERVER_ERROR, f"HTTP {resp.status_code}")
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise SocialError(SocialErrorKind.SERVER_ERROR, "invalid JSON") from e

    # ---- 个人主页 ----

    def check_authentication(self) -> bool:
        """云账号是否可用。"""
        try:
            return self._account_client.account_status() == AccountStatus.AVAILABLE
        except SyncUnavailableError as e:
            raise SocialError(SocialErrorKind.NETWORK_ERROR, str(e)) from e

    def _query_profiles(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """按条件查主页；404 视为没有匹配。"""
        try:
            return self._request(
                "GET",
                "/profiles",
                not_found=SocialErrorKind.USER_NOT_FOUND,
                params=params,
            ) or []
        except SocialError as e:
            if e.kind == SocialErrorKind.USER_NOT_FOUND:
                return []
            raise

    def find_profile_for_user(self) -> Optional[UserProfile]:
        """查询当前用户已有的主页，没有时返回 None。不改动 current_user_profile。"""
        results = self._query_profiles({"user_id": self.user_id, "limit": 1})
        if not results:
            return None
        return UserProfile.model_validate(results[0])

    def create_user_profile(self, username: str, display_name: str, bio: str = "") -> UserProfile:
        """创建主页。同一用户已有主页时拒绝，并把已有主页设为当前主页。"""
        if not self.check_authentication():
            raise SocialError(SocialErrorKind.NOT_AUTHENTICATED)
        with self._lock:
            own = self.find_profile_for_user()
            if own is not None:
                self.current_user_profile = own
                raise SocialError(SocialErrorKind.PROFILE_EXISTS)
            taken = self._query_profiles({"username": username})
            if taken:
                raise SocialError(SocialErrorKind.USERNAME_TAKEN)
            profile = UserProfile(
                user_id=self.user_id,
                username=username,
                display_name=display_name,
                bio=bio,
            )
            self._request("POST", "/profiles", json=profile.model_dump(mode="json"))
            self.current_user_profile = profile
        logger.info("Created social profile %s for %s", username, self.user_id)
        return profile

    def fetch_current_user_profile(self) -> Optional[UserProfile]:
        if not self.check_authentication():
            raise SocialError(SocialErrorKind.NOT_AUTHENTICATED)
        with self._lock:
            profile = self.find_profile_for_user()
            if profile is not None:
                self.current_user_profile = profile
            return self.current_user_profile

    def update_user_profile(
        self,
        display_name: Optional[str] = None,
        bio: Optional[str] = None,
        total_workouts: Optional[int] = None,
        total_volume: Optional[float] = None,
    ) -> Optional[UserProfile]:
        """更新当前主页；没有主页时不做任何事。"""
        with self._lock:
            if self.current_user_profile is None:
                return None
            changes: Dict[str, Any] = {}
            if display_name is not None:
                changes["display_name"] = display_name
            if bio is not None:
                changes["bio"] = bio
            if total_workouts is not None:
                changes["total_workouts"] = total_workouts
            if total_volume is not None:
                changes["total_volume"] = total_volume
            profile = self.current_user_profile.model_copy(update=changes)
            self._request("PUT", f"/profiles/{profile.id}", json=profile.model_dump(mode="json"))
            self.current_user_profile = profile
            return profile

    # ---- 分享 ----

    def share_workout(self, workout: Workout) -> PublicWorkout:
        """分享训练并累计主页统计。没有主页视为未登录。"""
        with self._lock:
            current = self.current_user_profile
            if current is None:
                raise SocialError(SocialErrorKind.NOT_AUTHENTICATED)
            public = PublicWorkout(
                user_id=current.id,
                workout_name=workout.name,
                date=workout.date,
                total_volume=workout.total_volume,
                exercise_count=len(workout.sets),
                is_completed=workout.is_completed,
            )
            self._request("POST", "/workouts", json=public.model_dump(mode="json"))
            self.update_user_profile(
                total_workouts=current.total_workouts + 1,
                total_volume=current.total_volume + workout.total_volume,
            )
        logger.info("Shared workout %r", workout.name)
        return public
