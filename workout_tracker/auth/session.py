"""当前登录会话：由应用入口创建并注入各界面，修改后立即持久化。"""
import logging
import uuid
from typing import Callable, List, Optional, Union

from workout_tracker.auth.models import Session, SignInCredential, SignInError
from workout_tracker.auth.store import SettingsStore

logger = logging.getLogger(__name__)

# 持久化键（与旧版本地存储保持一致）
KEY_AUTHENTICATED = "isAuthenticated"
KEY_USER_ID = "userID"
KEY_USER_NAME = "userName"
KEY_USER_EMAIL = "userEmail"
KEY_NEEDS_NAME_PROMPT = "needsNamePrompt"

GUEST_ID_PREFIX = "guest_"
DEBUG_ID_PREFIX = "debug_"
DEBUG_EMAIL = "debug@example.com"

SessionListener = Callable[[Session], None]


def derive_display_name(email: str) -> str:
    """由邮箱前缀推导显示名称：「.」「_」视为空格，每个词首字母大写。"""
    local_part = email.split("@", 1)[0]
    words = local_part.replace(".", " ").replace("_", " ").split()
    return " ".join(w.capitalize() for w in words)


class SessionState:
    """会话状态：两种状态（未登录 / 已登录），另有正交的「需要填写名称」标记。"""

    def __init__(self, store: SettingsStore, allow_debug_sign_in: bool = False):
        self._store = store
        self._allow_debug_sign_in = allow_debug_sign_in
        self._listeners: List[SessionListener] = []
        self._authenticated = False
        self._user_id = ""
        self._display_name = ""
        self._email = ""
        self._needs_name_prompt = False
        self.load()

    # ---- 读取 ----

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def needs_name_prompt(self) -> bool:
        return self._needs_name_prompt

    @property
    def is_guest(self) -> bool:
        return self._user_id.startswith(GUEST_ID_PREFIX)

    def snapshot(self) -> Session:
        return Session(
            authenticated=self._authenticated,
            user_id=self._user_id,
            display_name=self._display_name,
            email=self._email,
            needs_name_prompt=self._needs_name_prompt,
        )

    def subscribe(self, listener: SessionListener) -> None:
        """注册监听：每次修改并保存后回调最新快照。"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---- 持久化 ----

    def load(self) -> None:
        self._authenticated = self._store.get_bool(KEY_AUTHENTICATED)
        self._user_id = self._store.get_str(KEY_USER_ID)
        self._display_name = self._store.get_str(KEY_USER_NAME)
        self._email = self._store.get_str(KEY_USER_EMAIL)
        self._needs_name_prompt = self._store.get_bool(KEY_NEEDS_NAME_PROMPT)
        if self._authenticated and not self._user_id:
            # 已登录但没有 ID 的记录无效，按未登录处理
            logger.warning("Stored session is authenticated without a user id; ignoring it")
            self._authenticated = False
        if not self._authenticated:
            self._needs_name_prompt = False

    def _save(self) -> None:
        self._store.set_many({
            KEY_AUTHENTICATED: self._authenticated,
            KEY_USER_ID: self._user_id,
            KEY_USER_NAME: self._display_name,
            KEY_USER_EMAIL: self._email,
            KEY_NEEDS_NAME_PROMPT: self._needs_name_prompt,
        })
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # ---- 修改 ----

    def sign_out(self) -> None:
        logger.info("Signing out user %s", self._user_id or "<none>")
        self._authenticated = False
        self._user_id = ""
        self._display_name = ""
        self._email = ""
        self._needs_name_prompt = False
        self._save()

    def complete_sign_in(self, result: Union[SignInCredential, BaseException]) -> Session:
        """处理登录提供方的结果。失败时会话不变、不写存储，抛出 SignInError。"""
        if isinstance(result, BaseException):
            logger.warning("Sign in failed: %s", result)
            raise SignInError(str(result) or "Sign in failed") from result
        if not result.user_id:
            logger.warning("Sign in returned an empty user id")
            raise SignInError("Sign in returned an empty user id")

        self._user_id = result.user_id
        full_name = result.full_name()
        if full_name is not None:
            self._display_name = full_name
        if result.email is not None:
            self._email = result.email
        if not self._display_name and self._email:
            self._display_name = derive_display_name(self._email)
        # 每次登录完成都重新判断：只有仍然没有名字时才需要询问
        self._needs_name_prompt = not self._display_name
        self._authenticated = True
        self._save()
        logger.info("Signed in as %s", self._user_id)
        return self.snapshot()

    def set_display_name(self, name: str) -> None:
        self._display_name = name
        self._needs_name_prompt = False
        self._save()

    def continue_as_guest(self) -> Session:
        self._start_local_session(GUEST_ID_PREFIX, email="")
        logger.info("Continuing as guest %s", self._user_id)
        return self.snapshot()

    def debug_skip_sign_in(self) -> Session:
        """开发用跳过登录；仅在 DEBUG_SKIP_SIGN_IN 打开时可用。"""
        if not self._allow_debug_sign_in:
            raise RuntimeError("debug sign in is disabled in this build")
        self._start_local_session(DEBUG_ID_PREFIX, email=DEBUG_EMAIL)
        logger.info("Debug sign in as %s", self._user_id)
        return self.snapshot()

    def _start_local_session(self, prefix: str, email: str) -> None:
        self._user_id = f"{prefix}{uuid.uuid4().hex}"
        self._display_name = ""
        self._email = email
        self._needs_name_prompt = True
        self._authenticated = True
        self._save()
