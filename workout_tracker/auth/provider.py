"""本地登录提供方（账号密码，本地 JSON）。

与系统登录一样：名字和邮箱只在账号第一次授权时返回，之后只返回用户 ID。
账号目录里有一个 username → 用户 ID 的目录文件，每个账号另存一个文件；
写文件先写临时文件再替换，中途退出不会留下半个文件。
"""
import hashlib
import json
import os
import secrets
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field

from workout_tracker.config import ACCOUNTS_DIR, ensure_dirs
from workout_tracker.auth.models import SignInCredential, SignInError

PBKDF2_ITERATIONS = 200_000
DIRECTORY_FILE = "directory.json"


def _password_digest(password: str, salt: str, iterations: int = PBKDF2_ITERATIONS) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), iterations).hex()


def _write_json(path: Path, text: str) -> None:
    tmp = path.with_name(path.name + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
    os.replace(tmp, path)


class Account(BaseModel):
    """提供方保存的账号。"""
    id: str = Field(..., description="用户唯一 ID")
    username: str = Field(..., description="登录账号")
    password_digest: str = Field(..., description="PBKDF2 摘要")
    salt: str = Field(..., description="盐（hex）")
    iterations: int = Field(PBKDF2_ITERATIONS, description="PBKDF2 迭代次数")
    given_name: Optional[str] = Field(None, description="名")
    family_name: Optional[str] = Field(None, description="姓")
    email: Optional[str] = Field(None, description="邮箱")
    details_shared: bool = Field(False, description="名字与邮箱是否已交给过应用")
    created_at: Optional[str] = Field(None, description="创建时间 ISO")

    def check_password(self, password: str) -> bool:
        digest = _password_digest(password, self.salt, self.iterations)
        return secrets.compare_digest(digest, self.password_digest)


class IdentityProvider:
    """本地账号：注册与授权。"""

    def __init__(self, base_dir: Optional[Path] = None):
        if base_dir is None:
            ensure_dirs()
        self.base_dir = base_dir or ACCOUNTS_DIR

    def _account_path(self, user_id: str) -> Path:
        return self.base_dir / f"account_{user_id}.json"

    def _directory(self) -> Dict[str, str]:
        path = self.base_dir / DIRECTORY_FILE
        if not path.exists():
            return {}
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _save_directory(self, directory: Dict[str, str]) -> None:
        _write_json(self.base_dir / DIRECTORY_FILE, json.dumps(directory, indent=2, ensure_ascii=False))

    def _save_account(self, account: Account) -> None:
        _write_json(self._account_path(account.id), account.model_dump_json(indent=2))

    def _load_account(self, user_id: str) -> Optional[Account]:
        path = self._account_path(user_id)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return Account.model_validate(json.load(f))

    def register(
        self,
        username: str,
        password: str,
        given_name: Optional[str] = None,
        family_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> str:
        """注册新账号，返回用户 ID。账号已存在或信息不全时抛出 SignInError。"""
        username = username.strip().lower()
        if not username or not password:
            raise SignInError("Username and password are required")
        self.base_dir.mkdir(parents=True, exist_ok=True)
        directory = self._directory()
        if username in directory:
            raise SignInError("An account with this username already exists")
        salt = secrets.token_hex(16)
        account = Account(
            id=secrets.token_hex(8),
            username=username,
            password_digest=_password_digest(password, salt),
            salt=salt,
            given_name=given_name.strip() if given_name else None,
            family_name=family_name.strip() if family_name else None,
            email=email.strip() if email else None,
            created_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        )
        # 先写账号再登记，目录里的 ID 总能找到账号文件
        self._save_account(account)
        directory[username] = account.id
        self._save_directory(directory)
        return account.id

    def authorize(self, username: str, password: str) -> SignInCredential:
        """验证账号密码，返回凭据；失败抛出 SignInError。"""
        user_id = self._directory().get(username.strip().lower())
        account = self._load_account(user_id) if user_id else None
        if account is None or not account.check_password(password):
            raise SignInError("Incorrect username or password")
        if account.details_shared:
            return SignInCredential(user_id=account.id)
        account.details_shared = True
        self._save_account(account)
        return SignInCredential(
            user_id=account.id,
            given_name=account.given_name,
            family_name=account.family_name,
            email=account.email,
        )
