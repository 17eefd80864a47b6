"""会话与登录凭据数据模型。"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignInError(Exception):
    """登录失败（提供方返回错误、账号或密码不正确等）。"""


class Session(BaseModel):
    """当前会话快照（只读）。"""
    authenticated: bool = Field(False, description="是否已登录")
    user_id: str = Field("", description="用户 ID；未登录为空")
    display_name: str = Field("", description="显示名称")
    email: str = Field("", description="邮箱")
    needs_name_prompt: bool = Field(False, description="是否需要让用户填写名称")

    model_config = ConfigDict(frozen=True)


class SignInCredential(BaseModel):
    """登录提供方返回的凭据。名字与邮箱通常只在首次授权时提供。"""
    user_id: str = Field(..., description="提供方签发的用户 ID")
    given_name: Optional[str] = Field(None, description="名")
    family_name: Optional[str] = Field(None, description="姓")
    email: Optional[str] = Field(None, description="邮箱")

    def full_name(self) -> Optional[str]:
        """名与姓都存在时返回「名 姓」，否则 None。"""
        if self.given_name is None or self.family_name is None:
            return None
        return f"{self.given_name} {self.family_name}".strip()
