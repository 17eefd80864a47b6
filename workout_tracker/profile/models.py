"""本地公开资料数据模型。"""
from pydantic import BaseModel, Field


class LocalProfile(BaseModel):
    """编辑资料页的公开信息（只保存在本机）。"""
    display_name: str = Field("", description="全名")
    bio: str = Field("", description="简介")
    link: str = Field("", description="个人链接")

    def avatar_initial(self) -> str:
        """头像上显示的首字母；没有名字时为 V。"""
        name = self.display_name.strip()
        return name[0].upper() if name else "V"
