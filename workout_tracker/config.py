"""全局配置与路径。环境变量可写在项目根目录的 .env 中。"""
import os
from pathlib import Path

from dotenv import load_dotenv

# 项目根目录（workout_tracker 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


# 数据目录：本地设置、账号
DATA_DIR = Path(os.getenv("WORKOUT_TRACKER_DATA_DIR", str(ROOT_DIR / "data")))
SETTINGS_PATH = DATA_DIR / "settings.json"  # 会话与个人资料的键值存储
ACCOUNTS_DIR = DATA_DIR / "accounts"  # 本地登录提供方的账号

# 窗口默认
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 560

# 远端服务（为空时相关功能显示为不可用）
SOCIAL_API_URL = os.getenv("SOCIAL_API_URL", "").rstrip("/")
SYNC_API_URL = os.getenv("SYNC_API_URL", "").rstrip("/")
API_TOKEN = os.getenv("WORKOUT_TRACKER_API_TOKEN", "")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15"))

# 开发用：跳过登录。启动时读取一次，发布构建不设置
DEBUG_SKIP_SIGN_IN = _env_flag("DEBUG_SKIP_SIGN_IN")

# 日志
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    for d in (DATA_DIR, ACCOUNTS_DIR):
        d.mkdir(parents=True, exist_ok=True)
