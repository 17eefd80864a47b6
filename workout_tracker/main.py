"""入口：登录（账号 / 访客）→ 需要时填写名称 → 主窗口；退出登录回到登录页。"""
import logging
import sys

from PyQt6.QtCore import QEventLoop, Qt
from PyQt6.QtWidgets import QApplication

from workout_tracker import __version__
from workout_tracker import config
from workout_tracker.auth.provider import IdentityProvider
from workout_tracker.auth.session import SessionState
from workout_tracker.auth.store import SettingsStore
from workout_tracker.profile.store import ProfileStore
from workout_tracker.social.service import SocialService
from workout_tracker.sync.client import AccountStatusClient
from workout_tracker.sync.monitor import SyncMonitor
from workout_tracker.ui.name_prompt import NamePromptDialog
from workout_tracker.ui.root_tabs import RootTabWindow
from workout_tracker.ui.sign_in import SignInDialog

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO), format=config.LOG_FORMAT)
logging.getLogger("urllib3").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def main() -> None:
    config.ensure_dirs()
    app = QApplication(sys.argv)
    app.setApplicationName("Workout Tracker")
    app.setApplicationVersion(__version__)

    settings = SettingsStore()
    session = SessionState(settings, allow_debug_sign_in=config.DEBUG_SKIP_SIGN_IN)
    provider = IdentityProvider()
    profile_store = ProfileStore(settings)
    account_client = AccountStatusClient()
    if config.DEBUG_SKIP_SIGN_IN:
        logger.warning("Debug sign-in bypass is enabled")

    while True:
        # 1. 未登录：登录 / 创建账号 / 访客
        if not session.authenticated:
            sign_in = SignInDialog(session, provider, show_debug_skip=config.DEBUG_SKIP_SIGN_IN)
            if sign_in.exec() != sign_in.DialogCode.Accepted:
                break

        # 2. 没有显示名称时先询问
        if session.needs_name_prompt:
            NamePromptDialog(session).exec()  # 可关闭，之后在个人页修改

        # 3. 主窗口；「退出登录」回到第 1 步
        social = SocialService(session.user_id, account_client=account_client)
        monitor = SyncMonitor(account_client, check_on_start=False)
        window = RootTabWindow(session, profile_store, social, monitor)
        loop = QEventLoop()
        window.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        window.signOutRequested.connect(window.close)
        window.destroyed.connect(loop.quit)
        window.show()
        loop.exec()
        if session.authenticated:
            # 窗口被直接关闭（未退出登录）
            break

    sys.exit(0)


if __name__ == "__main__":
    main()
