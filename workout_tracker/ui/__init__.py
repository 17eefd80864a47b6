"""登录、资料、分享与主窗口界面。"""
from workout_tracker.ui.sign_in import SignInDialog
from workout_tracker.ui.register import RegisterDialog
from workout_tracker.ui.name_prompt import NamePromptDialog
from workout_tracker.ui.edit_profile import EditProfileDialog
from workout_tracker.ui.profile_setup import ProfileSetupDialog
from workout_tracker.ui.share import ShareToFriendsButton
from workout_tracker.ui.sync_badge import SyncStatusBadge
from workout_tracker.ui.root_tabs import RootTabWindow

__all__ = [
    "SignInDialog",
    "RegisterDialog",
    "NamePromptDialog",
    "EditProfileDialog",
    "ProfileSetupDialog",
    "ShareToFriendsButton",
    "SyncStatusBadge",
    "RootTabWindow",
]
