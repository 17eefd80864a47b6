"""创建社交主页：用户名校验与错误提示。"""
from workout_tracker.social.models import SocialError, SocialErrorKind

MIN_USERNAME_LENGTH = 3


def normalize_username(username: str) -> str:
    return username.strip().lower()


def is_valid_username(username: str) -> bool:
    """至少 3 位，只能是字母、数字、下划线。"""
    return len(username) >= MIN_USERNAME_LENGTH and all(c.isalnum() or c == "_" for c in username)


def is_valid_profile_input(username: str, display_name: str) -> bool:
    return bool(display_name) and is_valid_username(username)


def profile_error_message(error: Exception, username: str) -> str:
    """创建主页失败时给表单显示的文字。"""
    if isinstance(error, SocialError):
        if error.is_username_taken:
            return f"Username '{username}' is already taken. Please choose another."
        if error.kind == SocialErrorKind.NOT_AUTHENTICATED:
            return "Please sign in to iCloud to create a social profile."
        return error.message
    return f"Failed to create profile: {error}"


def share_error_message(error: Exception) -> str:
    if isinstance(error, SocialError):
        return error.message
    return str(error) or "Could not share this workout."
