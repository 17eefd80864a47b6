"""云账号状态 → 同步状态 → 显示（图标、颜色、文字）。纯函数，无副作用。"""
from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, Optional, Tuple


class AccountStatus(str, Enum):
    """云服务返回的账号状态。"""
    AVAILABLE = "available"
    NO_ACCOUNT = "no_account"
    RESTRICTED = "restricted"
    COULD_NOT_DETERMINE = "could_not_determine"
    TEMPORARILY_UNAVAILABLE = "temporarily_unavailable"


class SyncStatus(str, Enum):
    UNKNOWN = "unknown"
    SYNCING = "syncing"
    SYNCED = "synced"
    ERROR = "error"
    NOT_SIGNED_IN = "not_signed_in"
    NO_NETWORK = "no_network"


class StatusDisplay(NamedTuple):
    icon: str
    color: str
    text: str


_ACCOUNT_MAP = {
    AccountStatus.AVAILABLE: (SyncStatus.SYNCED, None),
    AccountStatus.NO_ACCOUNT: (SyncStatus.NOT_SIGNED_IN, "Please sign in to iCloud in Settings to enable sync"),
    AccountStatus.RESTRICTED: (SyncStatus.ERROR, "iCloud is restricted on this device"),
    AccountStatus.COULD_NOT_DETERMINE: (SyncStatus.UNKNOWN, None),
    AccountStatus.TEMPORARILY_UNAVAILABLE: (SyncStatus.NO_NETWORK, "iCloud is temporarily unavailable"),
}

_ICONS = {
    SyncStatus.UNKNOWN: "questionmark.circle",
    SyncStatus.SYNCING: "arrow.triangle.2.circlepath",
    SyncStatus.SYNCED: "checkmark.icloud",
    SyncStatus.ERROR: "exclamationmark.icloud",
    SyncStatus.NOT_SIGNED_IN: "person.crop.circle.badge.exclamationmark",
    SyncStatus.NO_NETWORK: "wifi.slash",
}

_COLORS = {
    SyncStatus.UNKNOWN: "gray",
    SyncStatus.SYNCING: "blue",
    SyncStatus.SYNCED: "green",
    SyncStatus.ERROR: "red",
    SyncStatus.NOT_SIGNED_IN: "red",
    SyncStatus.NO_NETWORK: "orange",
}


def status_from_account(status: AccountStatus) -> Tuple[SyncStatus, Optional[str]]:
    """账号状态映射为同步状态与提示信息（可用时无提示）。"""
    return _ACCOUNT_MAP.get(status, (SyncStatus.UNKNOWN, None))


def relative_time(when: datetime, now: Optional[datetime] = None) -> str:
    """「just now」「5 minutes ago」「yesterday」一类的相对时间。"""
    now = now or datetime.now(timezone.utc)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    seconds = int((now - when).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hour{'s' if hours != 1 else ''} ago"
    days = hours // 24
    if days == 1:
        return "yesterday"
    return f"{days} days ago"


def describe(
    status: SyncStatus,
    error_message: Optional[str] = None,
    last_sync: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> StatusDisplay:
    """同步状态对应的显示三元组。"""
    if status == SyncStatus.UNKNOWN:
        text = "Checking sync status..."
    elif status == SyncStatus.SYNCING:
        text = "Syncing to iCloud..."
    elif status == SyncStatus.SYNCED:
        text = f"Last synced {relative_time(last_sync, now)}" if last_sync else "Synced to iCloud"
    elif status == SyncStatus.ERROR:
        text = error_message or "Sync error"
    elif status == SyncStatus.NOT_SIGNED_IN:
        text = "Not signed in to iCloud"
    else:
        text = "No internet connection"
    return StatusDisplay(icon=_ICONS[status], color=_COLORS[status], text=text)
