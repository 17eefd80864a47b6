"""云同步状态：账号状态查询与显示映射。"""
from workout_tracker.sync.status import (
    AccountStatus,
    StatusDisplay,
    SyncStatus,
    describe,
    status_from_account,
)
from workout_tracker.sync.client import AccountStatusClient, SyncUnavailableError
from workout_tracker.sync.monitor import SyncMonitor

__all__ = [
    "AccountStatus",
    "StatusDisplay",
    "SyncStatus",
    "describe",
    "status_from_account",
    "AccountStatusClient",
    "SyncUnavailableError",
    "SyncMonitor",
]
