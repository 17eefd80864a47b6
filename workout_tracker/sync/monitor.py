"""同步状态监视：构造时查询一次账号状态，之后只由调用方更新临时状态。"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Union

from workout_tracker.sync.client import AccountStatusClient, SyncUnavailableError
from workout_tracker.sync.status import (
    AccountStatus,
    StatusDisplay,
    SyncStatus,
    describe,
    status_from_account,
)

logger = logging.getLogger(__name__)


class SyncMonitor:
    def __init__(self, client: Optional[AccountStatusClient] = None, check_on_start: bool = True):
        self._client = client or AccountStatusClient()
        self._listeners: List[Callable[[StatusDisplay], None]] = []
        self.status = SyncStatus.UNKNOWN
        self.error_message: Optional[str] = None
        self.last_sync: Optional[datetime] = None
        if check_on_start:
            self.check_account_status()

    def subscribe(self, listener: Callable[[StatusDisplay], None]) -> None:
        self._listeners.append(listener)

    def display(self) -> StatusDisplay:
        return describe(self.status, self.error_message, self.last_sync)

    def _changed(self) -> None:
        display = self.display()
        for listener in list(self._listeners):
            listener(display)

    def fetch_account_status(self) -> AccountStatus:
        """只查询账号状态，不改动监视器；可在后台线程调用。"""
        return self._client.account_status()

    def apply_account_status(self, result: Union[AccountStatus, Exception]) -> SyncStatus:
        """在界面线程应用查询结果；查询失败记为错误状态，错误信息来自失败原因。"""
        if isinstance(result, Exception):
            logger.warning("Account status check failed: %s", result)
            self.status = SyncStatus.ERROR
            self.error_message = str(result)
        else:
            self.status, self.error_message = status_from_account(result)
            logger.debug("Account status %s -> %s", result.value, self.status.value)
        self._changed()
        return self.status

    def check_account_status(self) -> SyncStatus:
        result: Union[AccountStatus, Exception]
        try:
            result = self.fetch_account_status()
        except SyncUnavailableError as e:
            result = e
        return self.apply_account_status(result)

    def mark_syncing(self) -> None:
        self.status = SyncStatus.SYNCING
        self.error_message = None
        self._changed()

    def mark_synced(self, when: Optional[datetime] = None) -> None:
        self.status = SyncStatus.SYNCED
        self.error_message = None
        self.last_sync = when or datetime.now(timezone.utc)
        self._changed()

    def mark_error(self, message: str) -> None:
        self.status = SyncStatus.ERROR
        self.error_message = message
        self._changed()
