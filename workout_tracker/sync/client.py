"""云账号状态查询（HTTP）。"""
import logging
from typing import Optional

import requests

from workout_tracker.config import API_TOKEN, HTTP_TIMEOUT, SYNC_API_URL
from workout_tracker.sync.status import AccountStatus

logger = logging.getLogger(__name__)


class SyncUnavailableError(Exception):
    """同步服务未配置或无法访问。"""


class AccountStatusClient:
    """GET <base>/account/status，返回 {"status": "available" | ...}。"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url if base_url is not None else SYNC_API_URL).rstrip("/")
        self._token = token if token is not None else API_TOKEN
        self._timeout = timeout
        self._http = session or requests.Session()

    def account_status(self) -> AccountStatus:
        if not self.base_url:
            raise SyncUnavailableError("Sync service is not configured")
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            resp = self._http.get(f"{self.base_url}/account/status", headers=headers, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise SyncUnavailableError(f"Could not reach sync service: {e}") from e
        except ValueError as e:
            raise SyncUnavailableError("Sync service returned an invalid response") from e
        raw = data.get("status") if isinstance(data, dict) else None
        try:
            return AccountStatus(raw)
        except ValueError:
            logger.warning("Unknown account status from sync service: %r", raw)
            return AccountStatus.COULD_NOT_DETERMINE
