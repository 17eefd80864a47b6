"""同步状态映射与监视测试。"""
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
import requests

from workout_tracker.sync.client import AccountStatusClient, SyncUnavailableError
from workout_tracker.sync.monitor import SyncMonitor
from workout_tracker.sync.status import (
    AccountStatus,
    SyncStatus,
    describe,
    relative_time,
    status_from_account,
)


@pytest.mark.parametrize(
    "account, expected",
    [
        (AccountStatus.AVAILABLE, SyncStatus.SYNCED),
        (AccountStatus.NO_ACCOUNT, SyncStatus.NOT_SIGNED_IN),
        (AccountStatus.RESTRICTED, SyncStatus.ERROR),
        (AccountStatus.COULD_NOT_DETERMINE, SyncStatus.UNKNOWN),
        (AccountStatus.TEMPORARILY_UNAVAILABLE, SyncStatus.NO_NETWORK),
    ],
)
def test_account_status_mapping(account: AccountStatus, expected: SyncStatus) -> None:
    status, message = status_from_account(account)
    assert status == expected
    if account in (AccountStatus.AVAILABLE, AccountStatus.COULD_NOT_DETERMINE):
        assert message is None
    else:
        assert message


def test_describe_display() -> None:
    assert describe(SyncStatus.SYNCED) == ("checkmark.icloud", "green", "Synced to iCloud")
    assert describe(SyncStatus.NO_NETWORK).color == "orange"
    assert describe(SyncStatus.NOT_SIGNED_IN).text == "Not signed in to iCloud"
    assert describe(SyncStatus.ERROR).text == "Sync error"
    assert describe(SyncStatus.ERROR, "disk full").text == "disk full"
    assert describe(SyncStatus.SYNCING).icon == "arrow.triangle.2.circlepath"
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    display = describe(SyncStatus.SYNCED, last_sync=now - timedelta(minutes=5), now=now)
    assert display.text == "Last synced 5 minutes ago"


def test_relative_time() -> None:
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert relative_time(now - timedelta(seconds=10), now) == "just now"
    assert relative_time(now - timedelta(minutes=1), now) == "1 minute ago"
    assert relative_time(now - timedelta(hours=3), now) == "3 hours ago"
    assert relative_time(now - timedelta(days=1, hours=2), now) == "yesterday"
    assert relative_time(now - timedelta(days=4), now) == "4 days ago"


def test_monitor_checks_once_on_start() -> None:
    client = MagicMock()
    client.account_status.return_value = AccountStatus.NO_ACCOUNT
    monitor = SyncMonitor(client)
    client.account_status.assert_called_once_with()
    assert monitor.status == SyncStatus.NOT_SIGNED_IN
    assert monitor.display().icon == "person.crop.circle.badge.exclamationmark"


def test_monitor_failure_becomes_error_with_message() -> None:
    client = MagicMock()
    client.account_status.side_effect = SyncUnavailableError("Could not reach sync service: timed out")
    monitor = SyncMonitor(client)
    assert monitor.status == SyncStatus.ERROR
    assert monitor.display().text == "Could not reach sync service: timed out"


def test_monitor_transient_states_notify_listeners() -> None:
    client = MagicMock()
    monitor = SyncMonitor(client, check_on_start=False)
    client.account_status.assert_not_called()
    seen = []
    monitor.subscribe(seen.append)
    monitor.mark_syncing()
    monitor.mark_synced()
    monitor.mark_error("quota exceeded")
    assert [d.color for d in seen] == ["blue", "green", "red"]
    assert seen[-1].text == "quota exceeded"
    assert monitor.last_sync is not None


def test_fetch_does_not_touch_monitor_state() -> None:
    client = MagicMock()
    client.account_status.return_value = AccountStatus.RESTRICTED
    monitor = SyncMonitor(client, check_on_start=False)
    seen = []
    monitor.subscribe(seen.append)
    assert monitor.fetch_account_status() == AccountStatus.RESTRICTED
    assert monitor.status == SyncStatus.UNKNOWN
    assert seen == []


def test_apply_account_status_result_or_error() -> None:
    monitor = SyncMonitor(MagicMock(), check_on_start=False)
    seen = []
    monitor.subscribe(seen.append)
    assert monitor.apply_account_status(AccountStatus.AVAILABLE) == SyncStatus.SYNCED
    assert monitor.apply_account_status(SyncUnavailableError("offline")) == SyncStatus.ERROR
    assert monitor.error_message == "offline"
    assert [d.color for d in seen] == ["green", "red"]


def test_client_parses_status() -> None:
    http = MagicMock()
    http.get.return_value.json.return_value = {"status": "restricted"}
    client = AccountStatusClient(base_url="https://sync.example.com/", token="t", session=http)
    assert client.account_status() == AccountStatus.RESTRICTED
    url = http.get.call_args.args[0]
    assert url == "https://sync.example.com/account/status"
    assert http.get.call_args.kwargs["headers"]["Authorization"] == "Bearer t"

    http.get.return_value.json.return_value = {"status": "mystery"}
    assert client.account_status() == AccountStatus.COULD_NOT_DETERMINE


def test_client_errors() -> None:
    with pytest.raises(SyncUnavailableError):
        AccountStatusClient(base_url="", session=MagicMock()).account_status()
    http = MagicMock()
    http.get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(SyncUnavailableError):
        AccountStatusClient(base_url="https://sync.example.com", session=http).account_status()
