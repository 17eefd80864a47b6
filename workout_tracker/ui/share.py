"""「分享给好友」按钮：分享中 → 已分享（3 秒后恢复）；失败弹出提示。"""
import logging
from typing import Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QMessageBox, QPushButton, QWidget

from workout_tracker.profile.setup import share_error_message
from workout_tracker.social.models import Workout
from workout_tracker.social.service import SocialService
from workout_tracker.ui.workers import CallWorker

logger = logging.getLogger(__name__)

SHARE_COMPLETE_RESET_MS = 3000


class ShareToFriendsButton(QPushButton):
    def __init__(self, social: SocialService, workout: Workout, parent: Optional[QWidget] = None):
        super().__init__("Share to Friends", parent)
        self._social = social
        self._workout = workout
        self.clicked.connect(self._share)

    def _share(self) -> None:
        confirm = QMessageBox.question(self, "Share Workout", "Share this workout with your friends?")
        if confirm != QMessageBox.StandardButton.Yes:
            return
        self.setEnabled(False)
        self.setText("Sharing...")
        worker = CallWorker(self._social.share_workout, self._workout)
        worker.finished_success.connect(self._on_shared)
        worker.finished_fail.connect(self._on_failed)
        worker.start()

    def _on_shared(self, _public) -> None:
        self.setText("✓ Shared")
        QTimer.singleShot(SHARE_COMPLETE_RESET_MS, self._reset)

    def _on_failed(self, error: Exception) -> None:
        logger.warning("Sharing %r failed: %s", self._workout.name, error)
        self._reset()
        QMessageBox.warning(self, "Share Failed", share_error_message(error))

    def _reset(self) -> None:
        self.setText("Share to Friends")
        self.setEnabled(True)
