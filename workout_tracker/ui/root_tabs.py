"""主窗口：个人（资料、同步状态、退出登录）/ 训练（记录并分享）两个标签页。"""
import logging
from typing import List, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMessageBox,
    QPushButton,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from workout_tracker.auth.models import Session
from workout_tracker.auth.session import SessionState
from workout_tracker.config import WINDOW_HEIGHT, WINDOW_WIDTH
from workout_tracker.profile.store import ProfileStore
from workout_tracker.social.models import UserProfile, Workout
from workout_tracker.social.service import SocialService
from workout_tracker.sync.monitor import SyncMonitor
from workout_tracker.ui.edit_profile import EditProfileDialog
from workout_tracker.ui.name_prompt import NamePromptDialog
from workout_tracker.ui.profile_setup import ProfileSetupDialog
from workout_tracker.ui.share import ShareToFriendsButton
from workout_tracker.ui.sync_badge import SyncStatusBadge
from workout_tracker.ui.workers import CallWorker

logger = logging.getLogger(__name__)


class ProfileTab(QWidget):
    signOutRequested = pyqtSignal()

    def __init__(
        self,
        session: SessionState,
        profile_store: ProfileStore,
        social: SocialService,
        sync_monitor: SyncMonitor,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._session = session
        self._profile_store = profile_store
        self._social = social
        layout = QVBoxLayout(self)

        self._name = QLabel()
        self._name.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(self._name)
        self._detail = QLabel()
        self._detail.setStyleSheet("color: gray;")
        layout.addWidget(self._detail)
        self._bio = QLabel()
        self._bio.setWordWrap(True)
        layout.addWidget(self._bio)

        layout.addWidget(SyncStatusBadge(sync_monitor, self))

        btn_name = QPushButton("Change Name")
        btn_name.clicked.connect(self._change_name)
        layout.addWidget(btn_name)
        btn_edit = QPushButton("Edit Profile")
        btn_edit.clicked.connect(self._edit_profile)
        layout.addWidget(btn_edit)
        self._btn_social = QPushButton("Create Social Profile")
        self._btn_social.clicked.connect(self._create_social_profile)
        layout.addWidget(self._btn_social)
        layout.addStretch(1)
        btn_sign_out = QPushButton("Sign Out")
        btn_sign_out.clicked.connect(self._sign_out)
        layout.addWidget(btn_sign_out)

        session.subscribe(self._on_session_changed)
        self._on_session_changed(session.snapshot())
        self._load_social_profile()

    def _on_session_changed(self, snapshot: Session) -> None:
        local = self._profile_store.load()
        self._name.setText(snapshot.display_name or local.display_name or "Athlete")
        if self._session.is_guest:
            self._detail.setText("Guest account")
        else:
            self._detail.setText(snapshot.email or snapshot.user_id)
        self._bio.setText(local.bio)
        self._bio.setVisible(bool(local.bio))

    def detach(self) -> None:
        self._session.unsubscribe(self._on_session_changed)

    def _change_name(self) -> None:
        NamePromptDialog(self._session, self).exec()

    def _edit_profile(self) -> None:
        if EditProfileDialog(self._profile_store, self).exec() == QDialog.DialogCode.Accepted:
            self._on_session_changed(self._session.snapshot())

    def _create_social_profile(self) -> None:
        dlg = ProfileSetupDialog(self._social, self._session.display_name, self)
        dlg.exec()
        # 创建被拒绝时服务端已有的主页也会成为当前主页
        profile = dlg.profile() or self._social.current_user_profile
        if profile is not None:
            self._show_social_profile(profile)

    def _load_social_profile(self) -> None:
        self._btn_social.setEnabled(False)
        self._btn_social.setText("Checking social profile...")
        worker = CallWorker(self._social.fetch_current_user_profile)
        worker.finished_success.connect(self._on_social_loaded)
        worker.finished_fail.connect(self._on_social_failed)
        worker.start()

    def _on_social_loaded(self, profile: Optional[UserProfile]) -> None:
        if profile is None:
            self._btn_social.setText("Create Social Profile")
            self._btn_social.setEnabled(True)
        else:
            self._show_social_profile(profile)

    def _on_social_failed(self, error: Exception) -> None:
        logger.warning("Loading the social profile failed: %s", error)
        self._btn_social.setText("Create Social Profile")
        self._btn_social.setEnabled(True)

    def _show_social_profile(self, profile: UserProfile) -> None:
        self._btn_social.setText(f"Social profile: @{profile.username}")
        self._btn_social.setEnabled(False)

    def _sign_out(self) -> None:
        confirm = QMessageBox.question(self, "Sign Out", "Are you sure you want to sign out?")
        if confirm == QMessageBox.StandardButton.Yes:
            self.signOutRequested.emit()


class WorkoutsTab(QWidget):
    """本次运行中记录的训练，每条可分享给好友。"""

    def __init__(self, social: SocialService, workouts: Optional[List[Workout]] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._social = social
        layout = QVBoxLayout(self)

        row = QHBoxLayout()
        self._name = QLineEdit()
        self._name.setPlaceholderText("Workout name, e.g. Push Day")
        row.addWidget(self._name, 1)
        self._completed = QCheckBox("Completed")
        row.addWidget(self._completed)
        btn_add = QPushButton("Add")
        btn_add.clicked.connect(self._add_from_form)
        row.addWidget(btn_add)
        layout.addLayout(row)

        self._list = QListWidget()
        layout.addWidget(self._list, 1)
        for workout in workouts or []:
            self.add_workout(workout)

    def _add_from_form(self) -> None:
        name = self._name.text().strip()
        if not name:
            return
        self.add_workout(Workout(name=name, is_completed=self._completed.isChecked()))
        self._name.clear()
        self._completed.setChecked(False)

    def add_workout(self, workout: Workout) -> None:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(4, 2, 4, 2)
        label = QLabel(f"{workout.name} · {workout.date:%b %d}")
        row_layout.addWidget(label, 1)
        row_layout.addWidget(ShareToFriendsButton(self._social, workout, row))
        item = QListWidgetItem()
        item.setSizeHint(row.sizeHint())
        self._list.addItem(item)
        self._list.setItemWidget(item, row)


class RootTabWindow(QWidget):
    """登录后的主界面。点「退出登录」时清空会话并发出 signOutRequested。"""
    signOutRequested = pyqtSignal()

    def __init__(
        self,
        session: SessionState,
        profile_store: ProfileStore,
        social: SocialService,
        sync_monitor: SyncMonitor,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._session = session
        self.setWindowTitle("Workout Tracker")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        layout = QVBoxLayout(self)
        tabs = QTabWidget()
        self._profile_tab = ProfileTab(session, profile_store, social, sync_monitor)
        self._profile_tab.signOutRequested.connect(self._sign_out)
        tabs.addTab(self._profile_tab, "Profile")
        tabs.addTab(WorkoutsTab(social), "Workouts")
        layout.addWidget(tabs)

    def _sign_out(self) -> None:
        self._profile_tab.detach()
        self._session.sign_out()
        self.signOutRequested.emit()
