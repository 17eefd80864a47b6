"""创建社交主页：用户名、显示名称、简介。"""
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QFormLayout,
    QWidget,
)

from workout_tracker.profile.setup import (
    is_valid_profile_input,
    normalize_username,
    profile_error_message,
)
from workout_tracker.social.models import UserProfile
from workout_tracker.social.service import SocialService
from workout_tracker.ui.workers import CallWorker


class ProfileSetupDialog(QDialog):
    def __init__(self, social: SocialService, display_name: str = "", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._social = social
        self._busy = False
        self._profile: Optional[UserProfile] = None
        self.setup_ui(display_name)

    def setup_ui(self, display_name: str) -> None:
        self.setWindowTitle("Create Profile")
        self.setMinimumWidth(360)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self._username = QLineEdit()
        self._username.textChanged.connect(self._validate)
        form.addRow("Username:", self._username)
        self._display_name = QLineEdit(display_name)
        self._display_name.textChanged.connect(self._validate)
        form.addRow("Display name:", self._display_name)
        self._bio = QPlainTextEdit()
        self._bio.setPlaceholderText("Bio (optional)")
        self._bio.setFixedHeight(70)
        form.addRow("Bio:", self._bio)
        layout.addLayout(form)

        footer = QLabel("Your username must be unique and can only contain letters, numbers, and underscores.")
        footer.setWordWrap(True)
        footer.setStyleSheet("color: gray; font-size: 11px;")
        layout.addWidget(footer)

        self._error = QLabel()
        self._error.setWordWrap(True)
        self._error.setStyleSheet("color: red;")
        self._error.setVisible(False)
        layout.addWidget(self._error)

        self._btn_create = QPushButton("Create")
        self._btn_create.clicked.connect(self._create)
        layout.addWidget(self._btn_create)
        self._btn_cancel = QPushButton("Cancel")
        self._btn_cancel.clicked.connect(self.reject)
        layout.addWidget(self._btn_cancel)
        self._validate()

    def _validate(self) -> None:
        valid = is_valid_profile_input(self._username.text(), self._display_name.text())
        self._btn_create.setEnabled(valid and not self._busy)

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        for w in (self._username, self._display_name, self._bio, self._btn_cancel):
            w.setEnabled(not busy)
        self._btn_create.setText("Creating…" if busy else "Create")

    def _create(self) -> None:
        self._error.setVisible(False)
        self._set_busy(True)
        worker = CallWorker(
            self._social.create_user_profile,
            normalize_username(self._username.text()),
            self._display_name.text(),
            self._bio.toPlainText(),
        )
        worker.finished_success.connect(self._on_created)
        worker.finished_fail.connect(self._on_failed)
        self._validate()
        worker.start()

    def _on_created(self, profile: UserProfile) -> None:
        self._profile = profile
        self.accept()

    def _on_failed(self, error: Exception) -> None:
        self._set_busy(False)
        self._error.setText(profile_error_message(error, self._username.text()))
        self._error.setVisible(True)
        self._validate()

    def profile(self) -> Optional[UserProfile]:
        return self._profile
