"""编辑资料：全名、简介、链接（保存在本机）。"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QFormLayout,
    QWidget,
)

from workout_tracker.profile.models import LocalProfile
from workout_tracker.profile.store import ProfileStore


class EditProfileDialog(QDialog):
    def __init__(self, store: ProfileStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._store = store
        self._profile = store.load()
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle("Edit Profile")
        self.setMinimumWidth(360)
        layout = QVBoxLayout(self)

        self._avatar = QLabel(self._profile.avatar_initial())
        self._avatar.setFixedSize(90, 90)
        self._avatar.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._avatar.setStyleSheet(
            "background: #1e6fd9; color: white; border-radius: 45px; font-size: 40px; font-weight: bold;"
        )
        layout.addWidget(self._avatar, alignment=Qt.AlignmentFlag.AlignCenter)

        form = QFormLayout()
        self._display_name = QLineEdit(self._profile.display_name)
        self._display_name.setPlaceholderText("Your full name")
        self._display_name.textChanged.connect(self._update_avatar)
        form.addRow("Name:", self._display_name)
        self._bio = QPlainTextEdit(self._profile.bio)
        self._bio.setPlaceholderText("Describe yourself")
        self._bio.setFixedHeight(80)
        form.addRow("Bio:", self._bio)
        self._link = QLineEdit(self._profile.link)
        self._link.setPlaceholderText("https://example.com")
        form.addRow("Link:", self._link)
        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self._save)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _update_avatar(self, text: str) -> None:
        self._avatar.setText(LocalProfile(display_name=text).avatar_initial())

    def _save(self) -> None:
        self._profile = LocalProfile(
            display_name=self._display_name.text().strip(),
            bio=self._bio.toPlainText().strip(),
            link=self._link.text().strip(),
        )
        self._store.save(self._profile)
        self.accept()

    def profile(self) -> LocalProfile:
        return self._profile
