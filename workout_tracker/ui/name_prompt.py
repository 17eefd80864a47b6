"""填写名称：自动推导不出显示名称时询问用户。"""
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QMessageBox,
    QWidget,
)

from workout_tracker.auth.session import SessionState


class NamePromptDialog(QDialog):
    def __init__(self, session: SessionState, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._session = session
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle("What's your name?")
        self.setFixedSize(320, 160)
        layout = QVBoxLayout(self)

        hint = QLabel("Tell us what to call you. This is shown on your profile.")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        self._name = QLineEdit(self._session.display_name)
        self._name.setPlaceholderText("Your name")
        self._name.returnPressed.connect(self._save)
        layout.addWidget(self._name)

        btn_save = QPushButton("Continue")
        btn_save.clicked.connect(self._save)
        layout.addWidget(btn_save)

    def _save(self) -> None:
        name = self._name.text().strip()
        if not name:
            QMessageBox.warning(self, "Name", "Please enter a name")
            return
        self._session.set_display_name(name)
        self.accept()
