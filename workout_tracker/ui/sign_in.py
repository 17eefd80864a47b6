"""登录页：账号登录 / 创建账号 / 访客进入；开发构建可跳过登录。"""
from typing import Optional, Union

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QFormLayout,
    QMessageBox,
    QWidget,
)

from workout_tracker.auth.models import SignInCredential, SignInError
from workout_tracker.auth.provider import IdentityProvider
from workout_tracker.auth.session import SessionState
from workout_tracker.ui.register import RegisterDialog


class SignInDialog(QDialog):
    """登录成功（或访客进入）后 accept；会话由 SessionState 更新并保存。"""

    def __init__(
        self,
        session: SessionState,
        provider: IdentityProvider,
        show_debug_skip: bool = False,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._session = session
        self._provider = provider
        self._show_debug_skip = show_debug_skip
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle("Workout Tracker - Sign In")
        self.setFixedSize(380, 420 if self._show_debug_skip else 380)
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        title = QLabel("🏋 Workout Tracker")
        title.setStyleSheet("font-size: 22px; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Track your workouts, build muscle, and achieve your fitness goals")
        subtitle.setWordWrap(True)
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("color: gray;")
        layout.addWidget(subtitle)

        form = QFormLayout()
        self._username = QLineEdit()
        form.addRow("Username:", self._username)
        self._password = QLineEdit()
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        self._password.returnPressed.connect(self._on_sign_in)
        form.addRow("Password:", self._password)
        layout.addLayout(form)

        btn_sign_in = QPushButton("Sign In")
        btn_sign_in.setMinimumHeight(40)
        btn_sign_in.clicked.connect(self._on_sign_in)
        layout.addWidget(btn_sign_in)

        btn_register = QPushButton("Create Account")
        btn_register.clicked.connect(self._on_register)
        layout.addWidget(btn_register)

        btn_guest = QPushButton("Continue as Guest")
        btn_guest.clicked.connect(self._on_guest)
        layout.addWidget(btn_guest)

        if self._show_debug_skip:
            btn_skip = QPushButton("Skip Sign In (Debug Only)")
            btn_skip.setStyleSheet("color: orange;")
            btn_skip.clicked.connect(self._on_debug_skip)
            layout.addWidget(btn_skip)

        footer = QLabel("Your data stays on your device")
        footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        footer.setStyleSheet("color: gray; font-size: 11px;")
        layout.addWidget(footer)

        btn_quit = QPushButton("Quit")
        btn_quit.clicked.connect(self.reject)
        layout.addWidget(btn_quit)

    def _authorize(self) -> Union[SignInCredential, SignInError]:
        try:
            return self._provider.authorize(self._username.text(), self._password.text())
        except SignInError as e:
            return e

    def _on_sign_in(self) -> None:
        if not self._username.text().strip() or not self._password.text():
            QMessageBox.warning(self, "Sign In", "Please enter your username and password")
            return
        try:
            self._session.complete_sign_in(self._authorize())
        except SignInError as e:
            QMessageBox.warning(self, "Sign In Failed", str(e))
            return
        self.accept()

    def _on_register(self) -> None:
        dlg = RegisterDialog(self._provider, self)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            self._username.setText(dlg.username())
            self._password.clear()
            self._password.setFocus()

    def _on_guest(self) -> None:
        self._session.continue_as_guest()
        self.accept()

    def _on_debug_skip(self) -> None:
        self._session.debug_skip_sign_in()
        self.accept()
