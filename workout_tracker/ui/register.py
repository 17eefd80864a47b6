"""创建账号对话框：账号、密码、确认密码、姓名、邮箱。"""
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QLineEdit,
    QPushButton,
    QFormLayout,
    QMessageBox,
    QWidget,
)

from workout_tracker.auth.models import SignInError
from workout_tracker.auth.provider import IdentityProvider


class RegisterDialog(QDialog):
    """注册成功后返回用户名，由登录页继续完成授权。"""

    def __init__(self, provider: IdentityProvider, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._provider = provider
        self._username_value = ""
        self.setup_ui()

    def setup_ui(self) -> None:
        self.setWindowTitle("Create Account")
        self.setFixedSize(340, 300)
        layout = QVBoxLayout(self)

        form = QFormLayout()
        self._username = QLineEdit()
        form.addRow("Username:", self._username)
        self._password = QLineEdit()
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        form.addRow("Password:", self._password)
        self._password2 = QLineEdit()
        self._password2.setEchoMode(QLineEdit.EchoMode.Password)
        form.addRow("Confirm:", self._password2)
        self._given_name = QLineEdit()
        self._given_name.setPlaceholderText("Optional")
        form.addRow("First name:", self._given_name)
        self._family_name = QLineEdit()
        self._family_name.setPlaceholderText("Optional")
        form.addRow("Last name:", self._family_name)
        self._email = QLineEdit()
        self._email.setPlaceholderText("Optional")
        form.addRow("Email:", self._email)
        layout.addLayout(form)

        btn_register = QPushButton("Create Account")
        btn_register.clicked.connect(self._do_register)
        layout.addWidget(btn_register)
        btn_back = QPushButton("Back")
        btn_back.clicked.connect(self.reject)
        layout.addWidget(btn_back)

    def _do_register(self) -> None:
        username = self._username.text().strip()
        password = self._password.text()
        if password != self._password2.text():
            QMessageBox.warning(self, "Create Account", "Passwords do not match")
            return
        if len(password) < 4:
            QMessageBox.warning(self, "Create Account", "Password must be at least 4 characters")
            return
        try:
            self._provider.register(
                username,
                password,
                given_name=self._given_name.text().strip() or None,
                family_name=self._family_name.text().strip() or None,
                email=self._email.text().strip() or None,
            )
        except SignInError as e:
            QMessageBox.warning(self, "Create Account", str(e))
            return
        self._username_value = username
        self.accept()

    def username(self) -> str:
        return self._username_value
