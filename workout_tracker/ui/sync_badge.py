"""同步状态徽标：图标 + 文字，颜色随状态变化。"""
from typing import Optional

from PyQt6.QtCore import pyqtSlot
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from workout_tracker.sync.monitor import SyncMonitor
from workout_tracker.sync.status import StatusDisplay
from workout_tracker.ui.workers import CallWorker

# 状态图标名 → 界面上显示的字符
_GLYPHS = {
    "questionmark.circle": "?",
    "arrow.triangle.2.circlepath": "⟳",
    "checkmark.icloud": "✓",
    "exclamationmark.icloud": "!",
    "person.crop.circle.badge.exclamationmark": "👤",
    "wifi.slash": "⚠",
}

_QT_COLORS = {
    "gray": "#8e8e93",
    "blue": "#1e6fd9",
    "green": "#2e9d4f",
    "red": "#d93025",
    "orange": "#e8890c",
}


class SyncStatusBadge(QWidget):
    """创建时在后台检查一次账号状态。"""

    def __init__(self, monitor: SyncMonitor, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._monitor = monitor
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._icon = QLabel()
        self._text = QLabel()
        self._text.setWordWrap(True)
        layout.addWidget(self._icon)
        layout.addWidget(self._text, 1)
        self.render_display(monitor.display())
        # 后台只做查询，结果回到界面线程后再写入监视器
        worker = CallWorker(monitor.fetch_account_status)
        worker.finished_success.connect(self._on_checked)
        worker.finished_fail.connect(self._on_checked)
        worker.start()

    @pyqtSlot(object)
    def _on_checked(self, result) -> None:
        self._monitor.apply_account_status(result)
        self.render_display(self._monitor.display())

    def render_display(self, display: StatusDisplay) -> None:
        color = _QT_COLORS.get(display.color, display.color)
        self._icon.setText(_GLYPHS.get(display.icon, "•"))
        self._icon.setStyleSheet(f"color: {color}; font-size: 16px; font-weight: bold;")
        self._text.setText(display.text)
        self._text.setStyleSheet(f"color: {color};")
