"""后台 Worker（QThread）：网络请求不阻塞界面，完成后通过信号回到界面线程。

Worker 从 start() 起由类级集合持有，线程结束后才在界面线程里放开引用；
发起调用的界面可以先关闭或丢掉引用，线程不会在运行中被销毁。
"""
from functools import partial
from typing import Any, Callable, Set

from PyQt6.QtCore import QThread, QTimer, pyqtSignal, pyqtSlot


class CallWorker(QThread):
    """在后台线程执行一个调用。"""
    finished_success = pyqtSignal(object)  # 返回值
    finished_fail = pyqtSignal(object)     # 异常

    _running: Set["CallWorker"] = set()

    def __init__(self, fn: Callable[..., Any], *args: Any, **kwargs: Any):
        super().__init__()
        self._fn = fn
        self._args = args
        self._kwargs = kwargs
        # worker 对象属于界面线程，finished 以排队方式回到界面线程
        self.finished.connect(self._release)

    @classmethod
    def running_count(cls) -> int:
        return len(cls._running)

    def start(self, *args: Any) -> None:
        CallWorker._running.add(self)
        super().start(*args)

    @pyqtSlot()
    def _release(self) -> None:
        self.wait()
        # 不能在自己的槽里销毁自己，下一轮事件循环再放开最后一个引用
        QTimer.singleShot(0, partial(CallWorker._running.discard, self))

    def run(self) -> None:
        try:
            result = self._fn(*self._args, **self._kwargs)
        except Exception as e:
            self.finished_fail.emit(e)
        else:
            self.finished_success.emit(result)
