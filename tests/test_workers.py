"""后台 Worker 测试：调用方丢掉引用后线程仍能安全结束。"""
import os
import time

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QCoreApplication

from workout_tracker.ui.workers import CallWorker


def _app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


def _process_until(app: QCoreApplication, done, timeout: float = 10.0) -> None:
    deadline = time.monotonic() + timeout
    while not done() and time.monotonic() < deadline:
        app.processEvents()
        time.sleep(0.005)


def test_dropped_workers_finish_and_deliver_results() -> None:
    app = _app()
    results = []
    for i in range(50):
        worker = CallWorker(lambda n=i: n)
        worker.finished_success.connect(results.append)
        worker.start()
        del worker
    _process_until(app, lambda: len(results) == 50 and CallWorker.running_count() == 0)
    assert sorted(results) == list(range(50))
    assert CallWorker.running_count() == 0


def test_worker_reports_exceptions() -> None:
    app = _app()
    errors = []

    def boom() -> None:
        raise ValueError("bad input")

    worker = CallWorker(boom)
    worker.finished_fail.connect(errors.append)
    worker.start()
    _process_until(app, lambda: len(errors) == 1 and CallWorker.running_count() == 0)
    assert isinstance(errors[0], ValueError)
    assert str(errors[0]) == "bad input"
