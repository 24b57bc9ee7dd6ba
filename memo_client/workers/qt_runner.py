from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, QTimer, Signal, Slot

from memo_client.core.tasks import DoneCallback, ErrorCallback, Job, TaskRunner
from memo_client.logging_setup import get_logger

log = get_logger("workers")


class ApiCallSignals(QObject):
    finished = Signal(int, object)   # req_id, result
    failed = Signal(int, object)     # req_id, exception


class ApiCallWorker(QRunnable):
    """Runs one blocking API call off the UI thread."""

    def __init__(self, *, req_id: int, job: Job):
        super().__init__()
        self.req_id = req_id
        self.job = job
        self.signals = ApiCallSignals()

    def run(self):
        try:
            result = self.job()
        except Exception as e:
            self.signals.failed.emit(self.req_id, e)
            return
        self.signals.finished.emit(self.req_id, result)


class QtTaskRunner(QObject, TaskRunner):
    """
    TaskRunner на QThreadPool.

    Колбэки вызываются в GUI-потоке: сигналы воркера доставляются сюда через
    queued connection, поэтому состояние трогает только UI-поток.
    """

    def __init__(self, parent: Optional[QObject] = None, pool: Optional[QThreadPool] = None):
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._req_id = 0
        self._pending: dict[int, tuple[ApiCallWorker, DoneCallback, ErrorCallback]] = {}

    def submit(self, job: Job, on_done: DoneCallback, on_error: ErrorCallback) -> None:
        self._req_id += 1
        req_id = self._req_id

        worker = ApiCallWorker(req_id=req_id, job=job)
        worker.signals.finished.connect(self._on_finished)
        worker.signals.failed.connect(self._on_failed)
        # держим ссылку на воркер, иначе его сигналы могут умереть раньше времени
        self._pending[req_id] = (worker, on_done, on_error)
        self._pool.start(worker)

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> None:
        QTimer.singleShot(int(delay_ms), fn)

    @Slot(int, object)
    def _on_finished(self, req_id: int, result) -> None:
        entry = self._pending.pop(req_id, None)
        if entry is None:
            return
        _, on_done, _ = entry
        on_done(result)

    @Slot(int, object)
    def _on_failed(self, req_id: int, exc) -> None:
        entry = self._pending.pop(req_id, None)
        if entry is None:
            return
        _, _, on_error = entry
        on_error(exc)
