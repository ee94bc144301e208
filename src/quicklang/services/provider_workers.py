"""Async workers for non-blocking provider calls using Qt threading."""

import logging
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(object)  # Exception raised by the provider
    result = Signal(object)


class ProviderCallWorker(QRunnable):
    """
    Worker that runs one blocking provider call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when the call returns or raises.
    """

    def __init__(self, call: Callable[[], Any]):
        super().__init__()
        self.call = call
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the provider call in background thread."""
        try:
            value = self.call()
            self.signals.result.emit(value)
        except Exception as e:
            self.signals.error.emit(e)
        finally:
            self.signals.finished.emit()


class _ProviderCallReceiver(QObject):
    """Main-thread helper that relays worker results to plain callbacks."""

    def __init__(
        self,
        on_result: Callable[[Any], None],
        on_error: Callable[[Exception], None],
        runner: "QtTaskRunner",
        worker: ProviderCallWorker,
    ):
        super().__init__()
        self._on_result = on_result
        self._on_error = on_error
        self._runner = runner
        self._worker = worker

    @Slot(object)
    def handle_result(self, value):
        self._on_result(value)

    @Slot(object)
    def handle_error(self, error):
        self._on_error(error)

    @Slot()
    def handle_finished(self):
        self._runner._release(self)


class QtTaskRunner:
    """
    Runs provider calls on a QThreadPool and delivers results on the thread
    that created the runner (the UI thread).
    """

    def __init__(self, thread_pool: QThreadPool | None = None):
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        # Receivers must outlive their workers or queued results are lost
        self._receivers: set[_ProviderCallReceiver] = set()
        logger.debug("Thread pool max threads: %d", self.thread_pool.maxThreadCount())

    def start(
        self,
        call: Callable[[], Any],
        on_result: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        """Run ``call`` in the background; exactly one callback fires afterwards."""
        worker = ProviderCallWorker(call)
        receiver = _ProviderCallReceiver(on_result, on_error, self, worker)
        self._receivers.add(receiver)

        worker.signals.result.connect(receiver.handle_result)
        worker.signals.error.connect(receiver.handle_error)
        worker.signals.finished.connect(receiver.handle_finished)

        self.thread_pool.start(worker)

    @property
    def active_count(self) -> int:
        return len(self._receivers)

    def _release(self, receiver: _ProviderCallReceiver) -> None:
        self._receivers.discard(receiver)
