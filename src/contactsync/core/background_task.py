"""Background tasks with sequence-tagged settlement and cleanup."""

import logging
from typing import Callable, Any, Optional, Tuple, Set

from PyQt6.QtCore import QThread, QCoreApplication, QDeadlineTimer, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time per task during view cleanup


class BackgroundTask(QThread):
    """
    Runs one callable on a worker thread and reports its settlement.

    Signals are emitted from the worker thread; receivers living on the GUI
    thread get them through queued connections, so every callback runs on
    the single GUI thread.

    Usage:
        task = BackgroundTask(target=service.list_contacts, args=("asc",))
        task.result_ready.connect(on_success)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        sequence: int = 0,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.sequence = sequence
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._target(*self._args, **self._kwargs)
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Suppress this task's signals. The callable still runs to completion."""
        self.cancelled = True


class BackgroundTaskManager:
    """
    Owns the background fetches of one view instance.

    Each run() gets a monotonically increasing sequence id. Only the most
    recently issued run may deliver its settlement; earlier runs still
    finish (there is no real cancellation of the target) but their results
    are dropped.

    Usage in widget:
        self._tasks = BackgroundTaskManager("contacts")

        def refresh(self):
            self._tasks.run(
                target=self.service.list_contacts,
                args=(self.order_by,),
                on_success=self._on_loaded,
                on_error=self._on_failed,
            )

        def closeEvent(self, event):
            self._tasks.cleanup()
            super().closeEvent(event)
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name or "tasks"
        self._sequence = 0
        self._live_tasks: Set[BackgroundTask] = set()

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def has_pending(self) -> bool:
        return any(not task.cancelled for task in self._live_tasks)

    def is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> BackgroundTask:
        """
        Start target on a worker thread, superseding any earlier run.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Callback for successful result (GUI thread)
            on_error: Callback for error (receives Exception, not str)

        Returns:
            The started BackgroundTask
        """
        self._sequence += 1
        sequence = self._sequence

        # Earlier runs can no longer win; silence the ones still running
        for task in self._live_tasks:
            task.cancel()

        def wrapped_success(result):
            if not self.is_current(sequence):
                logger.debug(f"[{self._name}] dropped stale result #{sequence} (latest #{self._sequence})")
                return
            if on_success:
                on_success(result)

        def wrapped_error(error):
            if not self.is_current(sequence):
                logger.debug(f"[{self._name}] dropped stale error #{sequence}: {error!r}")
                return
            if on_error:
                on_error(error)

        # Owned by the application so the thread outlives this manager if needed
        task = BackgroundTask(target=target, args=args, kwargs=kwargs, sequence=sequence,
                              parent=QCoreApplication.instance())
        task.result_ready.connect(wrapped_success)
        task.error_occurred.connect(wrapped_error)
        task.finished.connect(lambda: self._live_tasks.discard(task))
        task.finished.connect(task.deleteLater)

        self._live_tasks.add(task)
        logger.debug(f"[{self._name}] started task #{sequence}")
        task.start()
        return task

    def invalidate(self) -> None:
        """Make every issued run stale without starting a new one."""
        self._sequence += 1
        for task in self._live_tasks:
            task.cancel()

    def wait_for_idle(self, timeout_ms: int = 5000) -> bool:
        """
        Block until live tasks finish, then deliver their queued signals.

        Returns:
            True if every task finished within the timeout
        """
        deadline = QDeadlineTimer(timeout_ms)
        finished = True
        for task in list(self._live_tasks):
            finished = task.wait(deadline) and finished
        QCoreApplication.sendPostedEvents()
        QCoreApplication.processEvents()
        return finished

    def cleanup(self):
        """Silence and wait for live tasks. Call from closeEvent."""
        self.invalidate()
        for task in list(self._live_tasks):
            if task.isRunning() and not task.wait(CLEANUP_WAIT_MS):
                logger.warning(f"[{self._name}] task #{task.sequence} still running after cleanup wait")
