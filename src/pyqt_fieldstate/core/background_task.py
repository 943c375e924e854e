"""Background task that runs one validator call off the GUI thread."""

import asyncio
import inspect
import logging
from typing import Any, Callable, Tuple

from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)


class BackgroundTask(QThread):
    """
    Run a single call in a worker thread and report the outcome by signal.

    Coroutine functions are driven to completion with asyncio.run() inside
    the worker, so both blocking callables and async defs are accepted.

    Usage:
        task = BackgroundTask(target=check_username, args=("alice",))
        task.result_ready.connect(on_result)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()

    Signals are emitted from the worker thread; receivers living in the GUI
    thread get them through queued connections.
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)  # Full exception, caller decides

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self.cancelled = False

    def run(self):
        """Execute target in background, respecting cancellation."""
        try:
            result = self._call_target()
            if not self.cancelled:
                self.result_ready.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.error_occurred.emit(e)

    def cancel(self):
        """Cancel task: signals won't emit after this. The call itself keeps running."""
        self.cancelled = True

    def _call_target(self) -> Any:
        if inspect.iscoroutinefunction(self._target):
            return asyncio.run(self._target(*self._args))

        result = self._target(*self._args)
        if inspect.isawaitable(result):
            # Plain callable handing back a coroutine (e.g. a lambda wrapping an async def)
            return asyncio.run(_await(result))
        return result


async def _await(awaitable):
    return await awaitable
