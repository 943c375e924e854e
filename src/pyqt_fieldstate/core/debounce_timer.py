"""Reusable trailing debounce timer that remembers the last trigger's arguments."""

import logging
from typing import Any, Callable, Optional, Tuple

from PyQt6.QtCore import QTimer

logger = logging.getLogger(__name__)


class DebounceTimer:
    """
    Trailing debounce timer.

    Each trigger replaces the pending one. The handler fires only after
    delay_ms of inactivity, receiving the arguments of the last trigger.

    Usage:
        self._debounce = DebounceTimer(delay_ms=300, handler=self._run_check)

        def on_value_changed(self, value):
            self._debounce.trigger(value)  # Restarts timer, keeps newest value
    """

    def __init__(self, delay_ms: int, handler: Callable[..., None]):
        self._delay_ms = delay_ms
        self._handler = handler
        self._timer: Optional[QTimer] = None
        self._pending_args: Tuple[Any, ...] = ()

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def is_pending(self) -> bool:
        """True while a trigger is waiting to fire."""
        return self._timer is not None and self._timer.isActive()

    def trigger(self, *args: Any) -> None:
        """Trigger debounce: cancels the pending call and restarts the timer."""
        if self._timer is not None:
            self._timer.stop()

        self._pending_args = args
        self._timer = QTimer()
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._timer.start(self._delay_ms)
        logger.debug(f"Debounce armed for {self._delay_ms}ms")

    def cancel(self) -> None:
        """Cancel pending trigger."""
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        self._pending_args = ()

    def _fire(self) -> None:
        args = self._pending_args
        self._pending_args = ()
        logger.debug("Debounce fired")
        self._handler(*args)
