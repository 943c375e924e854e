"""
Single form field controller.

Owns one field's FieldState, applies the sync validator on mutation and runs
a debounced async validator in a background thread. Every mutation publishes
a new immutable snapshot through an Observable.

Async results are applied on top of whatever state is current when they
arrive, so the published error can belong to an older value if the value
changed while the validator was running. Last result wins.
"""

import logging
from typing import Callable, Generic, Optional, Set, TypeVar

from PyQt6.QtCore import QObject, pyqtSlot

from pyqt_fieldstate.core.background_task import BackgroundTask
from pyqt_fieldstate.core.debounce_timer import DebounceTimer
from pyqt_fieldstate.exceptions import InvalidDebounceIntervalError
from pyqt_fieldstate.protocols.field_config import get_field_config
from pyqt_fieldstate.protocols.observable import Observable
from pyqt_fieldstate.state.field_state import FieldState
from pyqt_fieldstate.state.observable_state import ObservableState
from pyqt_fieldstate.state.validators import AsyncValidator, Validator, always_valid

logger = logging.getLogger(__name__)

# Debug flag for verbose transition logging
DEBUG_FIELD_CONTROLLER = False

T = TypeVar("T")
E = TypeVar("E")


class FieldController(QObject, Generic[T, E]):
    """
    A single form field which can be validated.

    T is the held value, E the error type. None is never a valid error so
    that a missing error unambiguously means the value is valid.

    Usage:
        age = FieldController(
            initial_value=0,
            validator=lambda v: "negative" if v < 0 else None,
        )
        age.observable.on_change(render_age)
        age.set_autovalidate(True)
        age.set_value(-1)  # state.error == "negative"
    """

    def __init__(
        self,
        initial_value: T,
        validator: Optional[Validator] = None,
        async_validator: Optional[AsyncValidator] = None,
        debounce_ms: Optional[int] = None,
        observable: Optional[Observable] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        if debounce_ms is None:
            debounce_ms = get_field_config().async_debounce_ms
        if debounce_ms < 0:
            raise InvalidDebounceIntervalError(debounce_ms)

        self._validator: Validator = validator if validator is not None else always_valid
        self._async_validator = async_validator
        self._debounce = DebounceTimer(delay_ms=debounce_ms, handler=self._start_async_validation)
        self._tasks: Set[BackgroundTask] = set()
        self._closed = False

        initial = FieldState.initial(initial_value)
        if observable is None:
            observable = ObservableState(initial, parent=self)
        else:
            observable.update(initial)
        self._observable = observable

    # ========== READ ACCESS ==========

    @property
    def state(self) -> FieldState[T, E]:
        """Current snapshot."""
        return self._observable.value()

    @property
    def observable(self) -> Observable:
        """The observable snapshots are published through. Subscribe here."""
        return self._observable

    @property
    def debounce_ms(self) -> int:
        """Quiet period in ms before the async validator runs."""
        return self._debounce.delay_ms

    @property
    def has_pending_validation(self) -> bool:
        """True while an async validation is debounced or running."""
        return self._debounce.is_pending or bool(self._tasks)

    # ========== VALUE ==========

    def set_value(self, value: T, force: bool = False) -> None:
        """
        Set a new value.

        When force is True the value is always updated. Otherwise, if the
        field is read-only, this is a no-op. The async validator (if any) is
        scheduled but not awaited. With autovalidate off the current error is
        carried over unchanged.
        """
        state = self.state
        if state.read_only and not force:
            logger.debug(f"set_value ignored on read-only field (value={value!r})")
            return

        if self._async_validator is not None and not self._closed:
            self._debounce.trigger(value)

        error = self._validator(value) if state.autovalidate else state.error
        self._emit(state.with_changes(value=value, error=error))

    def get_value_setter(self) -> Optional[Callable[[T], None]]:
        """
        Return None if the field is read-only, otherwise set_value.

        Useful where a None change callback is how a control gets disabled.
        """
        if self.state.read_only:
            return None
        return self.set_value

    # ========== ERRORS ==========

    def set_error(self, error: Optional[E]) -> None:
        """Publish a snapshot with a new error. No validator runs."""
        self._emit(self.state.with_changes(error=error))

    def validate(self) -> bool:
        """
        Run the sync validator against the current value.

        An error returned by the validator is published. Returns True if the
        resulting state has no error. The async validator is not involved.
        """
        error = self._validator(self.state.value)
        if error is not None:
            self._emit(self.state.with_changes(error=error))
        return self.state.is_valid

    def clear_errors(self) -> None:
        """Clear the error on this field."""
        self._emit(self.state.with_changes(error=None))

    # ========== FLAGS ==========

    def set_autovalidate(self, autovalidate: bool) -> None:
        """When autovalidate is True, setting a new value triggers validation."""
        self._emit(self.state.with_changes(autovalidate=autovalidate))

    def set_edited_manually(self, edited_manually: bool) -> None:
        """Set the caller-owned edited_manually flag."""
        self._emit(self.state.with_changes(edited_manually=edited_manually))

    def mark_read_only(self) -> None:
        """Prevent further value changes."""
        self._emit(self.state.with_changes(read_only=True))

    def unmark_read_only(self) -> None:
        """Allow further value changes."""
        self._emit(self.state.with_changes(read_only=False))

    # ========== TEARDOWN ==========

    def close(self) -> None:
        """Cancel pending async validation and wait for running validator threads."""
        self._closed = True
        self._debounce.cancel()

        wait_ms = get_field_config().task_wait_ms
        for task in list(self._tasks):
            task.cancel()
            if not task.wait(wait_ms):
                logger.warning(f"Async validator still running after {wait_ms}ms on close")
                continue
            self._tasks.discard(task)

    # ========== ASYNC VALIDATION ==========

    def _start_async_validation(self, value: T) -> None:
        if self._closed:
            return

        task = BackgroundTask(target=self._async_validator, args=(value,))
        task.result_ready.connect(self._on_async_result)
        task.error_occurred.connect(self._on_async_error)
        task.finished.connect(self._on_task_finished)
        self._tasks.add(task)
        logger.debug(f"Async validation started (value={value!r}, running={len(self._tasks)})")
        task.start()

    @pyqtSlot(object)
    def _on_async_result(self, error: Optional[E]) -> None:
        if self._closed:
            return
        if DEBUG_FIELD_CONTROLLER:
            logger.info(f"Async validation resolved: error={error!r}")
        self._emit(self.state.with_changes(error=error))

    @pyqtSlot(object)
    def _on_async_error(self, exc: Exception) -> None:
        logger.exception("Async validator raised; field state left unchanged", exc_info=exc)

    @pyqtSlot()
    def _on_task_finished(self) -> None:
        task = self.sender()
        if task not in self._tasks:
            return
        task.wait()
        self._tasks.discard(task)
        task.deleteLater()
        logger.debug(f"Async validation finished (running={len(self._tasks)})")

    def _emit(self, state: FieldState[T, E]) -> None:
        if DEBUG_FIELD_CONTROLLER:
            logger.info(f"Publishing {state!r}")
        self._observable.update(state)
