"""Qt-signal implementation of the Observable contract."""

import logging
from abc import ABCMeta
from typing import Optional, TypeVar

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_fieldstate.protocols.observable import Listener, Observable, Unsubscribe

logger = logging.getLogger(__name__)

S = TypeVar("S")


# Qt's metaclass combined with ABCMeta so QObject subclasses can implement ABCs
class PyQtABCMeta(type(QObject), ABCMeta):
    """Metaclass for QObjects that implement an ABC."""
    pass


class ObservableState(QObject, Observable[S], metaclass=PyQtABCMeta):
    """
    Holds the current state and emits `changed` on every update.

    Listeners connected in the owning thread are called synchronously,
    in subscription order.

    Example:
        >>> holder = ObservableState(0)
        >>> unsubscribe = holder.on_change(lambda s: print(f"now {s}"))
        >>> holder.update(5)  # Prints: "now 5"
        >>> unsubscribe()
    """

    changed = pyqtSignal(object)

    def __init__(self, initial: S, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._state = initial

    def value(self) -> S:
        return self._state

    def update(self, state: S) -> None:
        self._state = state
        self.changed.emit(state)

    def on_change(self, listener: Listener) -> Unsubscribe:
        connection = self.changed.connect(listener)
        connected = True

        def unsubscribe() -> None:
            nonlocal connected
            if not connected:
                return
            connected = False
            self.changed.disconnect(connection)

        return unsubscribe
