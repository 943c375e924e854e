"""
Observable state contract.

The field controller publishes snapshots through this interface instead of
inheriting from a framework base class, so hosts can plug in any
subscribe/emit primitive.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

S = TypeVar("S")

Listener = Callable[[S], None]
Unsubscribe = Callable[[], None]


class Observable(ABC, Generic[S]):
    """
    ABC for a holder of one current state value that notifies listeners.

    Every update() notifies, even when the new state equals the old one.
    """

    @abstractmethod
    def value(self) -> S:
        """Return the current state."""
        pass

    @abstractmethod
    def update(self, state: S) -> None:
        """Make state current and notify every listener with it."""
        pass

    @abstractmethod
    def on_change(self, listener: Listener) -> Unsubscribe:
        """
        Register a listener for future updates.

        Returns:
            Callable that removes the listener. Safe to call more than once.
        """
        pass
