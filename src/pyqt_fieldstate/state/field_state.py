"""Immutable snapshot of one form field."""

from dataclasses import dataclass, replace
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class FieldState(Generic[T, E]):
    """
    State of a single form field at one instant.

    Attributes:
        value: Current value, set through FieldController.set_value()
        error: Current error. None means the value is considered valid
        autovalidate: If True the sync validator runs after each value change,
            otherwise only when FieldController.validate() is called
        read_only: If True set_value() is ignored unless forced
        edited_manually: Caller-owned flag, stored but never interpreted
    """

    value: T
    error: Optional[E] = None
    autovalidate: bool = False
    read_only: bool = False
    edited_manually: bool = False

    @classmethod
    def initial(cls, value: T) -> "FieldState[T, E]":
        """Snapshot a freshly created field starts from."""
        return cls(value=value)

    @property
    def is_valid(self) -> bool:
        """True if there is no error."""
        return self.error is None

    def with_changes(self, **changes: Any) -> "FieldState[T, E]":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
