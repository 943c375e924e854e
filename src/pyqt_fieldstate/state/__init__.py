"""
Field state layer.

Immutable FieldState snapshots, the Qt-backed observable they are published
through, and the FieldController that drives them.
"""

from .field_state import FieldState
from .observable_state import ObservableState, PyQtABCMeta
from .validators import Validator, AsyncValidator, always_valid
from .field_controller import FieldController

__all__ = [
    "FieldState",
    "ObservableState",
    "PyQtABCMeta",
    "Validator",
    "AsyncValidator",
    "always_valid",
    "FieldController",
]
