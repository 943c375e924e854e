"""
pyqt-fieldstate: reactive single-field state for PyQt6 forms.

Tracks one field's value, validation error and flags, and publishes an
immutable snapshot on every change.

Architecture:
- Tier 1 (Core): Qt timing and threading helpers (debounce, background task)
- Tier 2 (Protocols): Observable contract and process-wide configuration
- Tier 3 (State): FieldState snapshots and the FieldController

Key Features:
- Sync validation on demand or on every change (autovalidate)
- Debounced async validation in worker threads, sync or coroutine validators
- Read-only fields with forced writes
- Pluggable observable; Qt signal implementation included
"""

__version__ = "0.1.0"

from .exceptions import FieldStateError, InvalidDebounceIntervalError
from .protocols import FieldConfig, Observable, get_field_config, set_field_config
from .state import FieldController, FieldState, ObservableState

__all__ = [
    "__version__",
    "FieldConfig",
    "FieldController",
    "FieldState",
    "FieldStateError",
    "InvalidDebounceIntervalError",
    "Observable",
    "ObservableState",
    "get_field_config",
    "set_field_config",
]
