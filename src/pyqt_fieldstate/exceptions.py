"""Field state exceptions.

Raised for misuse of the API only. Validation failures are ordinary data
stored in FieldState.error and never raised.
"""


class FieldStateError(Exception):
    """Base class for field state errors."""


class InvalidDebounceIntervalError(FieldStateError, ValueError):
    """Raised when a debounce interval is negative."""

    def __init__(self, debounce_ms: int):
        self.debounce_ms = debounce_ms
        super().__init__(f"Debounce interval must be >= 0 ms, got {debounce_ms}")
