"""
Core PyQt6 utilities.

Timing and threading helpers with no field-specific logic.
"""

from .debounce_timer import DebounceTimer
from .background_task import BackgroundTask

__all__ = [
    "DebounceTimer",
    "BackgroundTask",
]
