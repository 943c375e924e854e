"""Validator signatures.

A validator receives the value and returns an error, or None when valid.
Async validators may block or return an awaitable; they run off the GUI
thread under the controller's debounce.
"""

from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

Validator = Callable[[T], Optional[E]]
AsyncValidator = Callable[[T], Union[Optional[E], Awaitable[Optional[E]]]]


def always_valid(value: Any) -> None:
    """Default sync validator: accepts every value."""
    return None
