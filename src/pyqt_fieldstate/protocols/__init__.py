"""
Protocol definitions and configuration hooks.

Contracts the field controller depends on, kept free of Qt specifics.
"""

from .observable import Observable, Listener, Unsubscribe
from .field_config import FieldConfig, set_field_config, get_field_config

__all__ = [
    "Observable",
    "Listener",
    "Unsubscribe",
    "FieldConfig",
    "set_field_config",
    "get_field_config",
]
