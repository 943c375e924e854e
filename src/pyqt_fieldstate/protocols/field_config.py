"""Process-wide configuration for field controllers.

Provides hooks for applications to tune defaults without passing them to
every controller.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FieldConfig:
    """Default behavior for field controllers.

    Attributes:
        async_debounce_ms: Quiet period before the async validator runs
        task_wait_ms: Max time close() waits for each running validator thread
    """

    async_debounce_ms: int = 300
    task_wait_ms: int = 200


# Global config instance (set by application)
_field_config: Optional[FieldConfig] = None


def set_field_config(config: Optional[FieldConfig]) -> None:
    """Set the global field configuration.

    Args:
        config: FieldConfig instance, or None to restore defaults
    """
    global _field_config
    _field_config = config


def get_field_config() -> FieldConfig:
    """Get the current field configuration.

    Returns:
        Current FieldConfig or default if not set
    """
    if _field_config is None:
        return FieldConfig()
    return _field_config
