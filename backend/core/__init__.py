"""Core infrastructure modules for logging."""

from core.logging_config import (
    component_filter,
    configure_logging,
    configure_logging_from_settings,
)

__all__ = [
    "component_filter",
    "configure_logging",
    "configure_logging_from_settings",
]
