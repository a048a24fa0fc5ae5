"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    ErrcraftSettings,
    ErrorSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ErrcraftSettings",
    "ErrorSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
