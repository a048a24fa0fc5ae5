"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from errcraft.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.error.unknown_errno_format
    'Unknown error {code}'
    >>> settings.logging.trace_failures
    False

    # Or with environment variables:
    # ERRCRAFT_LOG_TRACE_FAILURES=true
    # ERRCRAFT_ERROR_CONSUME_BUILDERS=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCRAFT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    trace_failures: bool = Field(
        default=False,
        description="Log every finalized failure and propagation at DEBUG",
    )


class ErrorSettings(BaseSettings):
    """Error builder and error code behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCRAFT_ERROR_",
        extra="ignore",
    )

    unknown_errno_format: str = Field(
        default="Unknown error {code}",
        description="Fallback text when the platform has no description for an errno",
    )
    consume_builders: bool = Field(
        default=True,
        description="Reject appends to an Error builder once it became a failure",
    )

    @field_validator("unknown_errno_format")
    @classmethod
    def _require_code_field(cls, v: str) -> str:
        """The fallback must mention the numeric code."""
        if "{code}" not in v:
            raise ValueError("unknown_errno_format must contain '{code}'")
        return v


class ErrcraftSettings(BaseSettings):
    """Root settings for errcraft.

    Loads configuration from environment variables with ERRCRAFT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        ERRCRAFT_LOG_LEVEL=DEBUG
        ERRCRAFT_LOG_TRACE_FAILURES=true
        ERRCRAFT_ERROR_UNKNOWN_ERRNO_FORMAT="errno {code}"
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with ERRCRAFT_LOG_, ERRCRAFT_ERROR_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    error: ErrorSettings = Field(default_factory=ErrorSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ErrcraftSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return ErrcraftSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
