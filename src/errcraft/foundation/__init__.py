"""Foundation - configuration, logging and testing support for errcraft."""

from __future__ import annotations

__all__ = [
    # Config
    "ErrcraftSettings", "ErrorSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging",
    # Testing
    "check_result_ok", "assert_result_ok", "assert_result_err",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ErrcraftSettings", "ErrorSettings", "LoggingSettings", "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    if name == "configure_logging":
        from .logging import configure_logging
        return configure_logging

    if name in ("check_result_ok", "assert_result_ok", "assert_result_err"):
        from . import testing
        return getattr(testing, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
