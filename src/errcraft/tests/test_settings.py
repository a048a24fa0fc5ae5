"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from errcraft import ErrcraftSettings, clear_settings_cache, get_settings
from errcraft.foundation.config import ErrorSettings


def test_defaults(fresh_settings: None) -> None:
    """Defaults keep errcraft quiet and builders single-use."""
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.trace_failures is False
    assert settings.error.consume_builders is True
    assert settings.error.unknown_errno_format == "Unknown error {code}"
    assert settings.effective_log_level == "WARNING"


def test_settings_are_cached(fresh_settings: None) -> None:
    """get_settings returns one instance until the cache is cleared."""
    first = get_settings()

    assert get_settings() is first
    clear_settings_cache()
    assert get_settings() is not first


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    """Nested groups read their own prefixes."""
    monkeypatch.setenv("ERRCRAFT_DEBUG", "true")
    monkeypatch.setenv("ERRCRAFT_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ERRCRAFT_LOG_TRACE_FAILURES", "1")

    settings = ErrcraftSettings()

    assert settings.logging.level == "ERROR"
    assert settings.logging.trace_failures is True
    assert settings.effective_log_level == "DEBUG"


def test_fallback_format_requires_code() -> None:
    """The unknown-errno fallback must include the number."""
    with pytest.raises(ValidationError):
        ErrorSettings(unknown_errno_format="unknown")
