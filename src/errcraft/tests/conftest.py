"""Shared fixtures. The errno plugin is imported directly so tests run without an installed entry point."""

from __future__ import annotations

import pytest

from errcraft.errors.codes import set_errno
from errcraft.foundation.testing.fixture import errno_state, fresh_settings  # noqa: F401


@pytest.fixture(autouse=True)
def clean_errno() -> object:
    """Every test starts with error number 0."""
    set_errno(0)
    yield
    set_errno(0)
