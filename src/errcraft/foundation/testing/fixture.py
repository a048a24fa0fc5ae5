"""pytest plugin: fixtures for code that reads the ambient error number.

Registered through the `pytest11` entry point, so installing errcraft makes
`errno_state` available to every test session.

Example:
    >>> def test_missing_file(errno_state):
    ...     errno_state.set(2)
    ...     assert ErrnoError().code == 2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest

from errcraft.errors.codes import get_errno, set_errno
from errcraft.foundation.config.settings import clear_settings_cache

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class ErrnoState:
    """Handle over the current thread's error number during a test."""

    initial: int = 0

    def set(self, value: int) -> None:
        set_errno(value)

    @property
    def current(self) -> int:
        return get_errno()


@pytest.fixture
def errno_state() -> Iterator[ErrnoState]:
    """Error number starts at 0 and is put back afterwards."""
    saved = get_errno()
    set_errno(0)
    yield ErrnoState(initial=saved)
    set_errno(saved)


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Reload settings from the environment before and after the test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
