"""Tests for the OSError bridge and the result assertion helpers."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

import pytest

from errcraft import (
    Err,
    Error,
    Ok,
    ResultError,
    UnwrapError,
    errno_error_from,
    get_errno,
    try_os_operation,
    try_os_operation_async,
)
from errcraft.foundation.testing import assert_result_err, assert_result_ok, check_result_ok, expect_result_ok


# ═════════════════════════════════════════════════════════════════════════════
# OSError Integration
# ═════════════════════════════════════════════════════════════════════════════


def test_try_os_operation_success(tmp_path: Path) -> None:
    """A normal return becomes Ok."""
    target = tmp_path / "data.txt"
    target.write_text("hello")

    result = try_os_operation(target.read_text)

    assert result.value() == "hello"


def test_try_os_operation_failure(tmp_path: Path) -> None:
    """An OSError becomes an errno-coded failure with context."""
    missing = tmp_path / "missing.txt"

    result = try_os_operation(missing.read_text, context=f"failed to read {missing.name}")

    assert not result.ok()
    assert result.error().code == errno.ENOENT
    assert result.error().message == f"failed to read missing.txt: {os.strerror(errno.ENOENT)}"
    assert get_errno() == errno.ENOENT


def test_try_os_operation_without_context(tmp_path: Path) -> None:
    """No context renders just the errno description."""
    result = try_os_operation((tmp_path / "nope").read_bytes)

    assert result.error().message == os.strerror(errno.ENOENT)


def test_try_os_operation_lets_other_errors_through() -> None:
    """Only OSError is converted."""

    def broken() -> int:
        raise ValueError("not an OS failure")

    with pytest.raises(ValueError):
        try_os_operation(broken)


@pytest.mark.asyncio
async def test_try_os_operation_async_sync_callable(tmp_path: Path) -> None:
    """Sync callables run in a thread."""
    result = await try_os_operation_async((tmp_path / "missing").read_text, context="open")

    assert result.error().code == errno.ENOENT


@pytest.mark.asyncio
async def test_try_os_operation_async_coroutine() -> None:
    """Coroutine functions are awaited directly."""

    async def denied() -> str:
        raise PermissionError(errno.EACCES, "denied")

    async def fine() -> str:
        return "ok"

    assert (await try_os_operation_async(fine)).value() == "ok"
    assert (await try_os_operation_async(denied)).error().code == errno.EACCES


def test_errno_error_from_leaves_ambient_state() -> None:
    """Building from an exception does not touch the error number."""
    err = errno_error_from(FileNotFoundError(errno.ENOENT, "gone"), "open ", "a.txt")

    assert err.render() == f"open a.txt: {os.strerror(errno.ENOENT)}"
    assert get_errno() == 0


# ═════════════════════════════════════════════════════════════════════════════
# Result Assertions
# ═════════════════════════════════════════════════════════════════════════════


def test_check_result_ok() -> None:
    """check_result_ok returns the value or raises UnwrapError."""
    assert check_result_ok(Ok(3)) == 3

    with pytest.raises(UnwrapError, match="broken"):
        check_result_ok(Err(Error() << "broken"))


def test_assert_result_ok() -> None:
    """assert_result_ok reports the failure message."""
    assert assert_result_ok(Ok("v")) == "v"

    with pytest.raises(AssertionError, match="expected ok result, got error: nope"):
        assert_result_ok(Err(Error() << "nope"))


def test_assert_result_err() -> None:
    """assert_result_err checks message and code when given."""
    failed = Err(ResultError("x", 5))

    assert_result_err(failed, message="x", code=5)
    with pytest.raises(AssertionError):
        assert_result_err(failed, message="y")
    with pytest.raises(AssertionError):
        assert_result_err(failed, code=6)
    with pytest.raises(AssertionError):
        assert_result_err(Ok(1))


def test_expect_result_ok_is_non_fatal(caplog: pytest.LogCaptureFixture) -> None:
    """expect_result_ok logs the failure instead of raising."""
    caplog.set_level(logging.ERROR, logger="errcraft.testing")

    assert expect_result_ok(Ok(1)) is True
    assert caplog.records == []

    assert expect_result_ok(Err(Error() << "flaky")) is False
    assert [r.getMessage() for r in caplog.records] == ["EXPECT failed: result not ok: flaky"]
