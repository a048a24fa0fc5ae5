"""Bridge from OSError-raising code to errno-coded Results."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar

from .builder import Error, ErrnoError
from .codes import Errno, record_os_error
from .result import Err, Ok, Result

T = TypeVar("T")

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

OsResult: TypeAlias = Result[T, Errno]


# ═══════════════════════════════════════════════════════════════════════════════
# OSError Integration
# ═══════════════════════════════════════════════════════════════════════════════


def errno_error_from(exc: OSError, *parts: object) -> Error[Errno]:
    """Builder coded with exc.errno, leaving the ambient error number untouched.

    Example:
        >>> errno_error_from(FileNotFoundError(2, "gone"), "open ", "a.txt").render()
        'open a.txt: No such file or directory'
    """
    return Error(Errno(exc.errno or 0)).append(*parts)


def try_os_operation(operation: Callable[[], T], *, context: str = "") -> OsResult[T]:
    """Run operation; an OSError becomes `Err(ErrnoError() << context)`.

    The exception's errno is also recorded as the current error number.
    Any other exception propagates.
    """
    try:
        return Ok(operation())
    except OSError as e:
        record_os_error(e)
        return Err(ErrnoError() << context)


async def try_os_operation_async(
    operation: Callable[[], T] | Callable[[], Awaitable[T]],
    *,
    context: str = "",
) -> OsResult[T]:
    """Async version - runs sync (in a thread) or async operation."""
    try:
        value = await operation() if inspect.iscoroutinefunction(operation) else await asyncio.to_thread(operation)  # type: ignore[misc]
        return Ok(value)
    except OSError as e:
        record_os_error(e)
        return Err(ErrnoError() << context)
