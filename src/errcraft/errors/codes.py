"""Error codes and the ambient platform error number.

- ErrorCodeLike: Protocol every code type used with Error/ResultError satisfies
- Errno: errno(3) wrapper, the default code type
- get_errno/set_errno/preserved_errno: thread-scoped "last error number" state

The error number lives in a ContextVar, so every thread (and every asyncio task
context) observes its own value. Python code does not see the C library's errno
directly: feed it from OSError via record_os_error(), or from ctypes foreign
calls via load_ctypes_errno().
"""

from __future__ import annotations

import os
import warnings
from contextvars import ContextVar, Token
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Self, TypeVar, runtime_checkable

from pydantic_core import CoreSchema, core_schema

if TYPE_CHECKING:
    from types import TracebackType

    from pydantic import GetCoreSchemaHandler

EnumT = TypeVar("EnumT", bound=Enum)

_errno: ContextVar[int] = ContextVar("errcraft_errno", default=0)


# ═══════════════════════════════════════════════════════════════════════════════
# Error Code Protocol
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class ErrorCodeLike(Protocol):
    """What Error and ResultError need from a code type.

    A code type must also be constructible with no arguments (the "no error"
    default) and from whatever raw value callers pass to Error(code).

    Example:
        >>> class HttpStatus(int):
        ...     def value(self) -> int: return int(self)
        ...     def print(self) -> str: return f"HTTP {int(self)}"
        >>> Error(404, code_type=HttpStatus).render()
        'HTTP 404'
    """

    def value(self) -> object: ...
    def print(self) -> str: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errno
# ═══════════════════════════════════════════════════════════════════════════════


class Errno(int):
    """Wrapper for errno(3) values. Default is 0 ("no error").

    Being an int subclass, it compares and hashes as its raw number and converts
    with int(). Use it rather than a bare int so errno values stay distinguishable
    from other integer code domains.

    Example:
        >>> Errno(2).print()
        'No such file or directory'
        >>> Errno() == 0
        True
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> Self:
        return super().__new__(cls, value)

    def value(self) -> int:
        """Raw error number."""
        return int(self)

    def print(self) -> str:
        """Platform description of the error number. Never raises."""
        try:
            return os.strerror(self)
        except (ValueError, OverflowError):
            from errcraft.foundation.config.settings import get_settings
            return get_settings().error.unknown_errno_format.format(code=int(self))

    def as_legacy_enum(self, enum_type: type[EnumT]) -> EnumT:
        """Reinterpret the raw number as a member of a legacy numeric enum.

        Deprecated escape hatch for code that still builds enum values from
        error().code. Raises ValueError when enum_type has no member for the value.
        """
        warnings.warn(
            "Errno.as_legacy_enum() is deprecated; map error numbers explicitly",
            DeprecationWarning,
            stacklevel=2,
        )
        return enum_type(int(self))

    @classmethod
    def __get_pydantic_core_schema__(cls, source: object, handler: GetCoreSchemaHandler) -> CoreSchema:
        """Validate from any int, serialize back to a plain int."""
        return core_schema.no_info_plain_validator_function(
            cls, serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    def __repr__(self) -> str:
        return f"Errno({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


# ═══════════════════════════════════════════════════════════════════════════════
# Ambient Error Number
# ═══════════════════════════════════════════════════════════════════════════════


def get_errno() -> int:
    """Current thread-scoped error number."""
    return _errno.get()


def set_errno(value: int) -> None:
    """Overwrite the current thread-scoped error number."""
    _errno.set(int(value))


def record_os_error(exc: OSError) -> int:
    """Store the errno carried by exc (0 when it has none) and return it."""
    value = exc.errno or 0
    _errno.set(value)
    return value


def load_ctypes_errno() -> int:
    """Copy ctypes' private errno into the ambient state and return it.

    Only meaningful after calling a foreign function loaded with use_errno=True.
    """
    import ctypes
    value = ctypes.get_errno()
    _errno.set(value)
    return value


class preserved_errno:
    """Context manager restoring the error number on exit.

    Wrap anything that might touch the error number (formatting, __str__ of
    arbitrary objects) so a value captured afterwards is the caller's.

    Example:
        >>> set_errno(2)
        >>> with preserved_errno():
        ...     set_errno(13)
        >>> get_errno()
        2
    """

    __slots__ = ("_token",)

    def __init__(self) -> None:
        self._token: Token[int] | None = None

    def __enter__(self) -> int:
        saved = _errno.get()
        self._token = _errno.set(saved)
        return saved

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _errno.reset(self._token)
            self._token = None
