"""Check-unwrap-or-propagate protocol for Result-like values.

Generic calling code uses these helpers instead of reaching into a concrete
Result, so anything satisfying ResultLike can be checked and forwarded:

    def load(path: str) -> Result[Config, Errno]:
        raw = read_file(path)              # Result[bytes, Errno]
        if not is_ok(raw):
            return fail(raw).into_result() # same failure, new success type
        return parse(unwrap(raw))

A Failure can also collapse to the bare code, for callers whose own return
type is the code itself (`return fail(raw).code()` or `int(fail(raw))`).

The code type E must be the same along one propagation chain.
"""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar, runtime_checkable

from errcraft.foundation.logging import tracing_failures

from .result import Err, Result
from .types import ResultError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger("errcraft.propagate")


@runtime_checkable
class ResultLike(Protocol[T_co]):
    """Anything exposing ok()/value()/error() like Result."""

    def ok(self) -> bool: ...
    def value(self) -> T_co: ...
    def error(self) -> ResultError: ...  # type: ignore[type-arg]


class Failure(Generic[E]):
    """A consumed failing result, ready to be returned from a different signature."""

    __slots__ = ("_error",)

    def __init__(self, error: ResultError[E]) -> None:
        self._error = error

    @property
    def error(self) -> ResultError[E]:
        return self._error

    def code(self) -> E:
        """The bare error code."""
        return self._error.code

    def __int__(self) -> int:
        return int(self._error.code)  # type: ignore[call-overload]

    def into_result(self) -> Result[U, E]:
        """The same failure as a Result of any success type."""
        return Err(self._error)

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


def is_ok(val: ResultLike[T]) -> bool:
    """Whether val holds a success value."""
    return val.ok()


def unwrap(val: ResultLike[T]) -> T:
    """Success value of val. Raises UnwrapError on a failure."""
    return val.value()


def fail(val: ResultLike[T]) -> Failure[E]:  # type: ignore[type-var]
    """Consume a failing val for propagation. Raises UnwrapError if val is ok."""
    if val.ok():
        raise UnwrapError("fail() called on a successful result")
    err = val.error()
    if tracing_failures():
        logger.debug("propagating failure: %s (code=%r)", err.message, err.code)
    return Failure(err)


def error_message(val: ResultLike[T]) -> str:
    """Message of a failing val."""
    return val.error().message
