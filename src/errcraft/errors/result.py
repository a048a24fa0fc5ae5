"""Result: a success value or a ResultError, never both.

Implements a discriminated union for success/failure with the usual
railway-oriented operations:
- Inspection: ok, is_ok, is_err, value, error
- Functor: map
- Monad: and_then (flat_map), or_else
- Context: with_context re-wraps a failure with extra message text

A failing Result always holds a ResultError, so failures from different
functions compare and propagate the same way whatever their success type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .builder import Error
from .types import ResultError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")

# Sentinel for faster Ok/Err construction
_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Discriminated union of a success value T and a ResultError[E].

    State is fixed at construction. Propagating a failure always builds a new
    Result, it never mutates an existing one.

    Examples:
        >>> Ok(42).map(lambda x: x * 2).value()
        84
        >>> Err(Error() << "fail").error().message
        'fail'
        >>> Ok().ok()
        True
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | ResultError[E], is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── State ─────────────────────────────────────────────────────────

    def ok(self) -> bool:
        """True iff holding a value."""
        return self._is_ok

    def is_ok(self) -> bool:
        """Alias of ok()."""
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─── Extraction ────────────────────────────────────────────────────

    def value(self) -> T:
        """Held value. Raises UnwrapError on a failure."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"value() on failed Result: {self._value}")

    unwrap = value

    def error(self) -> ResultError[E]:
        """Held failure payload. Raises UnwrapError on a success."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"error() on successful Result: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Held value or default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[ResultError[E]], T]) -> T:
        """Held value, or f(error) on failure."""
        return self._value if self._is_ok else f(self._value)  # type: ignore[return-value,arg-type]

    def expect(self, msg: str) -> T:
        """Held value; on failure raise UnwrapError prefixed with msg."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise UnwrapError(f"{msg}: {self._value}")

    # ─── Composition ───────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else Result(self._value, _ERR)  # type: ignore[arg-type]

    flat_map = and_then

    def or_else(self, f: Callable[[ResultError[E]], Result[T, E]]) -> Result[T, E]:
        """On failure, apply f to recover. On success, pass through."""
        return f(self._value) if not self._is_ok else self  # type: ignore[arg-type]

    def with_context(self, *parts: object) -> Result[T, E]:
        """Prefix a failure's message with parts, keeping its code.

        Equivalent to `Err(Error() << part... << self.error())`. Successes pass through.

        Example:
            >>> Err(ResultError("low-level", 13)).with_context("context: ").error().message
            'context: low-level'
        """
        if self._is_ok:
            return self
        err: ResultError[E] = self._value  # type: ignore[assignment]
        return Err(Error._prepared(False, err.code, "", code_type=type(err.code)).append(*parts, err))

    # ─── Inspection ────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        """Call f with the value for side effects, return self."""
        if self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[ResultError[E]], None]) -> Result[T, E]:
        """Call f with the error for side effects, return self."""
        if not self._is_ok:
            f(self._value)  # type: ignore[arg-type]
        return self

    def match(self, *, ok: Callable[[T], U], err: Callable[[ResultError[E]], U]) -> U:
        """Exhaustive pattern match. Forces handling both outcomes."""
        return ok(self._value) if self._is_ok else err(self._value)  # type: ignore[arg-type]

    # ─── Dunder Methods ────────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if ok, nothing on failure."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Ok(value: T = None) -> Result[T, E]:  # type: ignore[assignment]  # noqa: N802
    """Success. `Ok()` is the no-payload success."""
    return Result(value, _OK)


def Err(error: Error[E] | ResultError[E]) -> Result[T, E]:  # noqa: N802
    """Failure from an Error builder (consuming it) or an existing ResultError."""
    if isinstance(error, Error):
        return Result(error.result_error(), _ERR)
    if isinstance(error, ResultError):
        return Result(error, _ERR)
    raise TypeError(f"Err() takes an Error or ResultError, got {type(error).__name__}")


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Fail-fast on first failure."""
    values: list[T] = []
    for r in results:
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def traverse(items: Iterable[T], f: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map f over items, sequence results. Fail-fast on first failure."""
    values: list[U] = []
    for item in items:
        r = f(item)
        if not r._is_ok:
            return Result(r._value, _ERR)  # type: ignore[arg-type]
        values.append(r._value)  # type: ignore[arg-type]
    return Result(values, _OK)


def collect_results(results: Iterable[Result[T, E]], *, separator: str = "; ") -> Result[list[T], E]:
    """Run through every Result, merging ALL failures (not fail-fast).

    The merged failure joins messages with separator and keeps the first code.
    """
    values: list[T] = []
    errors: list[ResultError[E]] = []
    for r in results:
        (values if r._is_ok else errors).append(r._value)  # type: ignore[arg-type]
    if not errors:
        return Result(values, _OK)
    return Result(ResultError(separator.join(e.message for e in errors), errors[0].code), _ERR)
