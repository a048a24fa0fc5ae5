"""Fluent error construction.

Error accumulates a message through `<<` and optionally carries a typed code.
It becomes a failed Result through Err(builder) or builder.into_result():

    def read_config(path: str) -> Result[str, Errno]:
        try:
            with open(path) as f:
                return Ok(f.read())
        except OSError as exc:
            record_os_error(exc)
            return Err(ErrnoError() << "failed to read " << path)

Re-throwing with context keeps the original code unless a new one was given:

    def load_settings() -> Result[dict[str, str], Errno]:
        res = read_config("/etc/app.conf")
        if not res.ok():
            return Err(Error() << "loading settings: " << res.error())
        return Ok(parse(res.value()))

Builders are single-use: once converted, further appends raise
BuilderConsumedError, and copying or pickling one raises TypeError.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from errcraft.foundation.config.settings import get_settings
from errcraft.foundation.logging import tracing_failures

from .codes import Errno, get_errno, preserved_errno
from .types import BuilderConsumedError, ResultError

if TYPE_CHECKING:
    from typing import Self

    from .result import Result

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger("errcraft.builder")


def _default_code(code_type: type[E]) -> E:
    """The "no code" value of code_type: code_type(), else code_type(0) (enums)."""
    try:
        return code_type()  # type: ignore[call-arg]
    except TypeError:
        return code_type(0)  # type: ignore[call-arg]


class Error(Generic[E]):
    """Single-use accumulator for a failure message and optional code.

    Args:
        code: Code to attach. Values that are not already `code_type`
            instances are converted with `code_type(code)`. Omit for an
            error without a code.
        code_type: The code type E (default Errno). Must construct its
            "no error" value when called without arguments.

    Rendering (render() / str()):
        - code attached, empty message -> code.print()
        - code attached, message m -> f"{m}: {code.print()}"
        - no code -> the message as accumulated (possibly empty)

    Example:
        >>> (Error() << "a" << "b").render()
        'ab'
        >>> (Error(2) << "open").render()
        'open: No such file or directory'
    """

    __slots__ = ("_buf", "_code", "_has_code", "_code_type", "_consumed")

    def __init__(self, code: E | Any = None, *, code_type: type[E] = Errno) -> None:  # type: ignore[assignment]
        self._buf = StringIO()
        self._code_type = code_type
        self._has_code = code is not None
        self._code: E = _default_code(code_type) if code is None else (code if isinstance(code, code_type) else code_type(code))  # type: ignore[call-arg]
        self._consumed = False

    @classmethod
    def _prepared(cls, has_code: bool, code: E, message: str, *, code_type: type[E] = Errno) -> Self:  # type: ignore[assignment]
        """Set code and initial message in one step, without building a default code."""
        err = cls.__new__(cls)
        err._buf = StringIO(message)
        err._buf.seek(0, 2)
        err._code_type = code_type
        err._has_code = has_code
        err._code = code
        err._consumed = False
        return err

    # ─── Accumulation ──────────────────────────────────────────────────

    def __lshift__(self, part: object) -> Self:
        """Append part to the message. A ResultError also lends its code."""
        if self._consumed and get_settings().error.consume_builders:
            raise BuilderConsumedError("Error builder already converted into a failure")
        if isinstance(part, ResultError):
            # Adopted codes travel with the failure but are not printed again.
            if not self._has_code and isinstance(part.code, self._code_type):
                self._code = part.code
            part = part.message
        with preserved_errno():
            self._buf.write(part if isinstance(part, str) else str(part))
        return self

    def append(self, *parts: object) -> Self:
        """Append several parts, same rules as `<<`."""
        for part in parts:
            self << part
        return self

    # ─── Inspection ────────────────────────────────────────────────────

    @property
    def has_code(self) -> bool:
        """Whether a code was given explicitly (and is printed by render())."""
        return self._has_code

    @property
    def code(self) -> E:
        """Explicit or adopted code, else the code type's default."""
        return self._code

    @property
    def consumed(self) -> bool:
        return self._consumed

    def render(self) -> str:
        """Final failure message."""
        text = self._buf.getvalue()
        if not self._has_code:
            return text
        described = self._code.print()  # type: ignore[attr-defined]
        return f"{text}: {described}" if text else described

    __str__ = render

    def __repr__(self) -> str:
        code = f", code={self._code!r}" if self._has_code else ""
        return f"Error({self._buf.getvalue()!r}{code})"

    # ─── Conversion ────────────────────────────────────────────────────

    def result_error(self) -> ResultError[E]:
        """Finalize into an immutable payload. Consumes the builder."""
        self._consumed = True
        err: ResultError[E] = ResultError(self.render(), self._code)
        if tracing_failures():
            logger.debug("failure created: %s (code=%r)", err.message, err.code)
        return err

    def into_result(self) -> Result[T, E]:
        """Finalize into a failed Result of any success type."""
        from .result import Err
        return Err(self.result_error())

    # ─── Single-use ────────────────────────────────────────────────────

    def __copy__(self) -> NoReturn:
        raise TypeError("Error builders cannot be copied")

    def __deepcopy__(self, memo: dict[int, object]) -> NoReturn:
        raise TypeError("Error builders cannot be copied")

    def __reduce__(self) -> NoReturn:
        raise TypeError("Error builders cannot be pickled")


# ═══════════════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════════════


def ErrnoError() -> Error[Errno]:  # noqa: N802
    """Error carrying the current thread's error number, empty message.

    Call it before doing anything that might overwrite the number.
    """
    return Error(Errno(get_errno()))


def error_code(code: E, *args: object) -> E:
    """Code of the first ResultError in args whose code has code's type, else code."""
    for arg in args:
        if isinstance(arg, ResultError) and isinstance(arg.code, type(code)):
            return arg.code
    return code


def Errorf(fmt: str, *args: object, **kwargs: object) -> Error[Errno]:  # noqa: N802
    """Error with a str.format-rendered message and no attached code.

    If a ResultError is among the arguments, the resulting failure inherits its
    code (without it being printed). `Errorf("{} errors", n)` equals
    `Error() << n << " errors"`.
    """
    code = error_code(Errno(), *args, *kwargs.values())
    with preserved_errno():
        message = fmt.format(*args, **kwargs)
    return Error._prepared(False, code, message)


def ErrnoErrorf(fmt: str, *args: object, **kwargs: object) -> Error[Errno]:  # noqa: N802
    """Like Errorf, with the current error number attached as the code.

    The number is captured before formatting runs.
    """
    code = Errno(get_errno())
    with preserved_errno():
        message = fmt.format(*args, **kwargs)
    return Error._prepared(True, code, message)
