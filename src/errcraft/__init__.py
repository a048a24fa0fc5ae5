"""errcraft - success-value-or-error results with fluent, errno-aware error building.

Recoverable failures travel as values: a function returns Ok(value) or a
failure built with Error, and callers check, unwrap, or propagate it.
Programmer mistakes (reading the value of a failure) still raise.

Quick Start:
    >>> from errcraft import Errno, Err, ErrnoError, Error, Errorf, Ok, Result, record_os_error
    >>>
    >>> def read_file(path: str) -> Result[str, Errno]:
    ...     try:
    ...         with open(path) as f:
    ...             return Ok(f.read())
    ...     except OSError as exc:
    ...         record_os_error(exc)
    ...         return Err(ErrnoError() << "failed to read " << path)
    >>>
    >>> def has_a_word(path: str) -> Result[bool, Errno]:
    ...     content = read_file(path)
    ...     if not content.ok():
    ...         return Err(Error() << "failed to process: " << content.error())
    ...     return Ok("happy" in content.value())

Custom Error Codes:
    >>> class MyError(int):
    ...     def value(self) -> int: return int(self)
    ...     def print(self) -> str: return {0: "ok", 1: "bad input"}.get(int(self), "?")
    >>>
    >>> res = Err(Error(1, code_type=MyError) << "parsing header")
    >>> res.error().message
    'parsing header: bad input'

Formatted Errors:
    >>> Errorf("{} errors", 3).render()
    '3 errors'

Propagation Across Success Types:
    >>> from errcraft import fail, is_ok, unwrap
    >>> raw = read_file("/missing")
    >>> if not is_ok(raw):
    ...     forwarded: Result[int, Errno] = fail(raw).into_result()
"""

from __future__ import annotations

__version__ = "0.1.0"

# Codes & platform error number
from .errors import (
    Errno,
    ErrorCodeLike,
    get_errno,
    load_ctypes_errno,
    preserved_errno,
    record_os_error,
    set_errno,
)

# Payload & contract violations
from .errors import BuilderConsumedError, ResultError, UnwrapError

# Builder & factories
from .errors import Errorf, ErrnoError, ErrnoErrorf, Error, error_code

# Result
from .errors import Err, Ok, Result, VoidResult, collect_results, sequence, traverse

# Propagation
from .errors import Failure, ResultLike, error_message, fail, is_ok, unwrap

# OS integration
from .errors import OsResult, errno_error_from, try_os_operation, try_os_operation_async

# Configuration & logging
from .foundation.config import ErrcraftSettings, clear_settings_cache, get_settings
from .foundation.logging import configure_logging

__all__ = [
    # Version
    "__version__",
    # Codes
    "Errno",
    "ErrorCodeLike",
    "get_errno",
    "set_errno",
    "preserved_errno",
    "record_os_error",
    "load_ctypes_errno",
    # Payload
    "ResultError",
    "UnwrapError",
    "BuilderConsumedError",
    # Builder
    "Error",
    "ErrnoError",
    "Errorf",
    "ErrnoErrorf",
    "error_code",
    # Result
    "Result",
    "Ok",
    "Err",
    "VoidResult",
    "sequence",
    "traverse",
    "collect_results",
    # Propagation
    "ResultLike",
    "Failure",
    "is_ok",
    "unwrap",
    "fail",
    "error_message",
    # OS integration
    "OsResult",
    "errno_error_from",
    "try_os_operation",
    "try_os_operation_async",
    # Config
    "ErrcraftSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
]
