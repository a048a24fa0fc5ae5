"""Recoverable-failure handling for errcraft.

- Errno/ErrorCodeLike: Typed error codes, errno(3) by default
- ResultError: Immutable (message, code) failure payload
- Error: Fluent builder producing ResultError, with ErrnoError/Errorf/ErrnoErrorf factories
- Result/Ok/Err: Success value or ResultError
- is_ok/unwrap/fail/Failure: Propagation protocol across differing success types
- try_os_operation: OSError-raising code to errno-coded Results
"""

from .builder import Errorf, ErrnoError, ErrnoErrorf, Error, error_code
from .codes import (
    Errno,
    ErrorCodeLike,
    get_errno,
    load_ctypes_errno,
    preserved_errno,
    record_os_error,
    set_errno,
)
from .propagate import Failure, ResultLike, error_message, fail, is_ok, unwrap
from .result import Err, Ok, Result, collect_results, sequence, traverse
from .system import OsResult, errno_error_from, try_os_operation, try_os_operation_async
from .types import BuilderConsumedError, ResultError, UnwrapError, VoidResult

__all__ = [
    # Codes & errno state
    "Errno", "ErrorCodeLike", "get_errno", "set_errno", "preserved_errno", "record_os_error", "load_ctypes_errno",
    # Payload & contract violations
    "ResultError", "UnwrapError", "BuilderConsumedError",
    # Builder & factories
    "Error", "ErrnoError", "Errorf", "ErrnoErrorf", "error_code",
    # Result
    "Result", "Ok", "Err", "VoidResult",
    # Propagation
    "ResultLike", "Failure", "is_ok", "unwrap", "fail", "error_message",
    # OS integration
    "OsResult", "errno_error_from", "try_os_operation", "try_os_operation_async",
    # Collection ops
    "sequence", "traverse", "collect_results",
]
