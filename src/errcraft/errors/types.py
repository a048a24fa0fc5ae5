"""Failure payload and contract-violation exceptions.

ResultError is the only failure payload a Result holds. It is a frozen Pydantic
model so it can be dumped, validated and hashed like any other record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .codes import Errno, ErrorCodeLike

if TYPE_CHECKING:
    from .result import Result

E = TypeVar("E")

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

VoidResult: TypeAlias = "Result[None, Errno]"


# ═══════════════════════════════════════════════════════════════════════════════
# Contract Violations
# ═══════════════════════════════════════════════════════════════════════════════


class UnwrapError(RuntimeError):
    """Reading the value of a failure, or the error of a success.

    This is a programming error, never a recoverable one: do not catch it to
    branch on outcome, check ok() first.
    """


class BuilderConsumedError(RuntimeError):
    """Appending to an Error builder that already became a failure."""


# ═══════════════════════════════════════════════════════════════════════════════
# ResultError
# ═══════════════════════════════════════════════════════════════════════════════


class ResultError(BaseModel, Generic[E]):
    """Immutable (message, code) pair carried by a failed Result.

    Only Error builders are meant to produce these, but they can be built
    directly, e.g. in tests. Plain int codes are promoted to Errno.

    Example:
        >>> err = ResultError("failed to read path", 2)
        >>> err.code
        Errno(2)
        >>> str(err)
        'failed to read path'
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", arbitrary_types_allowed=True,
        revalidate_instances="never",
        json_schema_extra={"title": "Result Error", "examples": [{"message": "open config: No such file or directory", "code": 2}]},
    )

    message: str = ""
    code: E = Field(default_factory=Errno)  # type: ignore[assignment]

    def __init__(self, message: str = "", code: Any = None, **data: Any) -> None:
        if code is not None:
            data["code"] = code
        super().__init__(message=message, **data)

    @field_validator("code", mode="before")
    @classmethod
    def _promote_int(cls, v: Any) -> Any:
        return Errno(v) if type(v) is int else v

    @field_serializer("code")
    def _serialize_code(self, v: Any) -> Any:
        return v.value() if isinstance(v, ErrorCodeLike) else v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultError):
            return NotImplemented
        return self.message == other.message and self.code == other.code

    def __hash__(self) -> int:
        return hash((self.message, self.code))

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ResultError({self.message!r}, {self.code!r})"
