"""Exception hierarchy shared by every extension module.

Each error carries a stable ``code`` plus a ``detail`` dict, and can be
flattened into a frozen :class:`ErrorPayload` for callers that report
errors as data instead of tracebacks.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, Field

_T = TypeVar("_T")


class ErrorPayload(BaseModel):
    """Structured error payload."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ShimError(Exception):
    """Base class for all stdshims errors."""

    code: str = "SHIM_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message, detail=self.detail)


class ArgumentNullError(ShimError, TypeError):
    """A required argument was ``None``."""

    code = "ARGUMENT_NULL"

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None", argument=name)
        self.argument = name


class ValueMissingError(ShimError, LookupError):
    """A source value was absent where a concrete value was required."""

    code = "VALUE_MISSING"


class OperationCancelledError(ShimError):
    """Cancellation was requested for a running operation."""

    code = "CANCELLED"


def require_not_none(value: _T | None, name: str) -> _T:
    """Return *value*, raising :class:`ArgumentNullError` if it is ``None``."""
    if value is None:
        raise ArgumentNullError(name)
    return value
