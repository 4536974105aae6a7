"""
Indicator error types.

Every indicator either returns a complete result or raises one of these.
There are no partial or padded results.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    INSUFFICIENT_DATA = "E401"
    INVALID_PARAMETER = "E502"


class IndicatorError(Exception):
    """
    Base exception for indicator failures.

    Provides structured error information for logging and serialization.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        indicator: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.code = code
        self.indicator = indicator
        self.context = context or {}

        parts = [f"[{code.value}]"]
        if indicator:
            parts.append(f"[{indicator}]")
        parts.append(message)

        self.message = message
        super().__init__(" ".join(parts))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "indicator": self.indicator,
            "context": self.context,
        }


class InsufficientDataError(IndicatorError):
    """Raised when a series is too short to produce a single output value."""

    def __init__(
        self,
        indicator: str,
        required: int,
        actual: int,
        period: int | None = None,
        detail: str | None = None,
    ):
        self.required = required
        self.actual = actual
        self.period = period

        context: dict[str, Any] = {"required": required, "actual": actual}
        if period is not None:
            context["period"] = period

        super().__init__(
            message=detail or f"Need at least {required} values, got {actual}",
            code=ErrorCode.INSUFFICIENT_DATA,
            indicator=indicator,
            context=context,
        )


class InvalidParameterError(IndicatorError, ValueError):
    """Raised when a numeric parameter is outside its allowed range."""

    def __init__(self, indicator: str, parameter: str, value: Any, reason: str):
        self.parameter = parameter
        self.value = value

        super().__init__(
            message=f"Invalid {parameter}={value!r}: {reason}",
            code=ErrorCode.INVALID_PARAMETER,
            indicator=indicator,
            context={"parameter": parameter, "value": value},
        )
