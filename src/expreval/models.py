"""
Core data models for Expreval.

Defines the error taxonomy and the request/result schemas shared by the
evaluator, the HTTP API and the CLI.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorKind(str, Enum):
    """Reasons an evaluation can fail."""
    UNEXPECTED_END = "unexpected_end"
    MISSING_CLOSE_PAREN = "missing_close_paren"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_NUMBER = "invalid_number"
    NUMBER_PARSE_FAILURE = "number_parse_failure"
    TRAILING_INPUT = "trailing_input"  # Strict mode only
    NESTING_TOO_DEEP = "nesting_too_deep"


# =============================================================================
# Evaluation Models
# =============================================================================

class EvaluationRequest(BaseModel):
    """Request model for evaluating an expression."""
    expression: str = Field(..., description="Arithmetic expression to evaluate")
    strict: bool | None = Field(
        None,
        description="Reject trailing input after the expression (defaults to server setting)",
    )


class EvaluationResult(BaseModel):
    """
    Outcome of a single evaluation.

    Exactly one of `value` or `error` is set, discriminated by `ok`.
    `error` carries the display message, e.g. "Error: Division by zero".
    Overflowed values serialize as "Infinity", "-Infinity" or "NaN".
    """
    model_config = ConfigDict(ser_json_inf_nan="strings")

    expression: str
    ok: bool
    value: float | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def success(cls, expression: str, value: float) -> "EvaluationResult":
        return cls(expression=expression, ok=True, value=value)

    @classmethod
    def failure(cls, expression: str, message: str, kind: ErrorKind) -> "EvaluationResult":
        return cls(
            expression=expression,
            ok=False,
            error=f"Error: {message}",
            error_kind=kind,
        )
