"""
Expreval - Arithmetic expression evaluator

Evaluates +, -, *, / expressions with parentheses, unary minus and decimal
literals using a small recursive descent parser.
"""

__version__ = "1.0.0"
__author__ = "Expreval Team"

from expreval.evaluator import (
    DivisionByZeroError,
    ExpressionError,
    InvalidNumberError,
    MissingParenthesisError,
    NestingTooDeepError,
    NumberParseError,
    TrailingInputError,
    UnexpectedEndError,
    calculate,
    evaluate,
)
from expreval.models import ErrorKind, EvaluationResult

__all__ = [
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationResult",
    "ExpressionError",
    "InvalidNumberError",
    "MissingParenthesisError",
    "NestingTooDeepError",
    "NumberParseError",
    "TrailingInputError",
    "UnexpectedEndError",
    "calculate",
    "evaluate",
]
