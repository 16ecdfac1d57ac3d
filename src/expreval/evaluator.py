"""
Recursive descent evaluator for arithmetic expressions.

Supports: +, -, *, /, parentheses, unary minus on number literals and
decimal numbers. Each precedence tier is a function taking the expression
text and a cursor and returning the parsed value with the advanced cursor.
"""

import structlog

from expreval.models import ErrorKind, EvaluationResult

logger = structlog.get_logger()

_DIGITS = "0123456789"


class ExpressionError(Exception):
    """Base exception for evaluation errors."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnexpectedEndError(ExpressionError):
    """Raised when the input ends where a term was expected."""
    kind = ErrorKind.UNEXPECTED_END


class MissingParenthesisError(ExpressionError):
    """Raised when an opening parenthesis is never closed."""
    kind = ErrorKind.MISSING_CLOSE_PAREN


class DivisionByZeroError(ExpressionError):
    """Raised when dividing by zero."""
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidNumberError(ExpressionError):
    """Raised when no number literal could be scanned."""
    kind = ErrorKind.INVALID_NUMBER


class NumberParseError(ExpressionError):
    """Raised when scanned text is not a valid float."""
    kind = ErrorKind.NUMBER_PARSE_FAILURE


class TrailingInputError(ExpressionError):
    """Raised in strict mode when input remains after the expression."""
    kind = ErrorKind.TRAILING_INPUT


class NestingTooDeepError(ExpressionError):
    """Raised when parentheses nest beyond the interpreter's recursion limit."""
    kind = ErrorKind.NESTING_TOO_DEEP


def normalize(expression: str) -> str:
    """Remove every whitespace character, including ones between digits."""
    return "".join(expression.split())


def evaluate(expression: str, *, strict: bool = False) -> float:
    """
    Evaluate an arithmetic expression.

    Anything left over after the top-level expression is ignored, so
    "1+2)" evaluates to 3.0. Pass strict=True to reject it instead.

    Raises:
        ExpressionError: on any malformed input or division by zero.
    """
    chars = normalize(expression)

    try:
        result, next_pos = parse_addition(chars, 0)
    except RecursionError:
        raise NestingTooDeepError("Expression nested too deeply") from None

    if strict and next_pos < len(chars):
        raise TrailingInputError(f"Unexpected trailing input at position {next_pos}")

    return result


def calculate(expression: str, *, strict: bool = False) -> EvaluationResult:
    """Evaluate an expression, returning a result instead of raising."""
    try:
        value = evaluate(expression, strict=strict)
    except ExpressionError as e:
        logger.debug("Evaluation failed", expression=expression, error=e.message, kind=e.kind.value)
        return EvaluationResult.failure(expression, e.message, e.kind)

    logger.debug("Evaluated expression", expression=expression, value=value)
    return EvaluationResult.success(expression, value)


# =============================================================================
# Grammar
# =============================================================================

def parse_addition(chars: str, pos: int) -> tuple[float, int]:
    left, next_pos = parse_multiplication(chars, pos)

    while next_pos < len(chars):
        op = chars[next_pos]
        if op == "+":
            right, next_pos = parse_multiplication(chars, next_pos + 1)
            left += right
        elif op == "-":
            right, next_pos = parse_multiplication(chars, next_pos + 1)
            left -= right
        else:
            break

    return left, next_pos


def parse_multiplication(chars: str, pos: int) -> tuple[float, int]:
    left, next_pos = parse_parentheses(chars, pos)

    while next_pos < len(chars):
        op = chars[next_pos]
        if op == "*":
            right, next_pos = parse_parentheses(chars, next_pos + 1)
            left *= right
        elif op == "/":
            right, next_pos = parse_parentheses(chars, next_pos + 1)
            if right == 0.0:
                raise DivisionByZeroError("Division by zero")
            left /= right
        else:
            break

    return left, next_pos


def parse_parentheses(chars: str, pos: int) -> tuple[float, int]:
    """Parse a parenthesized sub-expression or fall through to a number."""
    if pos >= len(chars):
        raise UnexpectedEndError("Unexpected end of expression")

    if chars[pos] == "(":
        result, next_pos = parse_addition(chars, pos + 1)

        if next_pos >= len(chars) or chars[next_pos] != ")":
            raise MissingParenthesisError("Missing closing parenthesis")

        return result, next_pos + 1

    return parse_number(chars, pos)


def parse_number(chars: str, pos: int) -> tuple[float, int]:
    """
    Scan an optionally negative decimal literal starting at pos.

    The only place unary minus is recognized, so "3*-2" works but "-(1)"
    does not.
    """
    i = pos
    num_str = ""

    if i < len(chars) and chars[i] == "-":
        num_str += "-"
        i += 1

    while i < len(chars) and chars[i] in _DIGITS:
        num_str += chars[i]
        i += 1

    if i < len(chars) and chars[i] == ".":
        num_str += "."
        i += 1

        while i < len(chars) and chars[i] in _DIGITS:
            num_str += chars[i]
            i += 1

    if num_str in ("", "-"):
        raise InvalidNumberError("Invalid number")

    try:
        return float(num_str), i
    except ValueError:
        # A bare "." or "-." scans but has no digits
        raise NumberParseError("Failed to parse number") from None
