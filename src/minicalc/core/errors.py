"""
Error types for minicalc tokenizing, parsing, and evaluation.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class ErrorKind(StrEnum):
    """Closed set of failure categories reported by the interpreter."""

    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    INVALID_EXPRESSION = "invalid_expression"
    UNKNOWN_OPERATOR = "unknown_operator"
    UNDEFINED_VARIABLE = "undefined_variable"
    DIVISION_BY_ZERO = "division_by_zero"
    # Only raised by the tokenizer in strict mode
    INVALID_CHARACTER = "invalid_character"
    # Decimal text longer than sys.get_int_max_str_digits()
    INTEGER_TOO_LARGE = "integer_too_large"


class MinicalcError(Exception):
    """Base exception for all minicalc errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        context: Optional["ErrorContext"] = None,
    ):
        self.message = message
        self.kind = kind
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ExpressionTokenError(MinicalcError):
    """
    Raised when the tokenizer meets a character outside the alphabet.

    Only happens in strict mode; the default tokenizer skips such characters.
    """

    def __init__(self, message: str, pos: int, kind: ErrorKind = ErrorKind.INVALID_CHARACTER):
        super().__init__(message, kind)
        self.pos = pos


class ExpressionParseError(MinicalcError):
    """
    Raised when a token sequence cannot be turned into one expression tree.

    Examples:
    - Unbalanced parentheses
    - Operator with a missing operand
    - Two operands with no operator between them
    """

    def __init__(self, message: str, kind: ErrorKind, pos: int = 0):
        super().__init__(message, kind)
        self.pos = pos


class ExpressionEvalError(MinicalcError):
    """
    Raised when a well-formed expression cannot be reduced to an integer.

    Examples:
    - Reading a variable that was never declared or assigned
    - Dividing by an expression that evaluates to zero
    """

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message, kind)


class StatementParseError(MinicalcError):
    """Raised when a single source line fails to parse, with its location attached."""

    pass


class ProgramError(MinicalcError):
    """Raised by ``ExecutionReport.raise_for_errors`` for the first failing statement."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed), if known
        snippet: Optional source line showing the error location
    """

    line: int
    column: int | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "line 3:5" followed by the marked snippet
        """
        location = f"line {self.line}"
        if self.column is not None:
            location += f":{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and an error marker."""
        if not self.snippet:
            return ""

        prefix = f"{self.line:4d} | "
        formatted = [prefix + self.snippet]

        if self.column is not None:
            marker_pos = len(prefix) + self.column - 1
            formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_statement_error(
    error: MinicalcError,
    line: int,
    column: int | None = None,
    snippet: str | None = None,
) -> StatementParseError:
    """
    Helper to wrap a lower-level error with its source line.

    Args:
        error: Tokenizer or parser error being reported
        line: Line number (1-indexed)
        column: Optional column number (1-indexed)
        snippet: Optional source line

    Returns:
        StatementParseError with the same kind and context attached
    """
    context = ErrorContext(line=line, column=column, snippet=snippet)
    return StatementParseError(error.message, error.kind, context)
