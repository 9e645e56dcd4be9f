"""Tests for error formatting and the error kind enumeration."""

from __future__ import annotations

from minicalc.core.errors import (
    ErrorContext,
    ErrorKind,
    ExpressionParseError,
    MinicalcError,
    StatementParseError,
    make_statement_error,
)
from minicalc.core.ir.program import StatementError


class TestErrorContext:
    def test_line_only(self) -> None:
        assert ErrorContext(line=3).format() == "line 3"

    def test_line_and_column(self) -> None:
        assert ErrorContext(line=3, column=7).format() == "line 3:7"

    def test_snippet_marker(self) -> None:
        text = ErrorContext(line=2, column=5, snippet="y = (1 + 2").format()
        lines = text.split("\n")
        assert lines[0] == "line 2:5"
        assert lines[1] == "   2 | y = (1 + 2"
        # Marker sits under the fifth character of the snippet
        assert lines[2].index("^") == len("   2 | ") + 4


class TestMinicalcError:
    def test_message_without_context(self) -> None:
        err = MinicalcError("boom", ErrorKind.INVALID_EXPRESSION)
        assert str(err) == "boom"
        assert err.kind == ErrorKind.INVALID_EXPRESSION

    def test_message_with_context(self) -> None:
        err = MinicalcError("boom", ErrorKind.INVALID_EXPRESSION, ErrorContext(line=9))
        assert str(err) == "line 9\nboom"

    def test_make_statement_error(self) -> None:
        inner = ExpressionParseError("bad", ErrorKind.MISMATCHED_PARENTHESES, pos=2)
        err = make_statement_error(inner, line=4, column=6, snippet="x = ((")
        assert isinstance(err, StatementParseError)
        assert err.kind == ErrorKind.MISMATCHED_PARENTHESES
        assert err.message == "bad"
        assert err.context == ErrorContext(line=4, column=6, snippet="x = ((")


class TestStatementError:
    def test_str(self) -> None:
        err = StatementError(kind=ErrorKind.UNDEFINED_VARIABLE, line=12, message="Undefined variable: q")
        assert str(err) == "line 12: error[undefined_variable]: Undefined variable: q"

    def test_kinds_are_closed(self) -> None:
        assert {k.value for k in ErrorKind} == {
            "mismatched_parentheses",
            "invalid_expression",
            "unknown_operator",
            "undefined_variable",
            "division_by_zero",
            "invalid_character",
            "integer_too_large",
        }
