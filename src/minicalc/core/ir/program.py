"""
Statement and program types for minicalc IR.

A program is the ordered list of statements parsed from a source text,
plus the variable mapping they read and write.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from minicalc.core.errors import ErrorKind
from minicalc.core.ir.expressions import Expr


class StatementKind(StrEnum):
    """The three recognised line forms."""

    DECLARATION = "declaration"
    ASSIGNMENT = "assignment"
    EXPRESSION = "expression"


class Declaration(BaseModel):
    """
    ``var <name> = <integer>``.

    The value is registered in the program's variables when the line is parsed.
    """

    name: str
    value: int
    line: int = Field(description="1-indexed source line")
    source: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> StatementKind:
        return StatementKind.DECLARATION


class Assignment(BaseModel):
    """
    ``<name> = <expression>``.

    The variable is only written when the statement executes.
    """

    name: str
    expr: Expr
    line: int = Field(description="1-indexed source line")
    source: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> StatementKind:
        return StatementKind.ASSIGNMENT


class ExpressionStatement(BaseModel):
    """A bare expression, evaluated for its value."""

    expr: Expr
    line: int = Field(description="1-indexed source line")
    source: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> StatementKind:
        return StatementKind.EXPRESSION


Statement = Declaration | Assignment | ExpressionStatement


class StatementError(BaseModel):
    """
    A recoverable failure tied to one source line.

    Attributes:
        kind: Failure category
        line: 1-indexed source line
        column: 1-indexed column where the failure was detected, if known
        message: Human-readable description
        source: The offending line
    """

    kind: ErrorKind
    line: int
    column: int | None = None
    message: str
    source: str = ""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"line {self.line}: error[{self.kind.value}]: {self.message}"


class Program(BaseModel):
    """
    Parsed program state.

    Attributes:
        variables: Current value of every known variable, updated in place
        statements: Statements in source-line order
        errors: Lines that failed to parse
    """

    variables: dict[str, int] = Field(default_factory=dict)
    statements: list[Statement] = Field(default_factory=list)
    errors: list[StatementError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every line parsed."""
        return not self.errors
