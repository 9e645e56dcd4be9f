"""
Expression types for minicalc IR.

The AST is a closed set of three node types:
- Number: non-negative integer literal
- Variable: reference to a named integer
- BinaryExpr: one of + - * / applied to exactly two child expressions
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter."""
        return 2 if self in (BinaryOp.MUL, BinaryOp.DIV) else 1


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """An integer literal."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class Variable(BaseModel):
    """Reference to a variable by name."""

    name: str = Field(description="Identifier")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Variable | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
