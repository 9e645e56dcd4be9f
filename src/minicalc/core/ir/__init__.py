"""
minicalc Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Number,
    Variable,
)
from .program import (
    Assignment,
    Declaration,
    ExpressionStatement,
    Program,
    Statement,
    StatementError,
    StatementKind,
)

__all__ = [
    # Expressions
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Number",
    "Variable",
    # Program
    "Assignment",
    "Declaration",
    "ExpressionStatement",
    "Program",
    "Statement",
    "StatementError",
    "StatementKind",
]
