"""
Code generator for the minicalc expression language.

Renders an expression AST back to infix source text.

By default sub-expressions are never parenthesized, so ``(1 + 2) * 3``
renders as ``1 + 2 * 3`` and does not re-parse to the same tree.
With ``parenthesize=True`` the minimal parentheses needed to keep the
tree shape are emitted.
"""

from __future__ import annotations

from minicalc.core.ir.expressions import BinaryExpr, Expr, Number, Variable


def generate(expr: Expr, *, parenthesize: bool = False) -> str:
    """Render an expression as infix text."""
    parts: list[str] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, expanded = pending.pop()

        if isinstance(node, Number):
            parts.append(str(node.value))
        elif isinstance(node, Variable):
            parts.append(node.name)
        elif isinstance(node, BinaryExpr):
            if not expanded:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue
            right = parts.pop()
            left = parts.pop()
            if parenthesize:
                if _needs_parens(node.left, node, is_right=False):
                    left = f"({left})"
                if _needs_parens(node.right, node, is_right=True):
                    right = f"({right})"
            parts.append(f"{left} {node.op.value} {right}")
        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return parts[0]


def _needs_parens(child: Expr, parent: BinaryExpr, *, is_right: bool) -> bool:
    if not isinstance(child, BinaryExpr):
        return False
    if child.op.precedence < parent.op.precedence:
        return True
    # Left-associative: a - (b - c) and a / (b * c) need the grouping kept
    return is_right and child.op.precedence == parent.op.precedence
