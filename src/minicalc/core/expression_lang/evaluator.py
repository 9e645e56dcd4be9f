"""
Expression evaluator for the minicalc expression language.

Reduces an expression AST to an integer against a mapping of variable values.
Pure evaluation: the mapping is read, never written.

The tree is walked with an explicit stack, so nesting depth is bounded
only by memory, not by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Mapping

from minicalc.core.errors import ErrorKind, ExpressionEvalError
from minicalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Number, Variable


def evaluate(expr: Expr, variables: Mapping[str, int]) -> int:
    """Evaluate an expression against a variable mapping.

    Args:
        expr: Parsed expression AST.
        variables: Variable name -> current integer value.

    Returns:
        The computed integer.

    Raises:
        ExpressionEvalError: On an undefined variable or a division by zero.
    """
    return _interpret(expr, variables)


def _interpret(expr: Expr, variables: Mapping[str, int]) -> int:
    """Post-order walk; a binary node is combined once both children are on ``values``."""
    values: list[int] = []
    # (node, children already evaluated)
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, expanded = pending.pop()

        if isinstance(node, Number):
            values.append(node.value)
        elif isinstance(node, Variable):
            values.append(_interpret_variable(node, variables))
        elif isinstance(node, BinaryExpr):
            if expanded:
                right = values.pop()
                left = values.pop()
                values.append(_interpret_binary(node.op, left, right))
            else:
                # Left is popped, and fully evaluated, before right
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
        else:
            raise ExpressionEvalError(
                f"Unknown expression type: {type(node).__name__}", ErrorKind.INVALID_EXPRESSION
            )

    return values[0]


def _interpret_variable(expr: Variable, variables: Mapping[str, int]) -> int:
    if expr.name not in variables:
        raise ExpressionEvalError(f"Undefined variable: {expr.name}", ErrorKind.UNDEFINED_VARIABLE)
    return variables[expr.name]


def _interpret_binary(op: BinaryOp, left: int, right: int) -> int:
    """Combine two evaluated operands."""
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        if right == 0:
            raise ExpressionEvalError("Division by zero", ErrorKind.DIVISION_BY_ZERO)
        return _truncating_div(left, right)

    raise ExpressionEvalError(f"Unknown binary op: {op}", ErrorKind.UNKNOWN_OPERATOR)


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient
