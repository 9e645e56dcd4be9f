"""
Operator-precedence (shunting-yard) parser for the minicalc expression language.

Two stacks are kept while scanning tokens left to right:
    output      completed sub-expressions
    operators   pending operator and "(" tokens

Precedence (higher binds tighter):
    + -     1
    * /     2

An incoming operator first reduces every stacked operator of greater or
equal precedence, so operators of equal precedence group from the left:
``a - b - c`` is ``(a - b) - c``.
"""

from __future__ import annotations

from minicalc.core.errors import ErrorKind, ExpressionParseError, ExpressionTokenError
from minicalc.core.expression_lang.tokenizer import (
    OPERATOR_KINDS,
    Token,
    TokenKind,
    tokenize,
)
from minicalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Number, Variable

_PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

_BINARY_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
}


def precedence(op: str) -> int:
    """Precedence of an operator symbol; 0 for anything that is not one."""
    return _PRECEDENCE.get(op, 0)


def parse_int_literal(text: str, pos: int = 0) -> int:
    """Convert a run of digits, rejecting literals past the interpreter's digit limit."""
    try:
        return int(text)
    except ValueError as e:
        raise ExpressionParseError(
            f"Integer literal too large: {len(text)} digits", ErrorKind.INTEGER_TOO_LARGE, pos
        ) from e


class _Parser:
    """Shunting-yard parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        # (expression, position of its first token)
        self.output: list[tuple[Expr, int]] = []
        self.operators: list[Token] = []

    def parse(self) -> Expr:
        for tok in self.tokens:
            if tok.kind in OPERATOR_KINDS:
                self._push_operator(tok)
            elif tok.kind == TokenKind.LPAREN:
                self.operators.append(tok)
            elif tok.kind == TokenKind.RPAREN:
                self._close_paren(tok)
            elif tok.kind == TokenKind.INT:
                self.output.append((Number(value=parse_int_literal(tok.value, tok.pos)), tok.pos))
            else:
                self.output.append((Variable(name=tok.value), tok.pos))

        while self.operators:
            op = self.operators.pop()
            if op.kind == TokenKind.LPAREN:
                raise ExpressionParseError(
                    "Mismatched parentheses: '(' is never closed",
                    ErrorKind.MISMATCHED_PARENTHESES,
                    op.pos,
                )
            self._reduce(op)

        if not self.output:
            raise ExpressionParseError(
                "Invalid expression: nothing to parse", ErrorKind.INVALID_EXPRESSION
            )
        if len(self.output) > 1:
            _, pos = self.output[1]
            raise ExpressionParseError(
                "Invalid expression: operands without an operator between them",
                ErrorKind.INVALID_EXPRESSION,
                pos,
            )
        expr, _ = self.output[0]
        return expr

    def _push_operator(self, tok: Token) -> None:
        incoming = precedence(tok.value)
        while (
            self.operators
            and self.operators[-1].kind != TokenKind.LPAREN
            and precedence(self.operators[-1].value) >= incoming
        ):
            self._reduce(self.operators.pop())
        self.operators.append(tok)

    def _close_paren(self, tok: Token) -> None:
        while self.operators and self.operators[-1].kind != TokenKind.LPAREN:
            self._reduce(self.operators.pop())
        if not self.operators:
            raise ExpressionParseError(
                "Mismatched parentheses: ')' has no matching '('",
                ErrorKind.MISMATCHED_PARENTHESES,
                tok.pos,
            )
        self.operators.pop()

    def _reduce(self, op: Token) -> None:
        """Combine the top two operands with ``op``."""
        if len(self.output) < 2:
            raise ExpressionParseError(
                f"Invalid expression: operator {op.value!r} is missing an operand",
                ErrorKind.INVALID_EXPRESSION,
                op.pos,
            )
        right, _ = self.output.pop()
        left, pos = self.output.pop()
        self.output.append((_apply_op(op, left, right), pos))


def _apply_op(op: Token, left: Expr, right: Expr) -> BinaryExpr:
    binary_op = _BINARY_OPS.get(op.kind)
    if binary_op is None:
        raise ExpressionParseError(
            f"Unknown operator: {op.value!r}",
            ErrorKind.UNKNOWN_OPERATOR,
            op.pos,
        )
    return BinaryExpr(op=binary_op, left=left, right=right)


def parse_tokens(tokens: list[Token]) -> Expr:
    """Build an expression tree from an already tokenized expression.

    Raises:
        ExpressionParseError: If the tokens do not form exactly one expression.
    """
    return _Parser(tokens).parse()


def parse_expr(source: str, *, strict: bool = False) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "3 + (4 * 2) / (1 - 5)")
        strict: Reject characters outside the language instead of skipping them

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionParseError: If the expression is invalid, or (strict mode)
            contains an unrecognised character.
    """
    try:
        tokens = tokenize(source, strict=strict)
    except ExpressionTokenError as e:
        raise ExpressionParseError(e.message, e.kind, e.pos) from e

    return parse_tokens(tokens)
