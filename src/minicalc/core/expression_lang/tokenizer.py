"""
Tokenizer for the minicalc expression language.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum, auto

from minicalc.core.errors import ExpressionTokenError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Operands
    INT = auto()
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

OPERATOR_KINDS = frozenset({TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR, TokenKind.SLASH})

_NUMBER_RE = re.compile(r"[0-9]+")
# Identifier: a run of word characters (Unicode), not starting with a digit
_IDENT_RE = re.compile(r"[^\W\d]\w*")


def tokenize(source: str, *, strict: bool = False) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Characters outside the language are skipped unless ``strict`` is set,
    in which case the first one raises ExpressionTokenError.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        m = _NUMBER_RE.match(source, i)
        if m:
            tokens.append(Token(TokenKind.INT, m.group(0), i))
            i = m.end()
            continue

        m = _IDENT_RE.match(source, i)
        if m:
            tokens.append(Token(TokenKind.IDENT, m.group(0), i))
            i = m.end()
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        if strict:
            raise ExpressionTokenError(f"Unexpected character: {c!r}", i)
        logger.debug("Skipping unrecognised character %r at position %d", c, i)
        i += 1

    return tokens
