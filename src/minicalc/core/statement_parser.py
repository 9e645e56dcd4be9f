"""
Line-oriented statement parser.

Each non-blank line is one statement, recognised in this order:

    var <name> = <integer>      declaration
    <name> = <expression>       assignment
    <expression>                bare expression
"""

from __future__ import annotations

import logging
import re

from minicalc.core.config import InterpreterConfig
from minicalc.core.errors import ExpressionParseError, StatementParseError, make_statement_error
from minicalc.core.expression_lang.parser import parse_expr, parse_int_literal
from minicalc.core.ir.expressions import Expr
from minicalc.core.ir.program import (
    Assignment,
    Declaration,
    ExpressionStatement,
    Program,
    Statement,
    StatementError,
)

logger = logging.getLogger(__name__)

# Word characters, not starting with a digit
_IDENT = r"[^\W\d]\w*"
_DECLARATION_RE = re.compile(rf"^\s*var\s+(?P<name>{_IDENT})\s*=\s*(?P<value>[0-9]+)\s*$")
_ASSIGNMENT_RE = re.compile(rf"^\s*(?P<name>{_IDENT})\s*=(?P<expr>.*)$")


def parse_statement(
    line: str,
    lineno: int,
    config: InterpreterConfig | None = None,
) -> Statement:
    """
    Parse a single source line.

    Args:
        line: Raw line text
        lineno: 1-indexed line number, recorded on the statement
        config: Interpreter settings (strict_tokens is honoured)

    Returns:
        Declaration, Assignment, or ExpressionStatement

    Raises:
        StatementParseError: If the expression part does not parse
    """
    config = config or InterpreterConfig()
    source = line.strip()

    m = _DECLARATION_RE.match(line)
    if m:
        try:
            value = parse_int_literal(m.group("value"), m.start("value"))
        except ExpressionParseError as e:
            raise make_statement_error(
                e, line=lineno, column=e.pos + 1, snippet=line.rstrip()
            ) from e
        return Declaration(
            name=m.group("name"),
            value=value,
            line=lineno,
            source=source,
        )

    m = _ASSIGNMENT_RE.match(line)
    if m:
        expr = _parse_line_expr(line, m.start("expr"), lineno, config)
        return Assignment(name=m.group("name"), expr=expr, line=lineno, source=source)

    expr = _parse_line_expr(line, 0, lineno, config)
    return ExpressionStatement(expr=expr, line=lineno, source=source)


def _parse_line_expr(line: str, offset: int, lineno: int, config: InterpreterConfig) -> Expr:
    try:
        return parse_expr(line[offset:], strict=config.strict_tokens)
    except ExpressionParseError as e:
        raise make_statement_error(
            e,
            line=lineno,
            column=offset + e.pos + 1,
            snippet=line.rstrip(),
        ) from e


def parse_program(source: str, config: InterpreterConfig | None = None) -> Program:
    """
    Parse a multi-line source text into a Program.

    Declarations register their value in ``Program.variables`` as they are
    parsed. Lines that fail to parse are recorded in ``Program.errors`` and
    parsing continues with the next line.

    Args:
        source: Program text, one statement per line
        config: Interpreter settings

    Returns:
        Program with statements in source order
    """
    config = config or InterpreterConfig()
    program = Program()

    # Only "\n" ends a line; other Unicode line breaks stay inside it
    for lineno, line in enumerate(source.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue

        try:
            statement = parse_statement(line, lineno, config)
        except StatementParseError as e:
            logger.warning("Line %d failed to parse: %s", lineno, e.message)
            program.errors.append(_to_statement_error(e, line))
            continue

        if isinstance(statement, Declaration):
            program.variables[statement.name] = statement.value

        logger.debug("Line %d: %s %r", lineno, statement.kind, statement.source)
        program.statements.append(statement)

    return program


def _to_statement_error(error: StatementParseError, line: str) -> StatementError:
    assert error.context is not None
    return StatementError(
        kind=error.kind,
        line=error.context.line,
        column=error.context.column,
        message=error.message,
        source=line.strip(),
    )
