"""
Sequential program execution.

Statements run in source order against the program's variable mapping,
so each statement sees every write made by the statements before it.
Failures never escape as exceptions: each one becomes a StatementResult
carrying a StatementError tagged with its line.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from minicalc.core.config import InterpreterConfig
from minicalc.core.errors import ErrorContext, ErrorKind, ExpressionEvalError, ProgramError
from minicalc.core.expression_lang.codegen import generate
from minicalc.core.expression_lang.evaluator import evaluate
from minicalc.core.ir.program import (
    Assignment,
    Declaration,
    Program,
    Statement,
    StatementError,
    StatementKind,
)
from minicalc.core.statement_parser import parse_program

logger = logging.getLogger(__name__)


class StatementResult(BaseModel):
    """
    Outcome of one source line.

    Attributes:
        line: 1-indexed source line
        kind: Statement kind, None when the line failed to parse
        name: Variable written by a declaration or assignment
        value: Resulting integer, None on error
        text: Expression source regenerated from the AST (expression statements)
        error: Failure details, None on success
    """

    line: int
    kind: StatementKind | None = None
    name: str | None = None
    value: int | None = None
    text: str = ""
    error: StatementError | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """One human-readable line describing the outcome."""
        if self.error is not None:
            return str(self.error)
        if self.kind == StatementKind.EXPRESSION:
            return f"expression {self.text} = {self.value}"
        return f"{self.kind} {self.name} = {self.value}"


class ExecutionReport(BaseModel):
    """Results of running a program, in line order, plus the final variables."""

    results: list[StatementResult] = Field(default_factory=list)
    variables: dict[str, int] = Field(default_factory=dict)

    @property
    def errors(self) -> list[StatementError]:
        return [r.error for r in self.results if r.error is not None]

    @property
    def ok(self) -> bool:
        return not self.errors

    def render(self) -> str:
        return "\n".join(r.render() for r in self.results)

    def raise_for_errors(self) -> None:
        """Raise ProgramError for the first failing line, if any."""
        for error in self.errors:
            context = ErrorContext(line=error.line, column=error.column)
            raise ProgramError(error.message, error.kind, context)


def execute(program: Program, config: InterpreterConfig | None = None) -> ExecutionReport:
    """
    Execute every statement of a parsed program in order.

    ``program.variables`` is updated in place. Lines recorded in
    ``program.errors`` appear in the report at their position.

    Args:
        program: Output of parse_program
        config: Interpreter settings (stop_on_error, parenthesize)

    Returns:
        ExecutionReport with one result per statement or parse error
    """
    config = config or InterpreterConfig()
    results: list[StatementResult] = []

    # With stop_on_error, nothing after the first failing line runs
    cutoff: int | None = None
    if config.stop_on_error and program.errors:
        cutoff = min(e.line for e in program.errors)

    for statement in program.statements:
        if cutoff is not None and statement.line > cutoff:
            break
        result = _execute_statement(statement, program.variables, config)
        results.append(result)
        if not result.ok and config.stop_on_error:
            cutoff = statement.line
            break

    for error in program.errors:
        if cutoff is None or error.line <= cutoff:
            results.append(StatementResult(line=error.line, error=error))

    results.sort(key=lambda r: r.line)
    return ExecutionReport(results=results, variables=dict(program.variables))


def _execute_statement(
    statement: Statement,
    variables: dict[str, int],
    config: InterpreterConfig,
) -> StatementResult:
    if isinstance(statement, Declaration):
        variables[statement.name] = statement.value
        logger.debug("Line %d: declared %s = %d", statement.line, statement.name, statement.value)
        return StatementResult(
            line=statement.line,
            kind=statement.kind,
            name=statement.name,
            value=statement.value,
        )

    name = statement.name if isinstance(statement, Assignment) else None
    try:
        value = evaluate(statement.expr, variables)
        _check_printable(value)
    except ExpressionEvalError as e:
        logger.warning("Line %d failed: %s", statement.line, e.message)
        error = StatementError(
            kind=e.kind,
            line=statement.line,
            message=e.message,
            source=statement.source,
        )
        return StatementResult(line=statement.line, kind=statement.kind, name=name, error=error)

    if name is not None:
        variables[name] = value
    logger.debug("Line %d: %s -> %d", statement.line, statement.kind, value)

    return StatementResult(
        line=statement.line,
        kind=statement.kind,
        name=name,
        value=value,
        text=generate(statement.expr, parenthesize=config.parenthesize),
    )


def _check_printable(value: int) -> None:
    """Results past the int-to-str digit limit are reported, never stored."""
    try:
        str(value)
    except ValueError as e:
        raise ExpressionEvalError(
            "Result too large to display", ErrorKind.INTEGER_TOO_LARGE
        ) from e


def run(source: str, config: InterpreterConfig | None = None) -> ExecutionReport:
    """Parse and execute a program text in one step."""
    config = config or InterpreterConfig()
    return execute(parse_program(source, config), config)
