"""Core minicalc functionality: IR, expression language, statement parser, runner, configuration."""

from . import ir
from .config import InterpreterConfig, load_config
from .errors import (
    ErrorContext,
    ErrorKind,
    ExpressionEvalError,
    ExpressionParseError,
    ExpressionTokenError,
    MinicalcError,
    ProgramError,
    StatementParseError,
)
from .runner import ExecutionReport, StatementResult, execute, run
from .statement_parser import parse_program, parse_statement

__all__ = [
    "ir",
    "InterpreterConfig",
    "load_config",
    "ErrorContext",
    "ErrorKind",
    "ExpressionEvalError",
    "ExpressionParseError",
    "ExpressionTokenError",
    "MinicalcError",
    "ProgramError",
    "StatementParseError",
    "ExecutionReport",
    "StatementResult",
    "execute",
    "run",
    "parse_program",
    "parse_statement",
]
