"""
minicalc - a small integer arithmetic and statement interpreter.

Tokenizes lines of text, parses them into expression trees with a
shunting-yard parser, and either evaluates them against a variable
mapping or renders them back to infix text.

Usage:
    from minicalc import run

    report = run("var x = 5\ny = x * 2 + 1\ny - x")
    print(report.render())
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .core import ir
from .core.config import InterpreterConfig, load_config
from .core.errors import (
    ErrorKind,
    ExpressionEvalError,
    ExpressionParseError,
    ExpressionTokenError,
    MinicalcError,
    ProgramError,
    StatementParseError,
)
from .core.expression_lang import evaluate, generate, parse_expr, tokenize
from .core.runner import ExecutionReport, StatementResult, execute, run
from .core.statement_parser import parse_program

try:
    __version__ = version("minicalc")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "InterpreterConfig",
    "load_config",
    "ErrorKind",
    "ExpressionEvalError",
    "ExpressionParseError",
    "ExpressionTokenError",
    "MinicalcError",
    "ProgramError",
    "StatementParseError",
    "evaluate",
    "generate",
    "parse_expr",
    "tokenize",
    "ExecutionReport",
    "StatementResult",
    "execute",
    "run",
    "parse_program",
]
