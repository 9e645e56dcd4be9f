"""
minicalc expression language.

Tokenizer, shunting-yard parser, evaluator, and code generator for
integer arithmetic over named variables.

Usage:
    from minicalc.core.expression_lang import evaluate, generate, parse_expr

    expr = parse_expr("box1 + box2 * 2")
    result = evaluate(expr, {"box1": 100, "box2": 25})
    # result == 150
    generate(expr)
    # "box1 + box2 * 2"
"""

from minicalc.core.expression_lang.codegen import generate
from minicalc.core.expression_lang.evaluator import evaluate
from minicalc.core.expression_lang.parser import parse_expr, parse_tokens
from minicalc.core.expression_lang.tokenizer import tokenize

__all__ = ["evaluate", "generate", "parse_expr", "parse_tokens", "tokenize"]
