"""
txr arithmetic pipeline.

Tokenizer, parser, compiler and stack evaluator for arithmetic
expressions.

Usage:
    from txr.core.calc import evaluate, run

    evaluate("(10 + 2) * 4")
    # 48.0

    result = run("(1 + 2")
    result.ok          # False
    str(result.diagnostic)
    # "expected a closing parenthesis at <EOF>"
"""

from txr.core.calc.compiler import compile_expr
from txr.core.calc.evaluator import execute
from txr.core.calc.parser import parse, parse_expr
from txr.core.calc.pipeline import RunResult, Txr, evaluate, format_number, run
from txr.core.calc.tokenizer import tokenize

__all__ = [
    "RunResult",
    "Txr",
    "compile_expr",
    "evaluate",
    "execute",
    "format_number",
    "parse",
    "parse_expr",
    "run",
    "tokenize",
]
