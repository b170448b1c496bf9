"""
txr - a small arithmetic expression compiler and stack evaluator.

Turns source text such as "(10 + 2) * 4" into a number through a tokenizer,
a parser, a compiler to a linear program and a stack machine.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.calc import evaluate, run
from .core.errors import CompileFault, LexFault, ParseFault, RuntimeFault, TxrError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "run",
    "TxrError",
    "LexFault",
    "ParseFault",
    "CompileFault",
    "RuntimeFault",
]
