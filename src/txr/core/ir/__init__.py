"""
txr Intermediate Representation (IR) types.

Operator codes, the expression AST and the linear program the compiler
emits. All types are re-exported from this package.
"""

from .expressions import BinaryExpr, Expr, Identifier, NumberLiteral, UnaryExpr, render
from .operators import SYMBOL_OPERATORS, WORD_OPERATORS, OpCode, UnaryOp
from .program import Action, ApplyBinary, ApplyUnary, Program, PushIdentifier, PushNumber

__all__ = [
    # Operators
    "OpCode",
    "UnaryOp",
    "SYMBOL_OPERATORS",
    "WORD_OPERATORS",
    # AST
    "Expr",
    "NumberLiteral",
    "Identifier",
    "UnaryExpr",
    "BinaryExpr",
    "render",
    # Program
    "Action",
    "Program",
    "PushNumber",
    "PushIdentifier",
    "ApplyUnary",
    "ApplyBinary",
]
