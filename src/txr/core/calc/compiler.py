"""
Compiler from expression AST to a linear stack program.

A post-order walk: each node's operands are emitted before the node itself,
so the evaluator never needs to look ahead.
"""

from __future__ import annotations

import logging

from txr.core.errors import CompileFault
from txr.core.ir.expressions import BinaryExpr, Expr, Identifier, NumberLiteral, UnaryExpr
from txr.core.ir.program import (
    Action,
    ApplyBinary,
    ApplyUnary,
    Program,
    PushIdentifier,
    PushNumber,
)

logger = logging.getLogger(__name__)


class _Compiler:
    """Compiler state: the growing action list."""

    def __init__(self) -> None:
        self.actions: list[Action] = []

    def emit(self, root: Expr) -> None:
        """Emit `root` in post-order, walking with an explicit stack."""
        # (node, operands already emitted)
        pending: list[tuple[Expr, bool]] = [(root, False)]
        while pending:
            expr, expanded = pending.pop()

            if isinstance(expr, NumberLiteral):
                self.actions.append(PushNumber(value=expr.value, pos=expr.pos))
            elif isinstance(expr, Identifier):
                self.actions.append(PushIdentifier(name=expr.name, pos=expr.pos))
            elif isinstance(expr, UnaryExpr):
                if expanded:
                    self.actions.append(ApplyUnary(op=expr.op, pos=expr.pos))
                else:
                    pending.append((expr, True))
                    pending.append((expr.operand, False))
            elif isinstance(expr, BinaryExpr):
                if expanded:
                    self.actions.append(ApplyBinary(op=expr.op, pos=expr.pos))
                else:
                    pending.append((expr, True))
                    pending.append((expr.right, False))
                    pending.append((expr.left, False))
            else:
                raise CompileFault(
                    f"cannot compile node type {type(expr).__name__}",
                    getattr(expr, "pos", None),
                )


def compile_expr(expr: Expr) -> Program:
    """Compile an expression tree into a program.

    Raises:
        CompileFault: If the tree contains something that is not an AST node.
    """
    compiler = _Compiler()
    compiler.emit(expr)
    logger.debug(f"Compiled {len(compiler.actions)} actions")
    return Program(actions=compiler.actions)
