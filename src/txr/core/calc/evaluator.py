"""
Stack machine for txr programs.

Executes a compiled Program against an explicit value stack. Pure
evaluation, no I/O. Division, modulo and truncating division by zero yield
exactly 0.0.
"""

from __future__ import annotations

import logging
import math

from txr.core.errors import RuntimeFault
from txr.core.ir.operators import OpCode, UnaryOp
from txr.core.ir.program import (
    Action,
    ApplyBinary,
    ApplyUnary,
    Program,
    PushIdentifier,
    PushNumber,
)

logger = logging.getLogger(__name__)


def _fdiv(left: float, right: float) -> float:
    if right == 0:
        return 0.0
    return left / right


def _fmod(left: float, right: float) -> float:
    # Sign follows the dividend, unlike Python's %
    if right == 0:
        return 0.0
    return math.fmod(left, right)


def _idiv(left: float, right: float) -> float:
    if right == 0:
        return 0.0
    return float(math.trunc(left / right))


_BINARY = {
    OpCode.ADD: lambda left, right: left + right,
    OpCode.SUB: lambda left, right: left - right,
    OpCode.MUL: lambda left, right: left * right,
    OpCode.FDIV: _fdiv,
    OpCode.FMOD: _fmod,
    OpCode.IDIV: _idiv,
}


class _Evaluator:
    """Evaluator state: the value stack."""

    def __init__(self, trace: bool = False) -> None:
        self.stack: list[float] = []
        self.trace = trace

    def pop(self, action: Action) -> float:
        if not self.stack:
            raise RuntimeFault("stack underflow", action.pos)
        return self.stack.pop()

    def step(self, action: Action) -> None:
        """Execute a single action."""
        if isinstance(action, PushNumber):
            self.stack.append(action.value)
        elif isinstance(action, ApplyUnary):
            value = self.pop(action)
            if action.op != UnaryOp.NEG:
                raise RuntimeFault(f"can't apply operator {action.op!r}", action.pos)
            self.stack.append(-value)
        elif isinstance(action, ApplyBinary):
            right = self.pop(action)
            left = self.pop(action)
            fn = _BINARY.get(action.op)
            if fn is None:
                raise RuntimeFault(f"can't apply operator {str(action.op)}", action.pos)
            self.stack.append(fn(left, right))
        elif isinstance(action, PushIdentifier):
            raise RuntimeFault(f"unimplemented feature: identifier {action.name!r}", action.pos)
        else:
            raise RuntimeFault(f"unknown action {type(action).__name__}", getattr(action, "pos", None))

        if self.trace:
            logger.debug(f"{action!s:<16} stack={self.stack}")

    def run(self, program: Program) -> float:
        for action in program.actions:
            self.step(action)
        if len(self.stack) != 1:
            raise RuntimeFault(f"malformed program: {len(self.stack)} values left on the stack")
        return self.stack[0]


def execute(program: Program, trace: bool = False) -> float:
    """Execute a program and return its single result.

    Args:
        program: Output of `compile_expr`.
        trace: Log every action and the stack after it at DEBUG.

    Returns:
        The value left on the stack.

    Raises:
        RuntimeFault: If execution fails.
    """
    return _Evaluator(trace=trace).run(program)
