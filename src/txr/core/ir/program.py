"""
Linear stack-machine programs produced by the txr compiler.

A Program is a flat list of actions in post-order: operands always precede
the action that consumes them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .operators import OpCode, UnaryOp


class PushNumber(BaseModel):
    """Push a literal value."""

    value: float
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"push {self.value!r}"


class PushIdentifier(BaseModel):
    """Push the value bound to a name."""

    name: str
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"load {self.name}"


class ApplyUnary(BaseModel):
    """Pop one value, push op(value)."""

    op: UnaryOp
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"unary {self.op.name.lower()}"


class ApplyBinary(BaseModel):
    """Pop right, pop left, push left op right."""

    op: OpCode
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"binary {str(self.op)}"


Action = PushNumber | PushIdentifier | ApplyUnary | ApplyBinary


class Program(BaseModel):
    """An ordered sequence of actions."""

    actions: list[Action] = Field(default_factory=list, description="Actions in execution order")

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.actions)

    def disassemble(self) -> list[str]:
        """One line per action: index, source position and mnemonic."""
        return [f"{i:4d}  @{action.pos:<4d} {action}" for i, action in enumerate(self.actions)]
