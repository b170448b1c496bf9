"""
Expression AST types for txr.

Supports:
- Number literals: 42
- Identifiers: x, rate_2 (parsed and compiled, not evaluated)
- Negation: -x
- Binary arithmetic: *, /, % (mod), div, +, -

Every node records the byte offset of the token it came from so later
phases can point diagnostics at the source.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .operators import OpCode, UnaryOp


class NumberLiteral(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")
    pos: int = Field(default=0, description="Source byte offset")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


class Identifier(BaseModel):
    """A bare name."""

    name: str = Field(description="Raw identifier text")
    pos: int = Field(default=0, description="Source byte offset")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: OpCode
    left: Expr
    right: Expr
    pos: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | Identifier | UnaryExpr | BinaryExpr

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()


def render(expr: Expr) -> str:
    """Render a tree fully parenthesized, e.g. "((10 - 2) - 3)".

    Walks with an explicit stack so long operator chains do not hit the
    interpreter's recursion limit.
    """
    parts: list[str] = []
    pending: list[Expr | str] = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, UnaryExpr):
            pending.append(item.operand)
            pending.append(item.op.value)
        elif isinstance(item, BinaryExpr):
            pending.extend([")", item.right, f" {item.op.symbol} ", item.left, "("])
        else:
            parts.append(str(item))
    return "".join(parts)
