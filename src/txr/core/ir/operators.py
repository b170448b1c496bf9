"""
Operator codes for txr expressions.

An operator code packs two facts into one small integer: the high nibble is
the precedence tier (0 binds tightest) and the low nibble tells operators of
the same tier apart. The parser folds tier by tier up to MAXP; the evaluator
dispatches on the full code.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class OpCode(IntEnum):
    """Binary operator codes."""

    # Tier 0
    MUL = 0x01
    FDIV = 0x02
    FMOD = 0x03
    IDIV = 0x04
    # Tier 1
    ADD = 0x10
    SUB = 0x11
    # One tier above the loosest defined tier
    MAXP = 0x20

    @property
    def tier(self) -> int:
        """Precedence tier, 0 being the tightest."""
        return self.value >> 4

    @property
    def symbol(self) -> str:
        """Canonical source spelling."""
        return _SYMBOLS[self]

    def __str__(self) -> str:
        return _NAMES[self]


class UnaryOp(StrEnum):
    """Unary operators. Unary plus is dropped by the parser."""

    NEG = "-"


_SYMBOLS: dict[OpCode, str] = {
    OpCode.MUL: "*",
    OpCode.FDIV: "/",
    OpCode.FMOD: "%",
    OpCode.IDIV: "div",
    OpCode.ADD: "+",
    OpCode.SUB: "-",
    OpCode.MAXP: "",
}

_NAMES: dict[OpCode, str] = {
    OpCode.MUL: "OpMul",
    OpCode.FDIV: "OpFDiv",
    OpCode.FMOD: "OpFMod",
    OpCode.IDIV: "OpIDiv",
    OpCode.ADD: "OpAdd",
    OpCode.SUB: "OpSub",
    OpCode.MAXP: "OpMaxP",
}

# Single-character operator spellings recognized by the tokenizer
SYMBOL_OPERATORS: dict[str, OpCode] = {
    "+": OpCode.ADD,
    "-": OpCode.SUB,
    "*": OpCode.MUL,
    "/": OpCode.FDIV,
    "%": OpCode.FMOD,
}

# Reserved words that spell operators instead of identifiers
WORD_OPERATORS: dict[str, OpCode] = {
    "mod": OpCode.FMOD,
    "div": OpCode.IDIV,
}
