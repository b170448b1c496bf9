"""
Tokenizer for txr expressions.

Converts an expression string into a sequence of typed tokens ending in a
single EOF token.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum, auto

from txr.core.errors import LexFault
from txr.core.ir.operators import SYMBOL_OPERATORS, WORD_OPERATORS, OpCode

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    EOF = auto()
    OP = auto()
    LPAREN = auto()
    RPAREN = auto()
    NUMBER = auto()
    IDENT = auto()


class Token:
    """A payload-free token: parentheses and end of input."""

    __slots__ = ("kind", "pos")

    def __init__(self, kind: TokenKind, pos: int) -> None:
        self.kind = kind
        self.pos = pos

    def _payload(self) -> str:
        return ""

    def __repr__(self) -> str:
        payload = self._payload()
        if payload:
            return f"Token({self.kind}, {payload}, pos={self.pos})"
        return f"Token({self.kind}, pos={self.pos})"


class OperatorToken(Token):
    """An operator symbol or reserved word."""

    __slots__ = ("op",)

    def __init__(self, op: OpCode, pos: int) -> None:
        super().__init__(TokenKind.OP, pos)
        self.op = op

    def _payload(self) -> str:
        return str(self.op)


class NumberToken(Token):
    """A run of decimal digits."""

    __slots__ = ("value",)

    def __init__(self, value: float, pos: int) -> None:
        super().__init__(TokenKind.NUMBER, pos)
        self.value = value

    def _payload(self) -> str:
        return repr(self.value)


class IdentToken(Token):
    """A name that is not a reserved word."""

    __slots__ = ("name",)

    def __init__(self, name: str, pos: int) -> None:
        super().__init__(TokenKind.IDENT, pos)
        self.name = name

    def _payload(self) -> str:
        return repr(self.name)


_WHITESPACE = " \t\r\n"
_PARENS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# ASCII only: a non-ASCII character never starts a token, so character
# indices and UTF-8 byte offsets agree for every token and fault.
_NUMBER_RE = re.compile(r"[0-9]+")
_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        LexFault: On the first character that cannot start a token.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        if c in _PARENS:
            tokens.append(Token(_PARENS[c], i))
            i += 1
            continue

        if c in SYMBOL_OPERATORS:
            tokens.append(OperatorToken(SYMBOL_OPERATORS[c], i))
            i += 1
            continue

        m = _NUMBER_RE.match(source, i)
        if m:
            tokens.append(NumberToken(float(m.group(0)), i))
            i = m.end()
            continue

        m = _WORD_RE.match(source, i)
        if m:
            word = m.group(0)
            op = WORD_OPERATORS.get(word)
            if op is not None:
                tokens.append(OperatorToken(op, i))
            else:
                tokens.append(IdentToken(word, i))
            i = m.end()
            continue

        raise LexFault(f"unexpected character {c!r}", i)

    tokens.append(Token(TokenKind.EOF, n))
    logger.debug(f"Tokenized {n} characters into {len(tokens)} tokens")
    return tokens
