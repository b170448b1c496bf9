"""Tests for the txr tokenizer."""

from __future__ import annotations

import pytest

from txr.core.calc.tokenizer import (
    IdentToken,
    NumberToken,
    OperatorToken,
    TokenKind,
    tokenize,
)
from txr.core.errors import LexFault
from txr.core.ir.operators import OpCode


class TestTokenizer:
    """Tokenizer produces correct token sequences."""

    def test_number(self) -> None:
        tokens = tokenize("42")
        assert isinstance(tokens[0], NumberToken)
        assert tokens[0].value == 42.0
        assert tokens[0].pos == 0

    def test_number_is_float(self) -> None:
        tokens = tokenize("7")
        assert isinstance(tokens[0].value, float)

    def test_leading_whitespace_offsets(self) -> None:
        tokens = tokenize("   42")
        assert tokens[0].pos == 3
        assert tokens[1].kind == TokenKind.EOF
        assert tokens[1].pos == 5

    def test_empty_source_is_just_eof(self) -> None:
        tokens = tokenize("")
        assert [t.kind for t in tokens] == [TokenKind.EOF]

    def test_whitespace_kinds(self) -> None:
        tokens = tokenize(" \t\r\n1\n")
        assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.EOF]

    def test_symbol_operators(self) -> None:
        tokens = tokenize("+ - * / %")
        ops = [t.op for t in tokens if isinstance(t, OperatorToken)]
        assert ops == [OpCode.ADD, OpCode.SUB, OpCode.MUL, OpCode.FDIV, OpCode.FMOD]
        assert tokens[-1].kind == TokenKind.EOF

    def test_reserved_words(self) -> None:
        tokens = tokenize("7 mod 2 div 3")
        assert tokens[1].kind == TokenKind.OP
        assert tokens[1].op == OpCode.FMOD
        assert tokens[3].op == OpCode.IDIV

    def test_reserved_word_prefix_is_identifier(self) -> None:
        tokens = tokenize("modulo divide mod_ _div")
        assert all(isinstance(t, IdentToken) for t in tokens[:-1])
        assert [t.name for t in tokens[:-1]] == ["modulo", "divide", "mod_", "_div"]

    def test_identifier(self) -> None:
        tokens = tokenize("rate_2")
        assert isinstance(tokens[0], IdentToken)
        assert tokens[0].name == "rate_2"

    def test_parentheses(self) -> None:
        tokens = tokenize("()")
        assert [t.kind for t in tokens] == [TokenKind.LPAREN, TokenKind.RPAREN, TokenKind.EOF]

    def test_digits_then_letters_split(self) -> None:
        tokens = tokenize("2x")
        assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.IDENT, TokenKind.EOF]

    def test_complex_expression(self) -> None:
        tokens = tokenize("(10 + 2) * 4")
        kinds = [t.kind for t in tokens]
        assert kinds == [
            TokenKind.LPAREN,
            TokenKind.NUMBER,
            TokenKind.OP,
            TokenKind.NUMBER,
            TokenKind.RPAREN,
            TokenKind.OP,
            TokenKind.NUMBER,
            TokenKind.EOF,
        ]
        assert [t.pos for t in tokens] == [0, 1, 4, 6, 7, 9, 11, 12]

    def test_exactly_one_eof(self) -> None:
        tokens = tokenize("1 + 2")
        assert sum(1 for t in tokens if t.kind == TokenKind.EOF) == 1

    def test_no_decimal_point(self) -> None:
        with pytest.raises(LexFault, match="unexpected character '.'"):
            tokenize("3.14")


class TestTokenizerErrors:
    """Tokenizer faults name the character and its offset."""

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexFault) as exc_info:
            tokenize("10 $ 2")
        assert exc_info.value.position == 3
        assert "'$'" in exc_info.value.message
        assert str(exc_info.value) == "unexpected character '$' at position 3"

    def test_first_fault_wins(self) -> None:
        with pytest.raises(LexFault) as exc_info:
            tokenize("1 & 2 $")
        assert exc_info.value.position == 2

    def test_non_ascii_letter(self) -> None:
        with pytest.raises(LexFault) as exc_info:
            tokenize("1 + é")
        assert exc_info.value.position == 4

    def test_non_ascii_digit(self) -> None:
        with pytest.raises(LexFault):
            tokenize("٣")
