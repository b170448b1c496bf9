"""
Recursive descent parser for txr expressions.

Grammar:
    expr     → primary (OP primary)*
    primary  → NUMBER | IDENT | "(" expr ")" | "+" primary | "-" primary

Operators are not climbed recursively. After a primary, the parser collects
the whole flat run of operands and operators, then resolves precedence by
folding tier by tier, tightest first, left to right within a tier. The
operand of a unary operator is parsed with chaining suppressed, so unary
plus and minus bind tighter than any binary operator:

    -2 + 3        → (-2 + 3)
    10 - 2 - 3    → ((10 - 2) - 3)
    10 + 2 * 4    → (10 + (2 * 4))
"""

from __future__ import annotations

import logging

from txr.core.calc.tokenizer import (
    IdentToken,
    NumberToken,
    OperatorToken,
    Token,
    TokenKind,
    tokenize,
)
from txr.core.errors import ParseFault
from txr.core.ir.expressions import BinaryExpr, Expr, Identifier, NumberLiteral, UnaryExpr
from txr.core.ir.operators import OpCode, UnaryOp

logger = logging.getLogger(__name__)


def _fault_at(message: str, tok: Token) -> ParseFault:
    """Build a fault located at a token, or at <EOF> for the end token."""
    if tok.kind == TokenKind.EOF:
        return ParseFault(message, None)
    return ParseFault(message, tok.pos)


class _Parser:
    """Parser state: the token sequence and a cursor into it."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    # -- Grammar rules --

    def parse_expression(self, suppress_chaining: bool = False) -> Expr:
        """Parse a primary and, unless suppressed, the operator run after it."""
        first = self.parse_primary()
        if suppress_chaining or not isinstance(self.current, OperatorToken):
            return first
        return self._parse_chain(first)

    def parse_primary(self) -> Expr:
        """NUMBER | IDENT | '(' expr ')' | '+' primary | '-' primary"""
        tok = self.current

        if isinstance(tok, NumberToken):
            self.advance()
            return NumberLiteral(value=tok.value, pos=tok.pos)

        if isinstance(tok, IdentToken):
            self.advance()
            return Identifier(name=tok.name, pos=tok.pos)

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expression()
            if self.current.kind != TokenKind.RPAREN:
                raise _fault_at("expected a closing parenthesis", self.current)
            self.advance()
            return expr

        if isinstance(tok, OperatorToken):
            if tok.op == OpCode.ADD:
                self.advance()
                return self.parse_expression(suppress_chaining=True)
            if tok.op == OpCode.SUB:
                self.advance()
                operand = self.parse_expression(suppress_chaining=True)
                return UnaryExpr(op=UnaryOp.NEG, operand=operand, pos=tok.pos)

        raise _fault_at("unexpected token", tok)

    def _parse_chain(self, first: Expr) -> Expr:
        """Collect `first (OP primary)*` and fold it by precedence tier."""
        operands: list[Expr] = [first]
        operators: list[OperatorToken] = []

        while isinstance(self.current, OperatorToken):
            operators.append(self.current)
            self.advance()
            operands.append(self.parse_expression(suppress_chaining=True))

        return _fold(operands, operators)


def _fold(operands: list[Expr], operators: list[OperatorToken]) -> Expr:
    """Resolve an operand/operator run into one tree.

    For each tier from 0 up to MAXP, every operator of that tier is folded
    left to right with its two neighbouring operands. The lists shrink in
    place, so the scan stays on the same index after a fold.
    """
    if len(operands) != len(operators) + 1:
        pos = operators[0].pos if operators else None
        raise ParseFault("malformed operator run", pos)

    for tier in range(OpCode.MAXP.tier):
        i = 0
        while i < len(operators):
            tok = operators[i]
            if tok.op.tier != tier:
                i += 1
                continue
            node = BinaryExpr(op=tok.op, left=operands[i], right=operands[i + 1], pos=tok.pos)
            operands[i : i + 2] = [node]
            del operators[i]

    return operands[0]


def parse(tokens: list[Token]) -> Expr:
    """Parse a complete token sequence into an AST.

    Args:
        tokens: Output of `tokenize`, ending in one EOF token.

    Returns:
        The root of the expression tree.

    Raises:
        ParseFault: If the tokens do not form exactly one expression.
    """
    parser = _Parser(tokens)
    try:
        expr = parser.parse_expression()
    except RecursionError:
        raise _fault_at("expression nested too deeply", parser.current) from None

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise _fault_at("trailing data", parser.current)

    logger.debug("Parsed expression %s", expr)
    return expr


def parse_expr(source: str) -> Expr:
    """Tokenize and parse an expression string.

    Args:
        source: Expression string (e.g., "(10 + 2) * 4")

    Returns:
        Parsed expression AST.

    Raises:
        LexFault: If tokenization fails.
        ParseFault: If the expression is invalid.
    """
    return parse(tokenize(source))
