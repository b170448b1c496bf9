"""
Pipeline driver: source text → tokens → AST → program → value.

Each phase raises on its first fault. `Txr` is the per-invocation context
that runs the phases in order and keeps the most recent fault in a single
diagnostic slot; `run` returns a RunResult instead of raising.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from txr.core.calc.compiler import compile_expr
from txr.core.calc.evaluator import execute
from txr.core.calc.parser import parse
from txr.core.calc.tokenizer import Token, tokenize
from txr.core.errors import Diagnostic, TxrError
from txr.core.ir.expressions import Expr
from txr.core.ir.program import Program
from txr.core.options import RunOptions

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one pipeline run: a value or a fault."""

    value: float | None = None
    error: TxrError | None = None
    phase: str | None = None  # Phase that faulted

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def diagnostic(self) -> Diagnostic | None:
        return self.error.diagnostic if self.error else None

    def unwrap(self) -> float:
        """Return the value, or re-raise the fault."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("RunResult holds neither a value nor an error")
        return self.value


class Txr:
    """
    One pipeline context.

    Holds the diagnostic slot: the last fault raised by any phase run
    through this context. A new fault overwrites the previous one and a
    successful full run clears it.
    """

    def __init__(self, options: RunOptions | None = None) -> None:
        self.options = options or RunOptions()
        self.diagnostic: Diagnostic | None = None

    def _record(self, error: TxrError) -> None:
        self.diagnostic = error.diagnostic

    def tokenize(self, source: str) -> list[Token]:
        try:
            return tokenize(source)
        except TxrError as e:
            self._record(e)
            raise

    def parse(self, tokens: list[Token]) -> Expr:
        try:
            return parse(tokens)
        except TxrError as e:
            self._record(e)
            raise

    def compile(self, expr: Expr) -> Program:
        try:
            return compile_expr(expr)
        except TxrError as e:
            self._record(e)
            raise

    def execute(self, program: Program) -> float:
        try:
            return execute(program, trace=self.options.trace)
        except TxrError as e:
            self._record(e)
            raise

    def run(self, source: str) -> RunResult:
        """Run every phase over `source`, stopping at the first fault."""
        phase = "lex"
        try:
            tokens = self.tokenize(source)
            phase = "parse"
            expr = self.parse(tokens)
            phase = "compile"
            program = self.compile(expr)
            phase = "runtime"
            value = self.execute(program)
        except TxrError as e:
            logger.info(f"{phase} fault: {e.diagnostic}")
            return RunResult(error=e, phase=phase)

        self.diagnostic = None
        logger.info(f"Evaluated {source!r} = {value!r}")
        return RunResult(value=value)


def run(source: str, options: RunOptions | None = None) -> RunResult:
    """Run the pipeline in a fresh context."""
    return Txr(options).run(source)


def evaluate(source: str) -> float:
    """Evaluate an expression string.

    Usage:
        evaluate("(10 + 2) * 4")  # 48.0

    Raises:
        TxrError: The first fault of whichever phase failed.
    """
    return run(source).unwrap()


def format_number(value: float) -> str:
    """Render a result: integral values without a fractional part."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
