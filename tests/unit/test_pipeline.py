"""Tests for the txr pipeline driver and its diagnostic slot."""

from __future__ import annotations

import pytest

from txr import evaluate, run
from txr.core.calc.pipeline import RunResult, Txr, format_number
from txr.core.errors import Diagnostic, LexFault, ParseFault, RuntimeFault


class TestRun:
    """run() returns a value or a fault, never raises."""

    def test_success(self) -> None:
        result = run("(10 + 2) * 4")
        assert isinstance(result, RunResult)
        assert result.ok
        assert result.value == 48.0
        assert result.diagnostic is None
        assert result.phase is None

    def test_lex_fault(self) -> None:
        result = run("10 $ 2")
        assert not result.ok
        assert result.value is None
        assert result.phase == "lex"
        assert isinstance(result.error, LexFault)
        assert result.diagnostic == Diagnostic("unexpected character '$'", 3)

    def test_parse_fault(self) -> None:
        result = run("(1 + 2")
        assert result.phase == "parse"
        assert isinstance(result.error, ParseFault)
        assert str(result.diagnostic) == "expected a closing parenthesis at <EOF>"

    def test_trailing_data(self) -> None:
        result = run("1 2")
        assert result.phase == "parse"
        assert result.diagnostic == Diagnostic("trailing data", 2)

    def test_runtime_fault(self) -> None:
        result = run("x")
        assert result.phase == "runtime"
        assert isinstance(result.error, RuntimeFault)

    def test_unwrap(self) -> None:
        assert run("7 div 2").unwrap() == 3.0
        with pytest.raises(ParseFault):
            run("1 2").unwrap()

    def test_unwrap_empty(self) -> None:
        with pytest.raises(ValueError, match="neither a value nor an error"):
            RunResult().unwrap()

    def test_long_chain(self) -> None:
        result = run(" + ".join(["1"] * 1500))
        assert result.ok
        assert result.value == 1500.0

    def test_long_chain_with_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="txr"):
            result = run(" - ".join(["1"] * 1500))
        assert result.value == -1498.0
        assert any(r.getMessage().startswith("Parsed expression ((") for r in caplog.records)

    def test_deeply_nested(self) -> None:
        result = run("(" * 5000 + "1" + ")" * 5000)
        assert not result.ok
        assert result.phase == "parse"
        assert isinstance(result.error, ParseFault)
        assert result.diagnostic is not None
        assert result.diagnostic.message == "expression nested too deeply"


class TestEvaluate:
    """evaluate() returns the value or raises the fault."""

    def test_value(self) -> None:
        assert evaluate("10 + 2 * 4") == 18.0

    def test_raises(self) -> None:
        with pytest.raises(RuntimeFault, match="unimplemented feature"):
            evaluate("y * 2")


class TestDiagnosticSlot:
    """The context keeps only the most recent fault."""

    def test_starts_empty(self, ctx: Txr) -> None:
        assert ctx.diagnostic is None

    def test_fault_fills_slot(self, ctx: Txr) -> None:
        ctx.run("1 +")
        assert ctx.diagnostic == Diagnostic("unexpected token", None)

    def test_new_fault_overwrites(self, ctx: Txr) -> None:
        ctx.run("10 $ 2")
        ctx.run("1 2")
        assert ctx.diagnostic == Diagnostic("trailing data", 2)

    def test_success_clears(self, ctx: Txr) -> None:
        ctx.run("(1")
        assert ctx.diagnostic is not None
        assert ctx.run("1").ok
        assert ctx.diagnostic is None

    def test_single_phase_records_fault(self, ctx: Txr) -> None:
        with pytest.raises(LexFault):
            ctx.tokenize("@")
        assert ctx.diagnostic is not None
        assert ctx.diagnostic.position == 0

    def test_contexts_are_independent(self) -> None:
        first = Txr()
        second = Txr()
        first.run("(")
        assert second.diagnostic is None

    def test_options(self, tracing_ctx: Txr) -> None:
        assert tracing_ctx.options.trace
        assert tracing_ctx.run("2 * 3").value == 6.0


class TestDiagnostic:
    """Diagnostic formatting."""

    def test_position(self) -> None:
        assert Diagnostic("boom", 4).format() == "boom at position 4"

    def test_eof(self) -> None:
        assert str(Diagnostic("boom")) == "boom at <EOF>"
        assert Diagnostic("boom").location == "<EOF>"


class TestFormatNumber:
    """Results print like numbers, not like Python floats."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (48.0, "48"),
            (-3.0, "-3"),
            (0.0, "0"),
            (3.5, "3.5"),
            (float("inf"), "inf"),
            (1e22, "1e+22"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_number(value) == expected
