"""
txr CLI - Entry point.

Evaluates one arithmetic expression and prints the result:

    txr "(10 + 2) * 4"
    txr --ast --program "10 - 2 - 3"
    txr "-7 div 2"

Faults are reported on stderr with exit status 1. Text that is not a known
option, such as a leading unary minus, is taken as the expression.
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from txr._version import get_version
from txr.core.calc.pipeline import Txr, format_number
from txr.core.errors import TxrError
from txr.core.ir.program import Program
from txr.core.options import RunOptions

app = typer.Typer(
    help="txr – evaluate arithmetic expressions",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display the version and exit."""
    if value:
        typer.echo(f"txr version {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _print_program(program: Program) -> None:
    console.rule("Program")
    for line in program.disassemble():
        console.print(escape(line), highlight=False)


@app.command(context_settings={"ignore_unknown_options": True})
def evaluate_command(
    expression: Annotated[str, typer.Argument(help="Expression source text")],
    show_tokens: Annotated[
        bool, typer.Option("--tokens", help="Print the token sequence")
    ] = False,
    show_ast: Annotated[
        bool, typer.Option("--ast", help="Print the parsed tree, fully parenthesized")
    ] = False,
    show_program: Annotated[
        bool, typer.Option("--program", help="Print the compiled program")
    ] = False,
    trace: Annotated[
        bool, typer.Option("--trace", help="Log every evaluator step (needs --verbose)")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Evaluate EXPRESSION and print the result."""
    _configure_logging(verbose)
    ctx = Txr(RunOptions(trace=trace))

    phase = "lex"
    try:
        tokens = ctx.tokenize(expression)
        if show_tokens:
            for tok in tokens:
                typer.echo(repr(tok))

        phase = "parse"
        expr = ctx.parse(tokens)
        if show_ast:
            typer.echo(str(expr))

        phase = "compile"
        program = ctx.compile(expr)
        if show_program:
            _print_program(program)

        phase = "runtime"
        value = ctx.execute(program)
    except TxrError as e:
        err_console.print(f"[red]{phase} error:[/red] {escape(str(e.diagnostic))}")
        raise typer.Exit(code=1) from e

    typer.echo(format_number(value))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main()
