"""CLI principal (Typer).

Por qué Typer:
- Tipado de argumentos y ayuda automática sin boilerplate de argparse.
- Los comandos solo traducen entrada/salida; la lógica vive en `core`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_report_json
from cli import doctor
from cli.ui_components import (
    add_result_row,
    build_results_table,
    build_summary_panel,
    format_value,
    load_settings,
    print_banner,
)
from core.domain.arithmetic import Number, add as add_numbers, divide as divide_numbers
from core.domain.calculator import Calculator
from core.domain.greeting import greet as greet_person
from core.domain.language import Language
from core.logging_setup import configure_logging
from core.services.showcase import UnknownExampleError, default_examples, run_showcase

app = typer.Typer(
    no_args_is_help=True,
    help="Runnable examples of reStructuredText-style docstrings.",
)
app.add_typer(doctor.app, name="doctor")

calc_app = typer.Typer(no_args_is_help=True, help="Two-method Calculator class.")
app.add_typer(calc_app, name="calc")

_console = Console()
_err_console = Console(stderr=True)

# Negative operands such as `-2` must reach the command as arguments.
_NUMERIC_ARGS = {"ignore_unknown_options": True}


def _parse_number(raw: str) -> Number:
    """Parse an int when possible, otherwise a float."""

    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise typer.BadParameter(f"not a number: {raw!r}") from None


def _echo_number(value: Number) -> None:
    settings = load_settings(_err_console)
    typer.echo(format_value(value, settings.float_precision))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = load_settings(_err_console)
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command(context_settings=_NUMERIC_ARGS)
def add(
    a: str = typer.Argument(..., help="First number."),
    b: str = typer.Argument(..., help="Second number."),
) -> None:
    """Add two numbers."""

    _echo_number(add_numbers(_parse_number(a), _parse_number(b)))


@app.command(context_settings=_NUMERIC_ARGS)
def divide(
    a: str = typer.Argument(..., help="Dividend."),
    b: str = typer.Argument(..., help="Divisor."),
) -> None:
    """Divide A by B."""

    try:
        result = divide_numbers(_parse_number(a), _parse_number(b))
    except ZeroDivisionError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from None
    _echo_number(result)


@app.command()
def greet(
    name: str | None = typer.Argument(None, help="Name to greet (omit for a generic greeting)."),
    spanish: bool = typer.Option(
        False,
        "--spanish",
        help="Greet in Spanish (default: RESTDOC_DEFAULT_LANGUAGE).",
    ),
) -> None:
    """Print a greeting."""

    settings = load_settings(_err_console)
    language = Language.SPANISH if spanish else settings.default_language
    try:
        message = greet_person(name, language=language)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="NAME") from None
    typer.echo(message)


@calc_app.command(name="add", context_settings=_NUMERIC_ARGS)
def calc_add(a: str, b: str) -> None:
    """Calculator.add(A, B)."""

    _echo_number(Calculator().add(_parse_number(a), _parse_number(b)))


@calc_app.command(name="subtract", context_settings=_NUMERIC_ARGS)
def calc_subtract(a: str, b: str) -> None:
    """Calculator.subtract(A, B)."""

    _echo_number(Calculator().subtract(_parse_number(a), _parse_number(b)))


@app.command()
def showcase(
    only: list[str] | None = typer.Option(
        None,
        "--only",
        help="Run only the named example (repeatable).",
    ),
    json_path: Path | None = typer.Option(
        None,
        "--json",
        help="Also write the report as JSON to this path.",
        dir_okay=False,
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Hide the banner."),
) -> None:
    """Run every documented example and compare it with the documented output."""

    settings = load_settings(_err_console)
    if settings.show_banner and not no_banner:
        print_banner(_console)

    table = build_results_table()
    try:
        report = run_showcase(
            default_examples(settings.default_language),
            names=only,
            on_result=lambda result: add_result_row(table, result),
        )
    except UnknownExampleError as exc:
        raise typer.BadParameter(str(exc), param_hint="--only") from None

    _console.print(table)
    _console.print(build_summary_panel(report))

    if json_path is not None:
        written = export_report_json(report=report, output_path=json_path)
        _console.print(f"[green]JSON report:[/green] {written}")

    if not report.all_passed:
        raise typer.Exit(code=1)


def run() -> None:
    app()
