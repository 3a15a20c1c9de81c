"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ExampleOutcome, ExampleResult, ShowcaseReport

_OUTCOME_STYLE = {
    ExampleOutcome.PASSED: "green",
    ExampleOutcome.FAILED: "yellow",
    ExampleOutcome.RAISED: "red",
}


def load_settings(console: Console) -> AppSettings:
    """Carga `AppSettings`; una configuración inválida termina con exit code 1.

    Evita que un valor mal escrito en el entorno o en un `.env` muestre un
    traceback de pydantic en cada comando.
    """

    try:
        return AppSettings()
    except ValidationError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner` / `RESTDOC_SHOW_BANNER=false`) en
    modos no interactivos.
    """

    title = Text("restdoc-examples", style="bold cyan")
    subtitle = Text("reStructuredText docstrings • runnable examples", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_value(value: object, precision: int) -> str:
    """Render a numeric result; floats are rounded to `precision` decimals."""

    if isinstance(value, float):
        return f"{value:.{precision}f}"
    return str(value)


def build_results_table() -> Table:
    """Crea la tabla Rich de resultados del showcase (vacía)."""

    table = Table(title="Documented Examples")
    table.add_column("Example", style="cyan", no_wrap=True)
    table.add_column("Expression", style="white")
    table.add_column("Expected", style="magenta")
    table.add_column("Actual", style="white")
    table.add_column("Outcome", no_wrap=True)
    return table


def add_result_row(table: Table, result: ExampleResult) -> None:
    """Añade una fila; si no hay valor obtenido se muestra el error."""

    style = _OUTCOME_STYLE[result.outcome]
    actual = result.actual if result.actual is not None else (result.error or "")
    table.add_row(
        result.name,
        result.expression,
        result.expected,
        actual,
        Text(result.outcome.value.upper(), style=style),
    )


def build_summary_panel(report: ShowcaseReport) -> Panel:
    """Panel con el resumen del showcase."""

    ok = report.all_passed
    body = Text()
    body.append(f"{report.passed_count}/{report.total} examples passed")
    if not ok:
        body.append(f"\n{report.failed_count} example(s) did not match the docs", style="bold red")
    return Panel(body, title="Summary", border_style="green" if ok else "red")
