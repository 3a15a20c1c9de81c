"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import load_settings
from core.config import ENV_PREFIX, get_user_env_file, write_user_env_vars
from core.domain.language import Language

app = typer.Typer(no_args_is_help=True, help="Configuration checks and user settings.")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def run() -> None:
    """Show the effective configuration and where it is read from."""

    settings = load_settings(_err_console)
    user_env = get_user_env_file()

    table = Table(title="restdoc-examples Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Float precision", "OK", str(settings.float_precision))
    table.add_row("Banner", "OK", "on" if settings.show_banner else "off")
    table.add_row("Log level", "OK", settings.log_level)
    if user_env.exists():
        table.add_row("User .env", "OK", str(user_env))
    else:
        table.add_row("User .env", "OPTIONAL", f"{user_env} (not created)")

    _console.print(table)


@app.command(name="set-language")
def set_language(
    language: Language = typer.Argument(..., help="Default greeting language."),
) -> None:
    """Store the default greeting language in the user config .env."""

    env_path = write_user_env_vars({f"{ENV_PREFIX}DEFAULT_LANGUAGE": language.value})
    _console.print(f"[green]Saved default language ({language.label()}) to:[/green] {env_path}")
