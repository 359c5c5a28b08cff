"""
Configuration commands for pinpane.

    pinpane config show          → show the effective default size and its source
    pinpane config set-size 0.25 → persist a new default size
"""

import typer
from rich.table import Table

from pinpane.config.constants import DEFAULT_PIN_SIZE, ENV_DEFAULT_SIZE
from pinpane.config.settings import get_config_path, resolve_default_size, set_default_size
from pinpane.exceptions import ConfigurationError
from pinpane.utils.output import console, print_json

app = typer.Typer(help="Show or change pinpane settings")

_SOURCES = {
    "env": f"environment ({ENV_DEFAULT_SIZE})",
    "file": "config file",
    "default": "built-in default",
}


@app.command("show")
def show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective settings."""
    size, source = resolve_default_size()
    path = get_config_path()

    if json_output:
        print_json({"default_size": size, "source": source, "config_path": str(path)})
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Source", style="green")
    table.add_row("default_size", _format_size(size), _SOURCES[source])
    console.print(table)
    console.print(f"[dim]Config file: {path}[/dim]")


@app.command("set-size")
def set_size(
    value: str = typer.Argument(..., help="Ratio of the frame (< 1) or cells (>= 1)"),
) -> None:
    """Persist the default size of new pinned regions."""
    try:
        size = set_default_size(value)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]✓[/green] Default pin size set to {_format_size(size)}")
    if size == DEFAULT_PIN_SIZE:
        console.print("[dim]This is also the built-in default[/dim]")


def _format_size(size: float) -> str:
    if size < 1:
        return f"{size:g} ({size * 100:g}% of frame)"
    return f"{size:g} cells"
