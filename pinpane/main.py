#!/usr/bin/env python3
"""
Main CLI entry point for pinpane
"""

from typing import Optional

import typer

from pinpane import __version__
from pinpane.commands import config as config_cmd
from pinpane.commands.simulate import simulate
from pinpane.config.settings import PinSettings
from pinpane.exceptions import ConfigurationError
from pinpane.utils.logging import setup_logging
from pinpane.utils.output import console

app = typer.Typer(
    help="pinpane - pinned regions that survive collapse and keep their size",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    pinpane - pinned (sticky) regions for window layouts

    [bold]Examples:[/bold]

    Try it in the terminal:
        [cyan]pinpane demo[/cyan]

    Watch a pinned region follow frame resizes:
        [cyan]pinpane simulate --pin left:0.3 --resize 100x40[/cyan]
    """
    setup_logging(verbose)


@app.command()
def version() -> None:
    """Show pinpane version"""
    typer.echo(f"pinpane version {__version__}")


@app.command()
def demo(
    size: Optional[float] = typer.Option(
        None, "--size", "-s", help="Default size of pinned panes (ratio or cells)"
    ),
) -> None:
    """Interactive terminal demo of sticky panes."""
    from pinpane.ui.app import run_demo

    if size is not None:
        try:
            PinSettings(size)
        except ConfigurationError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e

    try:
        run_demo(default_size=size)
    except KeyboardInterrupt:
        pass


app.command()(simulate)
app.add_typer(config_cmd.app, name="config")


def run() -> None:
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
