"""
Simulate sticky regions on an in-memory layout.

    pinpane simulate --pin left:0.3 --pin bottom:8 --resize 100x30

Creates a frame with one body region, pins the requested regions, applies
each frame resize in order and prints the resulting layout.
"""

from typing import List, Optional, Tuple

import typer
from rich.table import Table

from pinpane.config.settings import PinSettings
from pinpane.core.types import Side
from pinpane.exceptions import PinpaneError
from pinpane.host.memory import MemoryHost
from pinpane.sticky import StickyRegions
from pinpane.utils.output import console, print_json


def parse_pin(value: str) -> Tuple[Side, Optional[float]]:
    """Parse "side" or "side:size" into a side and optional size."""
    side_text, _, size_text = value.partition(":")
    try:
        side = Side.parse(side_text)
    except PinpaneError as e:
        raise typer.BadParameter(e.message, param_hint="--pin") from e
    if not size_text:
        return side, None
    try:
        return side, float(size_text)
    except ValueError:
        raise typer.BadParameter(
            f"Invalid size {size_text!r} in {value!r}", param_hint="--pin"
        ) from None


def parse_frame(value: str) -> Tuple[int, int]:
    """Parse "WIDTHxHEIGHT" into integers."""
    width, sep, height = value.lower().partition("x")
    try:
        if not sep:
            raise ValueError(value)
        return int(width), int(height)
    except ValueError:
        raise typer.BadParameter(
            f"Frame size must look like 100x30, got {value!r}", param_hint="--resize"
        ) from None


def simulate(
    width: int = typer.Option(120, "--width", "-W", help="Initial frame width in cells"),
    height: int = typer.Option(40, "--height", "-H", help="Initial frame height in cells"),
    pins: List[str] = typer.Option(
        [], "--pin", "-p", help="Pinned region as SIDE[:SIZE], repeatable"
    ),
    resizes: List[str] = typer.Option(
        [], "--resize", "-r", help="Resize the frame to WxH afterwards, repeatable"
    ),
    collapse: bool = typer.Option(False, "--collapse", help="Collapse to one region at the end"),
    disabled: bool = typer.Option(False, "--disabled", help="Run with sticky mode off"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Pin regions on an in-memory frame and show the resulting layout."""
    pin_args = [parse_pin(value) for value in pins]
    frames = [parse_frame(value) for value in resizes]

    try:
        host = MemoryHost(width, height)
        host.display("main")
        sticky = StickyRegions(host, PinSettings.load())
        sticky.set_enabled(not disabled)

        for side, size in pin_args:
            sticky.create_pinned(side.value, side, size)
        for frame_width, frame_height in frames:
            host.set_frame_size(frame_width, frame_height)
        if collapse:
            host.collapse_to_one()
    except PinpaneError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    rows = host.snapshot()
    if json_output:
        print_json(
            {
                "frame": {"width": host.width, "height": host.height},
                "enabled": sticky.enabled,
                "regions": rows,
                "messages": [{"severity": s, "message": m} for s, m in host.messages],
            }
        )
        return

    state = "on" if sticky.enabled else "off"
    console.print(f"\n[bold]Frame {host.width}x{host.height}[/bold] (sticky {state})\n")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan", width=4)
    table.add_column("Content", style="white")
    table.add_column("Edge", style="green")
    table.add_column("Pinned", style="yellow")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")

    for row in rows:
        marker = " *" if row["selected"] else ""
        table.add_row(
            str(row["id"]),
            f"{row['content']}{marker}",
            row["edge"],
            "yes" if row["pinned"] else "",
            str(row["width"]),
            str(row["height"]),
        )
    console.print(table)

    for severity, message in host.messages:
        style = "red" if severity == "error" else "yellow"
        console.print(f"[{style}]{severity}: {message}[/{style}]")
