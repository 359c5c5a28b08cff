"""
Interactive demo of sticky regions in the terminal.

Keys:
    l / r / t / b   pin a new pane to the left / right / top / bottom
    s               split the body with a new pane
    o               collapse to the selected pane
    x               remove the selected pane
    u               unpin the selected pane
    e               toggle sticky mode
    q               quit
"""

from __future__ import annotations

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container

from ..config.settings import PinSettings
from ..exceptions import PinpaneError
from ..sticky import StickyRegions
from ..utils.logging import setup_file_logging
from .host import WORKSPACE_ID, RegionPane, TextualHost

logger = logging.getLogger(__name__)

WELCOME = "main\n\n[dim]l/r/t/b pin · s split · o collapse · x remove · u unpin · e toggle · q quit[/dim]"


class PinpaneApp(App[None]):
    """Textual app hosting pinned panes."""

    TITLE = "pinpane"

    CSS = f"""
    #{WORKSPACE_ID} {{
        width: 1fr;
        height: 1fr;
    }}
    """

    BINDINGS = [
        Binding("l", "pin('left')", "Pin left"),
        Binding("r", "pin('right')", "Pin right"),
        Binding("t", "pin('top')", "Pin top"),
        Binding("b", "pin('bottom')", "Pin bottom"),
        Binding("s", "split", "Split"),
        Binding("o", "collapse", "Collapse"),
        Binding("x", "remove", "Remove"),
        Binding("u", "unpin", "Unpin"),
        Binding("e", "toggle_sticky", "Toggle sticky"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, default_size: Optional[float] = None) -> None:
        super().__init__()
        self.host = TextualHost(self)
        settings = PinSettings(default_size) if default_size is not None else None
        self.sticky = StickyRegions(self.host, settings)
        self._counter = 0

    def compose(self) -> ComposeResult:
        yield Container(id=WORKSPACE_ID)

    def on_mount(self) -> None:
        self.host.set_frame_size(self.size.width, self.size.height)
        self.host.display(WELCOME)
        self.sticky.set_enabled(True)

    def on_resize(self, event: events.Resize) -> None:
        if event.size.width > 0 and event.size.height > 0:
            self.host.set_frame_size(event.size.width, event.size.height)

    def on_region_pane_selected(self, message: RegionPane.Selected) -> None:
        region = message.pane.region
        if self.host.is_live(region):
            self.host.select_region(region)

    def _next_name(self, kind: str) -> str:
        self._counter += 1
        return f"{kind} #{self._counter}"

    def action_pin(self, side: str) -> None:
        try:
            self.sticky.create_pinned(self._next_name(side), side)
        except PinpaneError as e:
            logger.info(f"Pin {side} failed: {e}")
            self.notify(str(e), severity="error")

    def action_split(self) -> None:
        try:
            self.host.split_region(self._next_name("buffer"))
        except PinpaneError as e:
            self.notify(str(e), severity="error")

    def action_collapse(self) -> None:
        self.host.collapse_to_one()

    def action_remove(self) -> None:
        try:
            self.host.remove_region()
        except PinpaneError as e:
            self.notify(str(e), severity="error")

    def action_unpin(self) -> None:
        region = self.host.selected_region()
        if region is not None and self.sticky.unpin(region):
            self.host.refresh_panes()
            self.notify(f"Unpinned {region.content}")

    def action_toggle_sticky(self) -> None:
        enabled = self.sticky.toggle()
        self.notify(f"Sticky regions {'on' if enabled else 'off'}")


def run_demo(default_size: Optional[float] = None) -> None:
    """Run the demo app until the user quits, logging to file."""
    setup_file_logging()
    PinpaneApp(default_size=default_size).run()
