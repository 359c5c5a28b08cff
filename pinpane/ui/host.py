"""
Textual layout host.

Projects the flat layout model of ``MemoryHost`` onto widgets: every
region is a ``RegionPane`` inside the ``#workspace`` container, edge
regions are docked to their side with their extent set in cells, and
body regions share the rest. The frame is the terminal size, kept in
sync by the app's resize handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Static

from ..core.types import PIN_SIDE, PIN_SIZE, PINNED, Axis
from ..host.memory import MemoryHost
from ..host.protocol import Region

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)

WORKSPACE_ID = "workspace"


class RegionPane(Static, can_focus=True):
    """Widget showing one region's content."""

    DEFAULT_CSS = """
    RegionPane {
        border: round $secondary;
        padding: 0 1;
    }

    RegionPane:focus {
        border: round $accent;
    }
    """

    class Selected(Message):
        """Posted when a pane receives focus."""

        def __init__(self, pane: "RegionPane") -> None:
            self.pane = pane
            super().__init__()

    def __init__(self, region: Region) -> None:
        super().__init__(id=f"region-{region.region_id}")
        self.region = region

    def on_focus(self) -> None:
        self.post_message(self.Selected(self))

    def describe(self) -> str:
        """Pane label: content plus pin information."""
        label = str(self.region.content)
        if self.region.attributes.get(PINNED):
            side = self.region.attributes[PIN_SIDE]
            size = self.region.attributes[PIN_SIZE]
            label += f"\n[dim]pinned {side.value}, {size}[/dim]"
        return label


class TextualHost(MemoryHost):
    """Layout host whose regions are Textual widgets."""

    def __init__(self, app: "App", width: int = 80, height: int = 24, **kwargs) -> None:
        super().__init__(width, height, **kwargs)
        self.app = app
        self._panes: Dict[Region, RegionPane] = {}

    def pane_for(self, region: Region) -> Optional[RegionPane]:
        return self._panes.get(region)

    def publish_layout_change(self, trigger=None) -> None:
        super().publish_layout_change(trigger)
        self.refresh_panes()

    def notify(self, message: str, severity: str = "information") -> None:
        super().notify(message, severity)
        self.app.notify(message, severity=severity)

    def refresh_panes(self) -> None:
        """Mount, restyle and remove panes to match the layout model."""
        try:
            workspace = self.app.query_one(f"#{WORKSPACE_ID}")
        except NoMatches:
            # Not composed yet; the first refresh after mount catches up
            return

        for region, pane in list(self._panes.items()):
            if not region.live:
                pane.remove()
                del self._panes[region]

        previous: Optional[RegionPane] = None
        for region in self.live_regions():
            pane = self._panes.get(region)
            if pane is None:
                pane = RegionPane(region)
                self._panes[region] = pane
                if previous is not None:
                    workspace.mount(pane, after=previous)
                elif workspace.children:
                    workspace.mount(pane, before=0)
                else:
                    workspace.mount(pane)
            self._style_pane(region, pane)
            previous = pane

        selected = self.selected_region()
        if selected is not None and selected in self._panes:
            pane = self._panes[selected]
            if not pane.has_focus:
                pane.focus()

    def _style_pane(self, region: Region, pane: RegionPane) -> None:
        side = self.edge_of(region)
        if side is None:
            pane.styles.width = "1fr"
            pane.styles.height = "1fr"
        elif side.axis is Axis.WIDTH:
            pane.styles.dock = side.value
            pane.styles.width = self.region_size(region, Axis.WIDTH)
            pane.styles.height = "100%"
        else:
            pane.styles.dock = side.value
            pane.styles.width = "100%"
            pane.styles.height = self.region_size(region, Axis.HEIGHT)
        pane.update(pane.describe())
