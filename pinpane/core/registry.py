"""
Region registry - classification queries over the live layout.

Nothing is cached: every query reads the host's current region set,
which may change between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .types import PINNED

if TYPE_CHECKING:
    from ..host.protocol import LayoutHost, Region


class RegionRegistry:
    """Answers "which regions are pinned" against a layout host."""

    def __init__(self, host: "LayoutHost") -> None:
        self.host = host

    def is_pinned(self, region: Optional["Region"]) -> bool:
        """True if the region is live and carries the pin flag."""
        if not self.host.is_live(region):
            return False
        return bool(self.host.get_attribute(region, PINNED, False))

    def list_pinned(self) -> List["Region"]:
        """Live pinned regions in host enumeration order."""
        return [region for region in self.host.live_regions() if self.is_pinned(region)]

    def list_unpinned(self) -> List["Region"]:
        """Live regions without the pin flag, in host enumeration order."""
        return [region for region in self.host.live_regions() if not self.is_pinned(region)]

    def first_unpinned(self) -> Optional["Region"]:
        """First unpinned region, or None when every region is pinned."""
        unpinned = self.list_unpinned()
        return unpinned[0] if unpinned else None
