"""
In-memory layout host.

A flat layout engine over a ``width x height`` frame measured in cells:

- left/right edge regions take width and span the height left over by
  top/bottom edge regions
- top/bottom edge regions take height and span the full frame width
- body regions share what remains, stacked vertically

It is the host used by the test suite and by ``pinpane simulate``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..config.constants import MIN_REGION_HEIGHT, MIN_REGION_WIDTH
from ..core.types import DEDICATED, NO_COLLAPSE, PIN_SIDE, PINNED, Axis, Side
from ..exceptions import AllocationFailedError, HostError, HostResizeError
from .base import InterceptingHost
from .protocol import Region

logger = logging.getLogger(__name__)


class MemoryHost(InterceptingHost):
    """Layout host that keeps the whole layout in process memory."""

    def __init__(
        self,
        width: int = 120,
        height: int = 40,
        *,
        min_width: int = MIN_REGION_WIDTH,
        min_height: int = MIN_REGION_HEIGHT,
    ) -> None:
        super().__init__()
        if width <= 0 or height <= 0:
            raise HostError("Frame size must be positive", width=width, height=height)
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        self._regions: List[Region] = []
        self._edges: Dict[Region, Side] = {}
        self._extents: Dict[Region, int] = {}
        self._selected: Optional[Region] = None

    # ------------------------------------------------------------------
    # Enumeration and selection
    # ------------------------------------------------------------------

    def live_regions(self) -> List[Region]:
        return list(self._regions)

    def is_live(self, region: Optional[Region]) -> bool:
        return region is not None and region.live and region in self._regions

    def selected_region(self) -> Optional[Region]:
        return self._selected

    def select_region(self, region: Region) -> None:
        self._selected = self._require_live(region)

    def edge_of(self, region: Region) -> Optional[Side]:
        """Side a region is docked to, or None for body regions."""
        return self._edges.get(region)

    def body_regions(self) -> List[Region]:
        return [region for region in self._regions if region not in self._edges]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def frame_size(self, axis: Axis) -> int:
        return self.width if axis is Axis.WIDTH else self.height

    def _min_size(self, axis: Axis) -> int:
        return self.min_width if axis is Axis.WIDTH else self.min_height

    def _edge_total(
        self, axis: Axis, extents: Dict[Region, int], edges: Dict[Region, Side]
    ) -> int:
        return sum(extent for region, extent in extents.items() if edges[region].axis is axis)

    def _body_size(self, axis: Axis) -> int:
        return self.frame_size(axis) - self._edge_total(axis, self._extents, self._edges)

    def _required_body(self, axis: Axis, body_count: int, edges: Dict[Region, Side]) -> int:
        if axis is Axis.WIDTH:
            return self.min_width if body_count else 0
        if body_count:
            return self.min_height * body_count
        # Left/right regions span the body height
        return self.min_height if any(s.axis is Axis.WIDTH for s in edges.values()) else 0

    def _fits(
        self,
        extents: Dict[Region, int],
        edges: Dict[Region, Side],
        body_count: int,
    ) -> bool:
        return all(
            self.frame_size(axis) - self._edge_total(axis, extents, edges)
            >= self._required_body(axis, body_count, edges)
            for axis in Axis
        )

    def region_size(self, region: Region, axis: Axis) -> int:
        self._require_live(region)
        side = self._edges.get(region)
        if side is not None:
            if side.axis is axis:
                return self._extents[region]
            if axis is Axis.WIDTH:
                return self.width
            return self._body_size(Axis.HEIGHT)

        if axis is Axis.WIDTH:
            return self._body_size(Axis.WIDTH)
        body = self.body_regions()
        total = self._body_size(Axis.HEIGHT)
        share = total // len(body)
        if region is body[-1]:
            return total - share * (len(body) - 1)
        return share

    def resize_region(self, region: Region, delta: int, axis: Axis) -> None:
        self._require_live(region)
        if delta == 0:
            return
        side = self._edges.get(region)
        if side is None or side.axis is not axis:
            raise HostResizeError(
                f"Region cannot be resized along its {axis.value}",
                delta=delta,
                region_id=region.region_id,
            )
        new_extent = self._extents[region] + delta
        if new_extent < self._min_size(axis):
            raise HostResizeError(
                "Region would fall below its minimum size",
                delta=delta,
                region_id=region.region_id,
            )
        extents = {**self._extents, region: new_extent}
        if not self._fits(extents, self._edges, len(self.body_regions())):
            raise HostResizeError(
                "Not enough room to resize region",
                delta=delta,
                region_id=region.region_id,
            )
        self._extents[region] = new_extent
        logger.debug(f"Resized {region!r} {axis.value} by {delta} to {new_extent}")
        self.publish_layout_change("resize")

    def set_frame_size(self, width: int, height: int) -> None:
        """Resize the frame, squeezing edge regions if the body runs out of room."""
        if width <= 0 or height <= 0:
            raise HostError("Frame size must be positive", width=width, height=height)
        self.width = width
        self.height = height
        body_count = len(self.body_regions())
        for axis in Axis:
            needed = self._required_body(axis, body_count, self._edges) - self._body_size(axis)
            for region in reversed(self._regions):
                if needed <= 0:
                    break
                side = self._edges.get(region)
                if side is None or side.axis is not axis:
                    continue
                give = min(needed, self._extents[region] - self._min_size(axis))
                if give > 0:
                    self._extents[region] -= give
                    needed -= give
        logger.debug(f"Frame resized to {width}x{height}")
        self.publish_layout_change("frame-resize")

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def create_region(self, content: Any, side: Side, size: int) -> Region:
        """Allocate an edge region of ``size`` cells (at least the minimum)."""
        extent = max(int(size), self._min_size(side.axis))
        region = Region(content)
        extents = {**self._extents, region: extent}
        edges = {**self._edges, region: side}
        if not self._fits(extents, edges, len(self.body_regions())):
            raise AllocationFailedError(
                f"Not enough room for a {side.value} region of {extent} cells",
                frame=f"{self.width}x{self.height}",
            )
        self._regions.append(region)
        self._edges[region] = side
        self._extents[region] = extent
        if self._selected is None:
            self._selected = region
        logger.debug(f"Allocated {region!r} at {side.value}, {extent} cells")
        self.publish_layout_change("create")
        return region

    def split_region(self, content: Any = None, region: Optional[Region] = None) -> Region:
        """Add a body region below ``region`` (or the selected body region)."""
        anchor = region if region is not None else self._selected
        body = self.body_regions()
        if not self._fits(self._extents, self._edges, len(body) + 1):
            raise AllocationFailedError(
                "Not enough room to split", frame=f"{self.width}x{self.height}"
            )
        new_region = Region(content)
        if anchor is not None and anchor in body:
            self._regions.insert(self._regions.index(anchor) + 1, new_region)
        else:
            self._regions.append(new_region)
        if self._selected is None:
            self._selected = new_region
        logger.debug(f"Split created {new_region!r}")
        self.publish_layout_change("split")
        return new_region

    def display(self, content: Any) -> Region:
        """Show content in the selected region, honouring dedicated regions.

        A dedicated selected region keeps its content; the first
        non-dedicated region is used instead, or a new body region is
        split off when every region is dedicated.
        """
        target = self._selected
        if target is not None and target.attributes.get(DEDICATED):
            target = next(
                (r for r in self._regions if not r.attributes.get(DEDICATED)), None
            )
        if target is None:
            return self.split_region(content)
        target.content = content
        self.publish_layout_change("display")
        return target

    # ------------------------------------------------------------------
    # Structural primitives
    # ------------------------------------------------------------------

    def _destroy(self, region: Region) -> None:
        self._regions.remove(region)
        self._edges.pop(region, None)
        self._extents.pop(region, None)
        region.live = False
        if self._selected is region:
            body = self.body_regions()
            self._selected = body[0] if body else (self._regions[0] if self._regions else None)
        logger.debug(f"Destroyed {region!r}")

    def _collapse_primitive(self) -> None:
        keep = self._selected
        if keep is None:
            return
        for region in list(self._regions):
            if region is keep or region.attributes.get(NO_COLLAPSE):
                continue
            self._destroy(region)

    def _remove_primitive(self, region: Optional[Region]) -> None:
        target = self._require_live(region if region is not None else self._selected)
        if len(self._regions) == 1:
            raise HostError("Cannot remove the sole region", region_id=target.region_id)
        self._destroy(target)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def snapshot(self) -> List[Dict[str, Any]]:
        """Describe every live region, for display and debugging."""
        rows = []
        for region in self._regions:
            side = self._edges.get(region)
            rows.append(
                {
                    "id": region.region_id,
                    "content": region.content,
                    "edge": side.value if side else "body",
                    "pinned": bool(region.attributes.get(PINNED)),
                    "pin_side": getattr(region.attributes.get(PIN_SIDE), "value", None),
                    "width": self.region_size(region, Axis.WIDTH),
                    "height": self.region_size(region, Axis.HEIGHT),
                    "selected": region is self._selected,
                }
            )
        return rows
