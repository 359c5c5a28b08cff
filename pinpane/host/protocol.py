"""
Layout host protocol - the contract between the pinning core and a layout engine.

The core never models the layout tree itself. Everything it needs from
the engine that owns the windows goes through this narrow interface:

1. Enumerate live leaf regions
2. Read/write a per-region attribute bag
3. Allocate a region at a frame edge
4. Query sizes and request relative resizes
5. Subscribe to "layout changed" notifications
6. Install interceptors on the collapse and remove operations
7. Show a transient message to the user
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from ..core.types import Axis, Side

_region_ids = itertools.count(1)

LayoutListener = Callable[[Any], Any]
CollapseInterceptor = Callable[[], Any]
RemoveOperation = Callable[[Optional["Region"]], Any]
RemoveInterceptor = Callable[[RemoveOperation, Optional["Region"]], Any]


@dataclass(eq=False)
class Region:
    """A leaf rectangle of the layout.

    Regions compare by identity. The attribute bag lives on the region
    itself, so whatever the core stores there disappears with it.
    """

    content: Any = None
    region_id: int = field(default_factory=lambda: next(_region_ids))
    attributes: Dict[str, Any] = field(default_factory=dict)
    live: bool = True

    def __repr__(self) -> str:
        state = "" if self.live else ", dead"
        return f"Region(#{self.region_id}, {self.content!r}{state})"


@runtime_checkable
class LayoutHost(Protocol):
    """Capabilities the pinning core requires from a layout engine."""

    # Enumeration

    def live_regions(self) -> List[Region]:
        """Live leaf regions in layout order."""
        ...

    def is_live(self, region: Optional[Region]) -> bool:
        ...

    # Attribute bag

    def get_attribute(self, region: Region, key: str, default: Any = None) -> Any:
        ...

    def set_attribute(self, region: Region, key: str, value: Any) -> None:
        ...

    def clear_attribute(self, region: Region, key: str) -> None:
        ...

    # Allocation and geometry

    def create_region(self, content: Any, side: Side, size: int) -> Region:
        """Allocate a leaf at ``side`` of the frame, ``size`` cells along its axis.

        Raises:
            AllocationFailedError: If there is no room for the region
        """
        ...

    def region_size(self, region: Region, axis: Axis) -> int:
        ...

    def frame_size(self, axis: Axis) -> int:
        ...

    def resize_region(self, region: Region, delta: int, axis: Axis) -> None:
        """Grow (positive) or shrink (negative) a region along ``axis``.

        Raises:
            HostResizeError: If the request cannot be satisfied
        """
        ...

    # Selection

    def selected_region(self) -> Optional[Region]:
        ...

    def select_region(self, region: Region) -> None:
        ...

    # Layout-change stream

    def subscribe(self, listener: LayoutListener) -> None:
        ...

    def unsubscribe(self, listener: LayoutListener) -> None:
        ...

    # Interceptors

    def add_collapse_interceptor(self, interceptor: CollapseInterceptor) -> None:
        ...

    def remove_collapse_interceptor(self, interceptor: CollapseInterceptor) -> None:
        ...

    def add_remove_interceptor(self, interceptor: RemoveInterceptor) -> None:
        ...

    def remove_remove_interceptor(self, interceptor: RemoveInterceptor) -> None:
        ...

    # Intercepted operations

    def collapse_to_one(self) -> None:
        """Remove every region except the selected one."""
        ...

    def remove_region(self, region: Optional[Region] = None) -> None:
        """Remove one region, the selected one by default."""
        ...

    # Diagnostics

    def notify(self, message: str, severity: str = "information") -> None:
        ...
