"""
Pin factory - creates pinned regions at a side of the frame.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from ..config.constants import DEFAULT_PIN_SIZE
from .reconciler import SizeReconciler
from .registry import RegionRegistry
from .types import (
    DEDICATED,
    NO_COLLAPSE,
    PIN_KEYS,
    PIN_SIDE,
    PIN_SIZE,
    PINNED,
    Side,
    size_to_cells,
    validate_size,
)

if TYPE_CHECKING:
    from ..host.protocol import LayoutHost, Region

logger = logging.getLogger(__name__)


class PinFactory:
    """Allocates regions through the host and upgrades them to pinned."""

    def __init__(
        self,
        host: "LayoutHost",
        registry: RegionRegistry,
        reconciler: SizeReconciler,
        default_size: float = DEFAULT_PIN_SIZE,
    ) -> None:
        self.host = host
        self.registry = registry
        self.reconciler = reconciler
        self.default_size = validate_size(default_size)

    def create_pinned(
        self,
        content: Any,
        side: Union[Side, str],
        size: Optional[float] = None,
    ) -> "Region":
        """Create a pinned region showing ``content`` at ``side`` of the frame.

        Args:
            content: Payload to display in the region
            side: Frame edge to anchor to
            size: Ratio of the frame (< 1) or absolute cells (>= 1);
                defaults to the configured default size

        Returns:
            The new region

        Raises:
            InvalidArgumentError: If side or size is invalid (no host call is made)
            AllocationFailedError: If the host cannot allocate the region
        """
        side = Side.parse(side)
        size = validate_size(self.default_size if size is None else size)

        initial = size_to_cells(size, self.host.frame_size(side.axis))
        # Allocation failures propagate before any attribute is written
        region = self.host.create_region(content, side, initial)

        self.host.set_attribute(region, PINNED, True)
        self.host.set_attribute(region, PIN_SIDE, side)
        self.host.set_attribute(region, PIN_SIZE, size)
        self.host.set_attribute(region, NO_COLLAPSE, True)
        # Dedication last so it cannot get in the way of the writes above
        self.host.set_attribute(region, DEDICATED, True)
        logger.debug(f"Pinned {region!r} at {side.value} with size {size}")

        self.reconciler.reconcile_all("create")
        return region

    def unpin(self, region: "Region") -> bool:
        """Turn a pinned region back into an ordinary one.

        Returns:
            True if the region was pinned, False otherwise
        """
        if not self.registry.is_pinned(region):
            return False
        for key in PIN_KEYS:
            self.host.clear_attribute(region, key)
        logger.debug(f"Unpinned {region!r}")
        return True
