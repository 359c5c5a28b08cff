"""
Size reconciler - restores pinned regions to their configured size.

Runs on every layout-change notification (frame resize, manual resize,
splits) and once right after a pinned region is created. Each pinned
region is handled independently and best-effort: a region the host
cannot resize is reported and left for the next layout change.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

from ..exceptions import HostError, ReconcileResizeFailedError
from .registry import RegionRegistry
from .types import PIN_SIDE, PIN_SIZE, ReconcileOutcome, ReconcileStatus, Side, size_to_cells

if TYPE_CHECKING:
    from ..host.protocol import LayoutHost, Region

logger = logging.getLogger(__name__)


class SizeReconciler:
    """Brings every pinned region back to its target size."""

    def __init__(self, host: "LayoutHost", registry: RegionRegistry) -> None:
        self.host = host
        self.registry = registry
        self._running = False

    def reconcile_all(self, trigger: Any = None) -> List[ReconcileOutcome]:
        """Reconcile every pinned region, in registry order.

        Args:
            trigger: The layout-change event that caused this pass (unused
                beyond logging)

        Returns:
            One outcome per pinned region, or an empty list when called
            while a pass is already running
        """
        # Our own resizes publish layout changes; they must not start a nested pass
        if self._running:
            logger.debug(f"Reconciliation already running, ignoring {trigger!r}")
            return []
        self._running = True
        try:
            outcomes = [self.reconcile(region) for region in self.registry.list_pinned()]
        finally:
            self._running = False

        resized = sum(1 for o in outcomes if o.status is ReconcileStatus.RESIZED)
        failed = sum(1 for o in outcomes if o.status is ReconcileStatus.FAILED)
        if resized or failed:
            logger.debug(
                f"Reconciled {len(outcomes)} pinned regions after {trigger!r}: "
                f"{resized} resized, {failed} failed"
            )
        return outcomes

    def reconcile(self, region: "Region") -> ReconcileOutcome:
        """Reconcile a single pinned region."""
        # The region may have been destroyed between the event and this call
        if not self.host.is_live(region):
            return ReconcileOutcome(region, ReconcileStatus.SKIPPED)

        side = Side.parse(self.host.get_attribute(region, PIN_SIDE))
        size = self.host.get_attribute(region, PIN_SIZE)
        axis = side.axis

        target = size_to_cells(size, self.host.frame_size(axis))
        current = self.host.region_size(region, axis)
        delta = target - current
        if delta == 0:
            return ReconcileOutcome(
                region, ReconcileStatus.UNCHANGED, target=target, current=current
            )

        try:
            self.host.resize_region(region, delta, axis)
        except HostError as e:
            error = ReconcileResizeFailedError(
                f"Could not restore pinned region {axis.value}: {e.message}",
                region_id=region.region_id,
                target=target,
                current=current,
            )
            logger.debug(f"Reconcile of {region!r} failed: {e}")
            self.host.notify(str(error), severity="warning")
            return ReconcileOutcome(
                region,
                ReconcileStatus.FAILED,
                target=target,
                current=current,
                delta=delta,
                error=error,
            )

        return ReconcileOutcome(
            region, ReconcileStatus.RESIZED, target=target, current=current, delta=delta
        )
