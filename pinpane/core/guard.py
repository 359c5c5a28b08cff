"""
Deletion guard - protects pinned regions and the last unpinned region.

Two host operations are guarded:

- collapse-to-one (before): the host keeps only the selected region, so
  a pinned selection is first moved to an unpinned region. Otherwise the
  collapse would destroy every unpinned region.
- remove-one (around): removing the last unpinned region is vetoed.

The ``check_*`` methods are pure decisions; ``before_collapse`` and
``around_remove`` are the adapters the lifecycle controller installs on
the host.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .registry import RegionRegistry
from .types import GuardDecision

if TYPE_CHECKING:
    from ..host.protocol import LayoutHost, Region, RemoveOperation

logger = logging.getLogger(__name__)

LAST_UNPINNED_MESSAGE = "Cannot delete the last unpinned region"


class DeletionGuard:
    """Guards the host's collapse and remove operations."""

    def __init__(self, host: "LayoutHost", registry: RegionRegistry) -> None:
        self.host = host
        self.registry = registry

    def check_collapse(self) -> GuardDecision:
        """Decide where the selection must be before a collapse.

        Returns:
            PROCEED, with ``target`` set to an unpinned region when the
            selected region is pinned and an unpinned region exists
        """
        selected = self.host.selected_region()
        if self.registry.is_pinned(selected):
            return GuardDecision.proceed(self.registry.first_unpinned())
        return GuardDecision.proceed()

    def check_remove(self, target: Optional["Region"] = None) -> GuardDecision:
        """Decide whether removing ``target`` (default: selected) may proceed."""
        if target is None:
            target = self.host.selected_region()
        if self.registry.is_pinned(target):
            return GuardDecision.proceed(target)

        unpinned = self.registry.list_unpinned()
        if len(unpinned) == 1 and target is unpinned[0]:
            return GuardDecision.veto(LAST_UNPINNED_MESSAGE, target)
        return GuardDecision.proceed(target)

    def before_collapse(self) -> None:
        """Collapse interceptor: redirect a pinned selection."""
        decision = self.check_collapse()
        if decision.target is not None:
            logger.debug(f"Collapse: moving selection to {decision.target!r}")
            self.host.select_region(decision.target)

    def around_remove(
        self, proceed: "RemoveOperation", target: Optional["Region"] = None
    ) -> None:
        """Remove interceptor: veto or pass the original arguments through."""
        decision = self.check_remove(target)
        if decision.vetoed:
            logger.debug(f"Removal of {decision.target!r} refused")
            self.host.notify(decision.message or LAST_UNPINNED_MESSAGE, severity="warning")
            return
        proceed(target)
