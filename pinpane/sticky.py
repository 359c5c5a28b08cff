"""
Sticky regions - the public entry point.

``StickyRegions`` assembles the registry, factory, reconciler, deletion
guard and lifecycle controller around one layout host.

Example usage:
    from pinpane import MemoryHost, StickyRegions

    host = MemoryHost(width=120, height=40)
    host.display("main")
    sticky = StickyRegions(host)
    sticky.set_enabled(True)

    notes = sticky.create_pinned("notes", "left", 0.25)
    host.set_frame_size(100, 40)  # notes shrinks to 25 cells
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from .config.settings import PinSettings
from .core.factory import PinFactory
from .core.guard import DeletionGuard
from .core.lifecycle import LifecycleController
from .core.reconciler import SizeReconciler
from .core.registry import RegionRegistry
from .core.types import ReconcileOutcome, Side
from .host.protocol import LayoutHost, Region


class StickyRegions:
    """Pinned-region management for one layout host."""

    def __init__(self, host: LayoutHost, settings: Optional[PinSettings] = None) -> None:
        self.host = host
        self.settings = settings if settings is not None else PinSettings.load()
        self.registry = RegionRegistry(host)
        self.reconciler = SizeReconciler(host, self.registry)
        self.guard = DeletionGuard(host, self.registry)
        self.factory = PinFactory(
            host, self.registry, self.reconciler, default_size=self.settings.default_size
        )
        self.lifecycle = LifecycleController(host, self.guard, self.reconciler)

    # Pinning

    def create_pinned(
        self, content: Any, side: Union[Side, str], size: Optional[float] = None
    ) -> Region:
        return self.factory.create_pinned(content, side, size)

    def unpin(self, region: Region) -> bool:
        return self.factory.unpin(region)

    # Queries

    def is_pinned(self, region: Optional[Region]) -> bool:
        return self.registry.is_pinned(region)

    def list_pinned(self) -> List[Region]:
        return self.registry.list_pinned()

    def list_unpinned(self) -> List[Region]:
        return self.registry.list_unpinned()

    def first_unpinned(self) -> Optional[Region]:
        return self.registry.first_unpinned()

    # Sizing

    def reconcile(self) -> List[ReconcileOutcome]:
        """Run one reconciliation pass immediately."""
        return self.reconciler.reconcile_all("manual")

    # Lifecycle

    @property
    def enabled(self) -> bool:
        return self.lifecycle.enabled

    def set_enabled(self, flag: bool) -> None:
        self.lifecycle.set_enabled(flag)

    def toggle(self) -> bool:
        return self.lifecycle.toggle()
