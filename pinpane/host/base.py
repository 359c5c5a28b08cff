"""
Shared machinery for layout hosts.

Concrete hosts supply geometry and the two structural primitives
(``_collapse_primitive`` and ``_remove_primitive``). This base class
supplies the rest of the host contract: the region attribute bag, the
layout-change stream and the interceptor chains wrapped around
collapse and remove.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..exceptions import RegionNotLiveError
from .protocol import (
    CollapseInterceptor,
    LayoutListener,
    Region,
    RemoveInterceptor,
    RemoveOperation,
)

logger = logging.getLogger(__name__)

H = TypeVar("H")


class HookSet(Generic[H]):
    """Insertion-ordered set of callables.

    Adding a hook that is already present, or discarding one that is
    absent, does nothing. Bound methods compare equal when they wrap the
    same function on the same object, so re-adding ``obj.method`` is safe.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._hooks: Dict[H, None] = {}

    def add(self, hook: H) -> bool:
        """Add a hook. Returns False if it was already installed."""
        if hook in self._hooks:
            return False
        self._hooks[hook] = None
        logger.debug(f"Installed {self.name} hook: {hook!r}")
        return True

    def discard(self, hook: H) -> bool:
        """Remove a hook. Returns False if it was not installed."""
        if hook not in self._hooks:
            return False
        del self._hooks[hook]
        logger.debug(f"Removed {self.name} hook: {hook!r}")
        return True

    def __contains__(self, hook: object) -> bool:
        return hook in self._hooks

    def __iter__(self) -> Iterator[H]:
        # Snapshot so hooks may (un)install hooks while running
        return iter(list(self._hooks))

    def __len__(self) -> int:
        return len(self._hooks)


class InterceptingHost:
    """Base class implementing the non-geometric half of ``LayoutHost``."""

    def __init__(self) -> None:
        self.layout_listeners: HookSet[LayoutListener] = HookSet("layout-change")
        self.collapse_interceptors: HookSet[CollapseInterceptor] = HookSet("collapse")
        self.remove_interceptors: HookSet[RemoveInterceptor] = HookSet("remove")
        self.messages: List[Tuple[str, str]] = []
        self._publishing = False

    # ------------------------------------------------------------------
    # Enumeration (subclasses override live_regions)
    # ------------------------------------------------------------------

    def live_regions(self) -> List[Region]:
        raise NotImplementedError

    def is_live(self, region: Optional[Region]) -> bool:
        return region is not None and region.live and region in self.live_regions()

    def _require_live(self, region: Optional[Region]) -> Region:
        if region is None or not self.is_live(region):
            raise RegionNotLiveError(
                region_id=getattr(region, "region_id", None),
            )
        return region

    # ------------------------------------------------------------------
    # Attribute bag
    # ------------------------------------------------------------------

    def get_attribute(self, region: Region, key: str, default: Any = None) -> Any:
        if not region.live:
            return default
        return region.attributes.get(key, default)

    def set_attribute(self, region: Region, key: str, value: Any) -> None:
        self._require_live(region)
        region.attributes[key] = value

    def clear_attribute(self, region: Region, key: str) -> None:
        region.attributes.pop(key, None)

    # ------------------------------------------------------------------
    # Layout-change stream
    # ------------------------------------------------------------------

    def subscribe(self, listener: LayoutListener) -> None:
        self.layout_listeners.add(listener)

    def unsubscribe(self, listener: LayoutListener) -> None:
        self.layout_listeners.discard(listener)

    def publish_layout_change(self, trigger: Any = None) -> None:
        """Deliver a layout-change notification to every listener.

        Changes made by listeners while a delivery is running (such as
        resizes requested by the size reconciler) are not delivered
        again, so listener passes never overlap.
        """
        if self._publishing:
            logger.debug(f"Layout change during delivery ignored: {trigger!r}")
            return
        self._publishing = True
        try:
            for listener in self.layout_listeners:
                listener(trigger)
        finally:
            self._publishing = False

    # ------------------------------------------------------------------
    # Interceptors
    # ------------------------------------------------------------------

    def add_collapse_interceptor(self, interceptor: CollapseInterceptor) -> None:
        self.collapse_interceptors.add(interceptor)

    def remove_collapse_interceptor(self, interceptor: CollapseInterceptor) -> None:
        self.collapse_interceptors.discard(interceptor)

    def add_remove_interceptor(self, interceptor: RemoveInterceptor) -> None:
        self.remove_interceptors.add(interceptor)

    def remove_remove_interceptor(self, interceptor: RemoveInterceptor) -> None:
        self.remove_interceptors.discard(interceptor)

    # ------------------------------------------------------------------
    # Intercepted operations
    # ------------------------------------------------------------------

    def collapse_to_one(self) -> None:
        """Run before-interceptors, then collapse around the selected region."""
        for interceptor in self.collapse_interceptors:
            interceptor()
        self._collapse_primitive()
        self.publish_layout_change("collapse")

    def remove_region(self, region: Optional[Region] = None) -> None:
        """Remove a region through the chain of around-interceptors.

        Each interceptor receives the next operation in the chain and the
        target; it may call the operation (with the same or another
        target) or return without calling it to veto the removal. The
        first installed interceptor runs outermost.
        """
        operation: RemoveOperation = self._remove_and_publish
        for interceptor in reversed(list(self.remove_interceptors)):
            operation = functools.partial(interceptor, operation)
        operation(region)

    def _remove_and_publish(self, region: Optional[Region] = None) -> None:
        self._remove_primitive(region)
        self.publish_layout_change("remove")

    def _collapse_primitive(self) -> None:
        raise NotImplementedError

    def _remove_primitive(self, region: Optional[Region]) -> None:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def notify(self, message: str, severity: str = "information") -> None:
        """Record a user-visible message. Hosts with a UI also display it."""
        self.messages.append((severity, message))
        if severity == "error":
            logger.error(message)
        elif severity == "warning":
            logger.warning(message)
        else:
            logger.info(message)
