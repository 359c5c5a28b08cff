"""
Lifecycle controller - the on/off switch for sticky behaviour.

Enabling installs the deletion guard's interceptors and subscribes the
size reconciler to layout changes; disabling removes them again. The
host's hook sets make both transitions idempotent.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .guard import DeletionGuard
from .reconciler import SizeReconciler

if TYPE_CHECKING:
    from ..host.protocol import LayoutHost

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    DISABLED = "disabled"
    ENABLED = "enabled"


class LifecycleController:
    """Wires the guard and reconciler into a host's hooks."""

    def __init__(
        self,
        host: "LayoutHost",
        guard: DeletionGuard,
        reconciler: SizeReconciler,
    ) -> None:
        self.host = host
        self.guard = guard
        self.reconciler = reconciler
        self.state = LifecycleState.DISABLED

    @property
    def enabled(self) -> bool:
        return self.state is LifecycleState.ENABLED

    def enable(self) -> None:
        """Install interceptors and the reconciler, then reconcile once."""
        self.host.add_collapse_interceptor(self.guard.before_collapse)
        self.host.add_remove_interceptor(self.guard.around_remove)
        self.host.subscribe(self.reconciler.reconcile_all)
        if not self.enabled:
            logger.info("Sticky regions enabled")
        self.state = LifecycleState.ENABLED
        self.reconciler.reconcile_all("enable")

    def disable(self) -> None:
        """Remove interceptors and unsubscribe the reconciler."""
        self.host.remove_collapse_interceptor(self.guard.before_collapse)
        self.host.remove_remove_interceptor(self.guard.around_remove)
        self.host.unsubscribe(self.reconciler.reconcile_all)
        if self.enabled:
            logger.info("Sticky regions disabled")
        self.state = LifecycleState.DISABLED

    def set_enabled(self, flag: bool) -> None:
        if flag:
            self.enable()
        else:
            self.disable()

    def toggle(self) -> bool:
        """Flip the state. Returns the new enabled flag."""
        self.set_enabled(not self.enabled)
        return self.enabled
