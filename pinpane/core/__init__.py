"""
Pinning core: registry, factory, reconciler, deletion guard and lifecycle.

Host-independent; everything here talks to the layout engine through
``pinpane.host.protocol.LayoutHost``.
"""

from .factory import PinFactory
from .guard import LAST_UNPINNED_MESSAGE, DeletionGuard
from .lifecycle import LifecycleController, LifecycleState
from .reconciler import SizeReconciler
from .registry import RegionRegistry
from .types import (
    Axis,
    GuardDecision,
    ReconcileOutcome,
    ReconcileStatus,
    Side,
    Verdict,
)

__all__ = [
    "Axis",
    "DeletionGuard",
    "GuardDecision",
    "LAST_UNPINNED_MESSAGE",
    "LifecycleController",
    "LifecycleState",
    "PinFactory",
    "ReconcileOutcome",
    "ReconcileStatus",
    "RegionRegistry",
    "Side",
    "SizeReconciler",
    "Verdict",
]
