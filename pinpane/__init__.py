"""
pinpane - pinned (sticky) regions for window layouts
"""

__version__ = "0.1.0"

from .core.types import Axis, Side
from .exceptions import (
    AllocationFailedError,
    InvalidArgumentError,
    PinpaneError,
    ReconcileResizeFailedError,
)
from .host import LayoutHost, MemoryHost, Region
from .sticky import StickyRegions

__all__ = [
    "AllocationFailedError",
    "Axis",
    "InvalidArgumentError",
    "LayoutHost",
    "MemoryHost",
    "PinpaneError",
    "ReconcileResizeFailedError",
    "Region",
    "Side",
    "StickyRegions",
    "__version__",
]
