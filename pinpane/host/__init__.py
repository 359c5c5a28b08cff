"""
Layout hosts.

``LayoutHost`` is the contract the pinning core relies on; ``MemoryHost``
implements it over an in-process flat layout. The Textual host lives in
``pinpane.ui.host``.
"""

from .base import HookSet, InterceptingHost
from .memory import MemoryHost
from .protocol import LayoutHost, Region

__all__ = [
    "HookSet",
    "InterceptingHost",
    "LayoutHost",
    "MemoryHost",
    "Region",
]
