"""
Shared types for the pinning core.

Sides, axes, the attribute keys written into a region's attribute bag,
and the small value objects the reconciler and deletion guard return.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import TYPE_CHECKING, Any, Optional, Union

from ..exceptions import InvalidArgumentError, PinpaneError

if TYPE_CHECKING:
    from ..host.protocol import Region

# Attribute bag keys
PINNED = "pinned"
PIN_SIDE = "pin_side"
PIN_SIZE = "pin_size"
NO_COLLAPSE = "no_collapse"
DEDICATED = "dedicated"

PIN_KEYS = (PINNED, PIN_SIDE, PIN_SIZE, NO_COLLAPSE, DEDICATED)


class Axis(Enum):
    """Resize axis of a region."""

    WIDTH = "width"
    HEIGHT = "height"


class Side(Enum):
    """Frame edge a pinned region is anchored to."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def axis(self) -> Axis:
        """Left/right regions grow in width, top/bottom in height."""
        if self in (Side.LEFT, Side.RIGHT):
            return Axis.WIDTH
        return Axis.HEIGHT

    @classmethod
    def parse(cls, value: Union["Side", str]) -> "Side":
        """Coerce a Side or its string value into a Side.

        Raises:
            InvalidArgumentError: If the value names no side
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = ", ".join(side.value for side in cls)
        raise InvalidArgumentError(
            f"Invalid side {value!r}. Must be one of: {valid}", argument="side"
        )


def validate_size(size: Any) -> float:
    """Check a pin size and return it as a number.

    Values in (0, 1) are ratios of the frame, values >= 1 are absolute
    cell counts. Zero, negatives, NaN, infinities, bools and
    non-numbers are rejected.

    Raises:
        InvalidArgumentError: If the size is not a positive finite number
    """
    if isinstance(size, bool) or not isinstance(size, Real):
        raise InvalidArgumentError(
            f"Pin size must be a number, got {type(size).__name__}", argument="size"
        )
    if not math.isfinite(size) or size <= 0:
        raise InvalidArgumentError(
            f"Pin size must be a positive number, got {size!r}", argument="size"
        )
    return size


def size_to_cells(size: float, frame_size: int) -> int:
    """Resolve a ratio or absolute pin size against a frame dimension."""
    if size < 1.0:
        return round(frame_size * size)
    return round(size)


class ReconcileStatus(Enum):
    """Result of reconciling one pinned region."""

    UNCHANGED = "unchanged"
    RESIZED = "resized"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ReconcileOutcome:
    """What happened to one pinned region during a reconciliation pass."""

    region: "Region"
    status: ReconcileStatus
    target: Optional[int] = None
    current: Optional[int] = None
    delta: int = 0
    error: Optional[PinpaneError] = None

    @property
    def ok(self) -> bool:
        return self.status is not ReconcileStatus.FAILED


class Verdict(Enum):
    """Decision of a deletion guard."""

    PROCEED = "proceed"
    VETO = "veto"


@dataclass(frozen=True)
class GuardDecision:
    """Outcome of a guard check.

    Attributes:
        verdict: PROCEED lets the host operation run, VETO skips it
        target: Region the operation should apply to (redirect target for
            collapse, removal target for remove)
        message: User-visible notice accompanying a veto
    """

    verdict: Verdict
    target: Optional["Region"] = None
    message: Optional[str] = None

    @property
    def vetoed(self) -> bool:
        return self.verdict is Verdict.VETO

    @classmethod
    def proceed(cls, target: Optional["Region"] = None) -> "GuardDecision":
        return cls(Verdict.PROCEED, target=target)

    @classmethod
    def veto(cls, message: str, target: Optional["Region"] = None) -> "GuardDecision":
        return cls(Verdict.VETO, target=target, message=message)
