"""Custom exception hierarchy for pinpane.

Exception Hierarchy:
    PinpaneError (base)
    ├── InvalidArgumentError - bad caller input (size, side)
    ├── HostError - the layout host refused an operation
    │   ├── AllocationFailedError - a region could not be created
    │   ├── HostResizeError - a resize request could not be met
    │   └── RegionNotLiveError - the region handle was destroyed
    ├── ReconcileResizeFailedError - a pinned region missed its target size
    └── ConfigurationError - Settings/configuration issues

A refused deletion is not an exception: the deletion guard returns a
VETO decision and the host operation is simply not performed.

Usage:
    from pinpane.exceptions import AllocationFailedError

    try:
        region = sticky.create_pinned("notes", "left", 0.3)
    except AllocationFailedError as e:
        console.print(f"[red]{e}[/red]")
"""

from typing import Any, Optional


class PinpaneError(Exception):
    """Base exception for all pinpane errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., region ids, sizes)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidArgumentError(PinpaneError):
    """Caller supplied an argument the core cannot accept."""

    def __init__(
        self,
        message: str = "Invalid argument",
        *,
        argument: Optional[str] = None,
        **context: Any,
    ) -> None:
        if argument:
            context["argument"] = argument
        super().__init__(message, **context)


# =============================================================================
# Host Errors
# =============================================================================


class HostError(PinpaneError):
    """Base exception for refusals coming from the layout host."""

    pass


class AllocationFailedError(HostError):
    """The host could not allocate the requested region."""

    def __init__(self, message: str = "Region allocation failed", **context: Any) -> None:
        super().__init__(message, **context)


class HostResizeError(HostError):
    """The host could not resize a region by the requested amount."""

    def __init__(
        self,
        message: str = "Region resize failed",
        *,
        delta: Optional[int] = None,
        **context: Any,
    ) -> None:
        if delta is not None:
            context["delta"] = delta
        super().__init__(message, **context)


class RegionNotLiveError(HostError):
    """An operation targeted a region the host has already destroyed."""

    def __init__(self, message: str = "Region is no longer live", **context: Any) -> None:
        super().__init__(message, **context)


# =============================================================================
# Reconciliation Errors
# =============================================================================


class ReconcileResizeFailedError(PinpaneError):
    """A pinned region could not be brought to its target size on this pass.

    Never raised out of the reconciler; it is recorded on the region's
    outcome and reported as a warning.
    """

    def __init__(
        self,
        message: str = "Could not restore pinned region size",
        *,
        region_id: Optional[int] = None,
        target: Optional[int] = None,
        **context: Any,
    ) -> None:
        if region_id is not None:
            context["region_id"] = region_id
        if target is not None:
            context["target"] = target
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PinpaneError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
