"""Exceptions raised by the tanklink codec and bridge."""
from __future__ import annotations

from typing import Any, Optional


class TankLinkError(Exception):
    """Base exception for tanklink."""

    pass


class DecodeError(TankLinkError):
    """Raised when a data-point payload cannot be interpreted."""

    def __init__(self, dp: int, message: str) -> None:
        self.dp = dp
        super().__init__(message)


class UnknownStateError(DecodeError):
    """Raised when the tank-state byte has no named state."""

    def __init__(self, dp: int, raw: int) -> None:
        self.raw = raw
        super().__init__(dp, f"Unknown tank state byte {raw} for DP {dp}")


class TruncatedPayloadError(DecodeError):
    """Raised when a payload is shorter than its data-point kind requires."""

    def __init__(self, dp: int, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(dp, f"DP {dp} needs {expected} byte(s), got {actual}")


class FrameError(TankLinkError):
    """Raised when a wire report is malformed (short header, length overrun)."""

    pass


class ChannelWriteError(TankLinkError):
    """A write command could not be handed to the channel."""

    def __init__(self, message: str, *, command: Any = None, cause: Optional[BaseException] = None) -> None:
        self.command = command
        self.cause = cause
        super().__init__(message)


class CapabilityWriteError(TankLinkError):
    """The capability store rejected a value."""

    def __init__(self, capability: str, value: Any, cause: Optional[BaseException] = None) -> None:
        self.capability = capability
        self.value = value
        self.cause = cause
        super().__init__(f"Failed to set {capability!r} to {value!r}: {cause}")
