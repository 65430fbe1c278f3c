from __future__ import annotations

from typing import Any


class TimekitError(ValueError):
    """Base exception for all timekit errors."""


class InvalidTimezone(TimekitError):
    """A timezone identifier or object could not be resolved."""

    def __init__(self, value: Any) -> None:
        self.value = value
        shown = value if isinstance(value, (str, int, float)) else type(value).__name__
        super().__init__(f"Unknown or bad timezone ({shown})")


class InvalidArgument(TimekitError):
    """Input cannot be turned into a calendar instant."""


class InvalidTimestamp(InvalidArgument):
    """A DOS timestamp whose packed fields do not form a valid date."""

    def __init__(self, timestamp: int, reason: str = "") -> None:
        self.timestamp = timestamp
        msg = f"Invalid DOS timestamp {timestamp:#010x}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
