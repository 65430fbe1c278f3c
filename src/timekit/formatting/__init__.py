"""
timekit.formatting
~~~~~~~~~~~~~~~~~~

Rendering dates as text in a configured timezone.

A :class:`FormattingPolicy` owns the default format and the default
timezone.  The module keeps one process-wide policy, ``default_policy``,
and exposes its methods as functions::

    from timekit import formatting

    formatting.set_timezone("Asia/Tokyo")
    formatting.format("2020-01-01T00:00:00+00:00")   # → "2020-01-01T09:00:00+09:00"
    formatting.format(dt, "YYYY")                    # explicit format wins

    formatting.reset_defaults()                      # back to settings/env

Public API
----------
FormattingPolicy    Default format + default timezone.
default_policy      The process-wide policy.
format, get_default_format, set_default_format, get_timezone, set_timezone,
resolve_timezone, reset_defaults
"""

from __future__ import annotations

from typing import Any, Optional

from timekit.formatting.policy import FormattingPolicy
from timekit.tz import TimezoneRef, resolve_timezone

default_policy = FormattingPolicy()


def get_default_format() -> str:
    return default_policy.get_default_format()


def set_default_format(fmt: str) -> None:
    default_policy.set_default_format(fmt)


def get_timezone() -> TimezoneRef:
    return default_policy.get_timezone()


def set_timezone(tz: Any) -> None:
    default_policy.set_timezone(tz)


def format(value: Any, fmt: Optional[str] = None) -> str:
    return default_policy.format(value, fmt)


def reset_defaults() -> None:
    default_policy.reset()


__all__ = [
    "FormattingPolicy",
    "default_policy",
    "format",
    "get_default_format",
    "get_timezone",
    "reset_defaults",
    "resolve_timezone",
    "set_default_format",
    "set_timezone",
]
