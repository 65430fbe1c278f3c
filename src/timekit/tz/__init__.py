"""
timekit.tz
~~~~~~~~~~

Timezone resolution and listing.  Every timezone handed to timekit goes
through :func:`resolve_timezone`, which accepts database identifiers,
UTC offsets and already-resolved pendulum timezones.

Basic usage::

    from timekit.tz import resolve_timezone, get_grouped_time_zones

    paris  = resolve_timezone("Europe/Paris")
    plus2  = resolve_timezone("+02:00")
    local  = resolve_timezone(None)               # host timezone

    groups = get_grouped_time_zones()
    groups["America"]["America/New_York"]         # → "New York"

Public API
----------
resolve_timezone        Turn a TimezoneRef-like value into a pendulum timezone.
local_timezone          The host's current local timezone.
get_time_zones          identifier → display name.
get_grouped_time_zones  region → (identifier → city display name).
"""

from __future__ import annotations

from timekit.tz.timezones import (
    REGIONS,
    TimezoneRef,
    get_grouped_time_zones,
    get_time_zones,
    local_timezone,
    resolve_timezone,
)

__all__ = [
    "REGIONS",
    "TimezoneRef",
    "get_grouped_time_zones",
    "get_time_zones",
    "local_timezone",
    "resolve_timezone",
]
