from __future__ import annotations

import datetime as _dt
import re
import zoneinfo
from typing import Any, Union

import pendulum
from pendulum.tz.timezone import FixedTimezone, Timezone

from timekit._exceptions import InvalidTimezone

TimezoneRef = Union[Timezone, FixedTimezone]

# Top-level regions of the canonical identifier list, as presented to users.
REGIONS: tuple[str, ...] = (
    "Africa",
    "America",
    "Antarctica",
    "Arctic",
    "Asia",
    "Atlantic",
    "Australia",
    "Europe",
    "Indian",
    "Pacific",
)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def local_timezone() -> TimezoneRef:
    return pendulum.local_timezone()


def resolve_timezone(tz: Any) -> TimezoneRef:
    """
    Resolve *tz* to a pendulum timezone.

    ``None`` gives the host's local timezone (asked for on every call).
    Strings are either ``±HH:MM`` offsets or database identifiers, ints are
    offsets in seconds.  Anything unresolvable raises InvalidTimezone.
    """
    if tz is None:
        return local_timezone()

    if isinstance(tz, (Timezone, FixedTimezone)):
        return tz

    if isinstance(tz, _dt.tzinfo):
        return _from_stdlib(tz)

    if isinstance(tz, bool):
        raise InvalidTimezone(tz)

    if isinstance(tz, int):
        return _fixed(tz, original=tz)

    if isinstance(tz, str):
        return _from_string(tz)

    raise InvalidTimezone(tz)


def _from_string(name: str) -> TimezoneRef:
    if not name.strip():
        raise InvalidTimezone(name)

    m = _OFFSET_RE.match(name.strip())
    if m:
        sign, hh, mm = m.groups()
        if int(mm) >= 60:
            raise InvalidTimezone(name)
        seconds = int(hh) * 3600 + int(mm) * 60
        return _fixed(-seconds if sign == "-" else seconds, original=name)

    try:
        return pendulum.timezone(name)
    except (ValueError, KeyError, OSError) as exc:
        # pendulum wraps ZoneInfoNotFoundError; zoneinfo itself rejects
        # malformed keys with ValueError.
        raise InvalidTimezone(name) from exc


def _from_stdlib(tz: _dt.tzinfo) -> TimezoneRef:
    if isinstance(tz, zoneinfo.ZoneInfo) and tz.key:
        return _from_string(tz.key)
    if isinstance(tz, _dt.timezone):
        offset = tz.utcoffset(None)
        return _fixed(int(offset.total_seconds()), original=tz)
    raise InvalidTimezone(tz)


def _fixed(seconds: int, original: Any) -> FixedTimezone:
    # Offsets beyond ±24h are rejected by datetime itself.
    if abs(seconds) >= 86400:
        raise InvalidTimezone(original)
    return pendulum.fixed_timezone(seconds)


# ── listings ─────────────────────────────────────────────────────────────

def _identifiers() -> list[str]:
    names = [
        name for name in pendulum.timezones()
        if name.split("/", 1)[0] in REGIONS and "/" in name
    ]
    names.append("UTC")
    return sorted(names)


def get_time_zones() -> dict[str, str]:
    return {name: name.replace("_", " ") for name in _identifiers()}


def get_grouped_time_zones() -> dict[str, dict[str, str]]:
    grouped: dict[str, dict[str, str]] = {}
    for name in _identifiers():
        group, _, city = name.partition("/")
        grouped.setdefault(group, {})[name] = city.replace("_", " ")

    grouped.pop("UTC", None)
    return grouped
