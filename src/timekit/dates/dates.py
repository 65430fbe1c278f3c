from __future__ import annotations

import datetime as _dt
import functools
import operator
from typing import Any, Optional, Union

import pendulum

from timekit import formatting
from timekit._exceptions import InvalidArgument, InvalidTimestamp
from timekit.dates import dos
from timekit.tz import (
    TimezoneRef,
    get_grouped_time_zones,
    get_time_zones,
    local_timezone,
    resolve_timezone,
)

TimeLike = Union[None, str, _dt.datetime, "DateTime"]
TimezoneLike = Any


@functools.total_ordering
class DateTime:
    """
    A point in time with a timezone, backed by ``pendulum.DateTime``.

    The wrapped pendulum value is replaced, never mutated; ``forward`` and
    ``rewind`` swap it in place and return ``self`` for chaining.  Each
    instance may carry its own render format, used by ``format()``,
    ``str()`` and :func:`timekit.formatting.format`.
    """

    MINUTE: int = 60
    HOUR: int = 3600
    DAY: int = 86400
    WEEK: int = 604800
    MONTH: int = 2629744    # average
    YEAR: int = 31556926    # average

    DEFAULT_TO_STRING_FORMAT: str = "YYYY-MM-DD[T]HH:mm:ss.SSSSSSZ"

    def __init__(self, time: TimeLike = None, timezone: TimezoneLike = None) -> None:
        tz = resolve_timezone(timezone) if timezone is not None else None

        self._format: Optional[str] = None
        if isinstance(time, DateTime):
            self._format = time._format
            time = time._dt

        self._dt: pendulum.DateTime = _to_pendulum(time, tz)

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def create(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        timezone: TimezoneLike = None,
    ) -> DateTime:
        tz = resolve_timezone(timezone)
        try:
            dt = pendulum.datetime(
                year, month, day, hour, minute, second, microsecond, tz=tz
            )
        except (ValueError, TypeError, OverflowError) as exc:
            raise InvalidArgument(f"Invalid date fields: {exc}") from exc
        return cls._wrap(dt)

    @classmethod
    def now(cls, timezone: TimezoneLike = None) -> DateTime:
        return cls._wrap(pendulum.now(resolve_timezone(timezone)))

    @classmethod
    def from_timestamp(cls, timestamp: float, timezone: TimezoneLike = None) -> DateTime:
        """Unix timestamp, expressed in *timezone* (host timezone if None)."""
        try:
            dt = pendulum.from_timestamp(timestamp, tz=resolve_timezone(timezone))
        except (ValueError, TypeError, OverflowError, OSError) as exc:
            raise InvalidArgument(f"Invalid unix timestamp {timestamp!r}") from exc
        return cls._wrap(dt)

    @classmethod
    def from_dos_timestamp(cls, timestamp: int, timezone: TimezoneLike = None) -> DateTime:
        """
        Decode a 32-bit DOS timestamp.

        The packed fields are read as wall-clock time in *timezone*, which
        defaults to the process-wide default timezone.
        """
        try:
            ts = operator.index(timestamp)
        except TypeError as exc:
            raise InvalidArgument(
                f"DOS timestamp must be an integer, not {type(timestamp).__name__}"
            ) from exc

        if timezone is None:
            tz = formatting.get_timezone()
        else:
            tz = resolve_timezone(timezone)

        try:
            dt = pendulum.datetime(*dos.unpack(ts), tz=tz)
        except ValueError as exc:
            raise InvalidTimestamp(ts, str(exc)) from exc
        return cls._wrap(dt)

    @classmethod
    def _wrap(cls, dt: pendulum.DateTime, fmt: Optional[str] = None) -> DateTime:
        self = cls.__new__(cls)
        self._dt = dt
        self._format = fmt
        return self

    # ── timezone listings ────────────────────────────────────────────────

    @staticmethod
    def get_time_zones() -> dict[str, str]:
        return get_time_zones()

    @staticmethod
    def get_grouped_time_zones() -> dict[str, dict[str, str]]:
        return get_grouped_time_zones()

    # ── fields ───────────────────────────────────────────────────────────

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def microsecond(self) -> int:
        return self._dt.microsecond

    @property
    def timezone(self) -> TimezoneRef:
        return self._dt.timezone

    @property
    def timezone_name(self) -> Optional[str]:
        return self._dt.timezone_name

    def timestamp(self) -> float:
        return self._dt.timestamp()

    def to_pendulum(self) -> pendulum.DateTime:
        return self._dt

    # ── format ───────────────────────────────────────────────────────────

    @property
    def stored_format(self) -> Optional[str]:
        """The format set on this instance, or None."""
        return self._format

    def get_format(self) -> str:
        return self._format or self.DEFAULT_TO_STRING_FORMAT

    def set_format(self, fmt: Optional[str]) -> DateTime:
        self._format = fmt or None
        return self

    def format(self, fmt: Optional[str] = None) -> str:
        """Render in this instance's own timezone (pendulum tokens)."""
        return self._dt.format(fmt or self.get_format())

    # ── arithmetic ───────────────────────────────────────────────────────

    def forward(self, seconds: float) -> DateTime:
        """Move forward in time by *seconds*."""
        self._dt = self._dt.add(seconds=seconds)
        return self

    def rewind(self, seconds: float) -> DateTime:
        """Move backward in time by *seconds*."""
        self._dt = self._dt.subtract(seconds=seconds)
        return self

    def is_leap_year(self) -> bool:
        return self._dt.is_leap_year()

    def days_in_month(self) -> int:
        days = [
            31,
            29 if self.is_leap_year() else 28,
            31,
            30,
            31,
            30,
            31,
            31,
            30,
            31,
            30,
            31,
        ]
        return days[self.month - 1]

    def in_timezone(self, timezone: TimezoneLike) -> DateTime:
        """Same instant, other timezone; the stored format is kept."""
        return self._wrap(self._dt.in_timezone(resolve_timezone(timezone)), self._format)

    # ── DOS ──────────────────────────────────────────────────────────────

    def to_dos_timestamp(self) -> int:
        """
        Pack this instance's wall-clock fields as a DOS timestamp.

        Dates before 1980 become 1980-01-01 00:00:00; odd seconds are
        truncated.
        """
        d = self._dt
        return dos.pack(d.year, d.month, d.day, d.hour, d.minute, d.second)

    # ── dunder ───────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"DateTime({self._dt.isoformat()!r}, "
            f"timezone={self.timezone_name!r}, "
            f"format={self._format!r})"
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DateTime):
            return self._dt == other._dt
        if isinstance(other, _dt.datetime):
            return self._dt == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, DateTime):
            return self._dt < other._dt
        if isinstance(other, _dt.datetime):
            return self._dt < other
        return NotImplemented

    def __hash__(self) -> int:
        return _dt.datetime.__hash__(self._dt)


def _to_pendulum(time: Any, tz: Optional[TimezoneRef]) -> pendulum.DateTime:
    if time is None:
        return pendulum.now(tz or local_timezone())

    if isinstance(time, str):
        return _parse(time, tz or local_timezone())

    if isinstance(time, _dt.datetime):
        if tz is None and time.tzinfo is not None:
            return pendulum.instance(time)
        # Wall-clock fields are kept and read in the target zone.
        return pendulum.datetime(
            time.year,
            time.month,
            time.day,
            time.hour,
            time.minute,
            time.second,
            time.microsecond,
            tz=tz or local_timezone(),
        )

    raise InvalidArgument(
        f"Cannot create a DateTime from {type(time).__name__}"
    )


def _parse(text: str, tz: TimezoneRef) -> pendulum.DateTime:
    try:
        parsed = pendulum.parse(text, tz=tz, strict=False)
    except (ValueError, OverflowError) as exc:
        raise InvalidArgument(f"Unable to parse date/time string {text!r}") from exc

    if not isinstance(parsed, pendulum.DateTime):
        raise InvalidArgument(
            f"{text!r} is a {type(parsed).__name__}, not a date and time"
        )
    return parsed
