"""
timekit.dates
~~~~~~~~~~~~~

A thin date/time value on top of pendulum.  ``DateTime`` adds MS-DOS
timestamp conversion, a per-instance render format, and a little
arithmetic sugar; parsing, timezone maths and leap-year rules are
pendulum's.

Basic usage::

    from timekit.dates import DateTime

    dt = DateTime("2017-03-10 10:00:00", "Europe/Paris")
    dt.to_dos_timestamp()                               # → 0x4A6A5000
    DateTime.from_dos_timestamp(0x4A6A5000, "UTC")      # 2017-03-10T10:00:00

    dt.set_format("DD/MM/YYYY")
    str(dt)                                             # → "10/03/2017"
    dt.forward(DateTime.DAY).days_in_month()            # → 31

The raw bit packing lives in :mod:`timekit.dates.dos` and also accepts
NumPy arrays::

    import numpy as np
    from timekit.dates import dos

    years, months, days, *_ = dos.unpack(np.array([0x4A6A5000, 0x21658800]))

Public API
----------
DateTime          The main class.
InvalidArgument   Bad input to a constructor or parser.
InvalidTimestamp  DOS fields that do not form a valid date.
InvalidTimezone   Unresolvable timezone.
TimekitError      Base exception for all of the above.
"""

from __future__ import annotations

from timekit._exceptions import (
    InvalidArgument,
    InvalidTimestamp,
    InvalidTimezone,
    TimekitError,
)
from timekit.dates.dates import DateTime

__all__ = [
    "DateTime",
    "InvalidArgument",
    "InvalidTimestamp",
    "InvalidTimezone",
    "TimekitError",
]
