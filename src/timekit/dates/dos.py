"""
Bit packing for MS-DOS timestamps.

A DOS timestamp is a 32-bit integer made of two 16-bit words, as stored in
FAT directory entries and ZIP headers::

    bits 31-25  year - 1980        bits 15-11  hour
    bits 24-21  month              bits 10-5   minute
    bits 20-16  day                bits  4-0   second / 2

The high word is the *date word* and the low word the *time word*.
Both ``unpack`` and ``pack`` accept NumPy arrays wherever a scalar is
accepted, which is convenient when decoding a whole archive listing at once.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)

IntLike = Union[int, "np.ndarray"]

DOS_EPOCH: tuple[int, int, int, int, int, int] = (1980, 1, 1, 0, 0, 0)

_YEAR_BASE = 1980


def unpack(timestamp: IntLike) -> tuple[IntLike, ...]:
    """
    Split a DOS timestamp into ``(year, month, day, hour, minute, second)``.

    Fields are extracted as-is; nothing checks that they form a real date.
    """
    scalar = np.ndim(timestamp) == 0
    ts = int(timestamp) if scalar else np.asarray(timestamp, dtype=np.int64)

    year   = _YEAR_BASE + ((ts >> 25) & 0x7F)
    month  = (ts >> 21) & 0x0F
    day    = (ts >> 16) & 0x1F
    hour   = (ts >> 11) & 0x1F
    minute = (ts >> 5) & 0x3F
    second = 2 * (ts & 0x1F)
    return year, month, day, hour, minute, second


def pack(
    year: IntLike,
    month: IntLike,
    day: IntLike,
    hour: IntLike = 0,
    minute: IntLike = 0,
    second: IntLike = 0,
) -> IntLike:
    """
    Pack calendar fields into a DOS timestamp.

    Anything before 1980 becomes the DOS epoch (1980-01-01 00:00:00).
    Seconds have 2-second resolution; odd seconds are truncated.
    """
    fields = (year, month, day, hour, minute, second)
    if all(np.ndim(f) == 0 for f in fields):
        if int(year) < _YEAR_BASE:
            logger.debug("Clamped DOS timestamp to epoch: year %d", int(year))
            fields = DOS_EPOCH
        return _pack_fields(*(int(f) for f in fields))

    arrays = np.broadcast_arrays(*(np.asarray(f, dtype=np.int64) for f in fields))
    early = arrays[0] < _YEAR_BASE
    if early.any():
        logger.debug("Clamped %d DOS timestamps to epoch", int(early.sum()))
        arrays = [np.where(early, e, a) for a, e in zip(arrays, DOS_EPOCH)]
    return _pack_fields(*arrays)


def _pack_fields(year, month, day, hour, minute, second):
    return (
        ((year - _YEAR_BASE) << 25)
        | (month << 21)
        | (day << 16)
        | (hour << 11)
        | (minute << 5)
        | (second >> 1)
    )


# ── FAT/ZIP halves ───────────────────────────────────────────────────────

def split(timestamp: IntLike) -> tuple[IntLike, IntLike]:
    """Return the ``(date_word, time_word)`` halves of a DOS timestamp."""
    if np.ndim(timestamp) == 0:
        ts = int(timestamp)
    else:
        ts = np.asarray(timestamp, dtype=np.int64)
    return (ts >> 16) & 0xFFFF, ts & 0xFFFF


def join(date_word: IntLike, time_word: IntLike) -> IntLike:
    if np.ndim(date_word) == 0 and np.ndim(time_word) == 0:
        return ((int(date_word) & 0xFFFF) << 16) | (int(time_word) & 0xFFFF)
    d = np.asarray(date_word, dtype=np.int64)
    t = np.asarray(time_word, dtype=np.int64)
    return ((d & 0xFFFF) << 16) | (t & 0xFFFF)
