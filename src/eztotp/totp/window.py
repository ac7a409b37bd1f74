"""
Time window resolution

Maps a Unix timestamp to its TOTP counter and lists the neighbouring
counters accepted to absorb clock drift between client and server.
"""

import math
import numbers

from ..exceptions import InvalidTimestamp
from .parameters import MAX_COUNTER


def _check_timestamp(now):
    if isinstance(now, bool) or not isinstance(now, numbers.Real):
        raise InvalidTimestamp(f"Timestamp must be a number of seconds, got {type(now).__name__}")
    if not math.isfinite(now):
        raise InvalidTimestamp("Timestamp must be finite")
    if now < 0:
        raise InvalidTimestamp("Timestamp precedes the Unix epoch")


def timecode(now, period):
    """
    Counter for the time step containing ``now``.

    Args:
        now (int or float): Seconds since the Unix epoch
        period (int): Seconds per step

    Returns:
        int: ``floor(now / period)``

    Raises:
        InvalidTimestamp: If ``now`` is negative, not finite, not a number,
            or so far in the future that its counter does not fit in 8 bytes
    """
    _check_timestamp(now)
    base = int(now // period)
    if base > MAX_COUNTER:
        raise InvalidTimestamp("Timestamp is too far in the future")
    return base


def candidates(now, period, tolerance):
    """
    Counters accepted at time ``now``, ascending.

    Returns ``base - tolerance`` through ``base + tolerance`` inclusive.
    Counters below zero, reachable only during the first few steps after
    the epoch, are left out instead of wrapping. Counters past the 8-byte
    limit are left out the same way.

    Args:
        now (int or float): Seconds since the Unix epoch
        period (int): Seconds per step
        tolerance (int): Steps accepted on each side of the current one

    Returns:
        list[int]: Candidate counters in ascending order

    Raises:
        InvalidTimestamp: If ``now`` cannot be mapped to a counter
    """
    base = timecode(now, period)
    return [counter for counter in range(base - tolerance, base + tolerance + 1) if 0 <= counter <= MAX_COUNTER]


def seconds_remaining(now, period):
    """Seconds until the counter for ``now`` rolls over (1 to ``period``)."""
    _check_timestamp(now)
    return period - (int(now) % period)
