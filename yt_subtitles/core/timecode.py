"""SRT timestamp formatting.

WHY: SRT timing lines need fixed-width ``HH:MM:SS,mmm`` stamps. Naive
formatting of a float fraction can produce a ``1000`` millisecond field
(e.g. 59.9996s), which is not a valid SRT timestamp.

HOW: Split the value into whole seconds and a fraction, round the fraction
half-up to milliseconds, and carry a rounded ``1000`` into the whole
seconds before deriving hours, minutes, and seconds.

RULES:
- HH = floor(t / 3600) mod 24 (wraps at one day)
- MM = floor(t / 60) mod 60, SS = floor(t) mod 60
- mmm = fractional part rounded half-up to 3 digits, carried on overflow
- Negative or non-finite input raises ValueError
"""

from __future__ import annotations

import math

_SECONDS_PER_DAY = 24 * 3600


def split_seconds(seconds: float) -> tuple[int, int]:
    """Return ``(whole_seconds, milliseconds)`` with the millisecond carry applied."""
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError("timestamp must be a finite, non-negative number: {!r}".format(seconds))

    whole = math.floor(seconds)
    millis = math.floor((seconds - whole) * 1000 + 0.5)
    if millis >= 1000:
        whole += 1
        millis -= 1000
    return whole, millis


def format_timestamp(seconds: float) -> str:
    """Convert seconds to an SRT timestamp: ``HH:MM:SS,mmm``.

    >>> format_timestamp(3661.5)
    '01:01:01,500'
    """
    whole, millis = split_seconds(seconds)
    whole %= _SECONDS_PER_DAY
    hours = whole // 3600
    minutes = (whole // 60) % 60
    secs = whole % 60
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)
