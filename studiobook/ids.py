"""Identifier generation and time-of-day helpers."""

from __future__ import annotations

import random
import re
import time

_HEX_DIGITS = "0123456789abcdef"
_VARIANT_DIGITS = "89ab"
_rng = random.Random()

_TIME_OF_DAY = re.compile(r"\s*(\d{1,2}):(\d{1,2})")


def _hex(count: int) -> str:
    return "".join(_rng.choice(_HEX_DIGITS) for _ in range(count))


def generate_uuid_v4() -> str:
    """Return a random version-4 UUID in its canonical textual form."""
    return (
        f"{_hex(8)}-{_hex(4)}-4{_hex(3)}-"
        f"{_rng.choice(_VARIANT_DIGITS)}{_hex(3)}-{_hex(12)}"
    )


def epoch_from_time_string(text: str) -> int:
    """Return the epoch seconds of today's date at the given ``HH:MM`` local time.

    The seconds are taken from the current clock, as only hours and minutes
    are replaced. Raises ValueError if no valid time of day leads the text.
    """
    match = _TIME_OF_DAY.match(text)
    if match is None:
        raise ValueError(f"invalid time of day: {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"invalid time of day: {text!r}")
    now = time.localtime()
    fields = (
        now.tm_year,
        now.tm_mon,
        now.tm_mday,
        hour,
        minute,
        now.tm_sec,
        now.tm_wday,
        now.tm_yday,
        now.tm_isdst,
    )
    return int(time.mktime(fields))