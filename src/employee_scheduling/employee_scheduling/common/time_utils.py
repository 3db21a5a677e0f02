from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MINUTES_PER_DAY, MORNING_CUTOFF

CLOCK_DIGITS = re.compile(r"[0-9]{2}")


def to_minutes(value: object) -> Optional[int]:
    """Convert a 24-hour ``"HH:MM"`` string into minutes since midnight.

    Returns ``None`` when the value is not exactly two digits, a colon and two
    digits, or when hour/minute fall outside 00-23 / 00-59.
    """

    if not isinstance(value, str) or len(value) != 5:
        return None
    if value[2] != ":":
        return None

    hour_text, minute_text = value[:2], value[3:]
    if not (CLOCK_DIGITS.fullmatch(hour_text) and CLOCK_DIGITS.fullmatch(minute_text)):
        return None

    hour = int(hour_text)
    minute = int(minute_text)
    if hour > 23 or minute > 59:
        return None

    return hour * 60 + minute


def shift_minutes(start_time: object, end_time: object) -> Optional[int]:
    """Duration of a shift in minutes.

    An end time earlier than the start time means the shift runs past
    midnight, e.g. 22:00 -> 02:00 is 240 minutes.
    """

    start = to_minutes(start_time)
    end = to_minutes(end_time)
    if start is None or end is None:
        return None

    if end < start:
        end += MINUTES_PER_DAY

    return end - start


def is_morning(start_time: object) -> bool:
    start = to_minutes(start_time)
    return start is not None and start < to_minutes(MORNING_CUTOFF)
