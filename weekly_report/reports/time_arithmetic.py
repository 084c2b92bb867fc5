"""Wall-clock arithmetic for "HH:MM" strings.

All durations are in whole minutes. Times are assumed to fall on the same
calendar day, so nothing here wraps past midnight.
"""

import re
from typing import Optional


TIME_PART = re.compile(r"[0-9]+")


def to_minutes(value: str) -> Optional[int]:
    """Convert "HH:MM" to minutes since midnight, or None if unparseable"""
    parts = value.split(":")
    if len(parts) < 2:
        return None
    hours, minutes = parts[0], parts[1]
    if not TIME_PART.fullmatch(hours) or not TIME_PART.fullmatch(minutes):
        return None
    return int(hours) * 60 + int(minutes)


def calculate_break_minutes(break_start: str, break_end: str) -> int:
    """Length of the break, or 0 if it is unset or ends before it starts"""
    if not break_start or not break_end:
        return 0

    start = to_minutes(break_start)
    end = to_minutes(break_end)
    if start is None or end is None:
        return 0
    return max(end - start, 0)


def calculate_stay_minutes(
    stay_start: str, stay_end: str, break_start: str, break_end: str
) -> int:
    """Minutes of stay time with the break subtracted, never negative"""
    if not stay_start or not stay_end:
        return 0

    start = to_minutes(stay_start)
    end = to_minutes(stay_end)
    if start is None or end is None:
        return 0

    break_minutes = calculate_break_minutes(break_start, break_end)
    return max(end - start - break_minutes, 0)
