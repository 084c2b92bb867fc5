from typing import Iterable

from .models import DayRecord, WeekTotals


def total_minutes(records: Iterable[DayRecord]) -> int:
    return sum(record.minutes for record in records)


def round_hours_from_minutes(minutes: int) -> int:
    """Whole hours, rounding half up (90 -> 2, 89 -> 1)"""
    return (max(minutes, 0) + 30) // 60


def summarize_week(records: Iterable[DayRecord]) -> WeekTotals:
    minutes = total_minutes(records)
    return WeekTotals(total_minutes=minutes, total_hours_rounded=round_hours_from_minutes(minutes))
