"""Per-day derivation of break/stay minutes and validation errors.

A day with any validation error contributes zero minutes, so totals never
include a partial or misleading figure.
"""

from .errors import FieldIssue
from .models import DayDerivation, DayInput, DayRecord
from .time_arithmetic import calculate_break_minutes, calculate_stay_minutes, to_minutes


def _parse(value: str):
    return to_minutes(value) if value else None


def _day_problems(day: DayInput, content_limit: int) -> list[tuple[str, str]]:
    """Return (field, message) for every rule the day breaks"""
    problems = []

    if len(day.content) > content_limit:
        problems.append(("content", f"研究内容は{content_limit}文字以内で入力してください"))

    stay_start = _parse(day.stay_start)
    stay_end = _parse(day.stay_end)
    break_start = _parse(day.break_start)
    break_end = _parse(day.break_end)

    if stay_start is not None and stay_end is not None and stay_end <= stay_start:
        problems.append(("stayEnd", "滞在終了時刻は開始時刻より後にしてください"))

    if break_start is not None and break_end is not None and break_end <= break_start:
        problems.append(("breakEnd", "離席終了時刻は開始時刻より後にしてください"))

    if None not in (stay_start, stay_end, break_start, break_end) and (
        break_start < stay_start or break_end > stay_end
    ):
        problems.append(("breakStart", "離席時間は滞在時間内に収めてください"))

    return problems


def derive_day(day: DayInput, content_limit: int) -> DayDerivation:
    errors = tuple(message for _, message in _day_problems(day, content_limit))
    break_minutes = calculate_break_minutes(day.break_start, day.break_end)
    minutes = 0
    if not errors:
        minutes = calculate_stay_minutes(
            day.stay_start, day.stay_end, day.break_start, day.break_end
        )
    return DayDerivation(break_minutes=break_minutes, minutes=minutes, errors=errors)


def derive_day_record(
    label: str, day: DayInput, content_limit: int
) -> tuple[DayRecord, DayDerivation]:
    """Attach a day's derived figures to its template label"""
    derivation = derive_day(day, content_limit)
    record = DayRecord(
        date=label,
        stay_start=day.stay_start,
        stay_end=day.stay_end,
        break_start=day.break_start,
        break_end=day.break_end,
        break_minutes=derivation.break_minutes,
        minutes=derivation.minutes,
        content=day.content,
    )
    return record, derivation


def day_issues(prefix: str, index: int, day: DayInput, content_limit: int) -> list[FieldIssue]:
    """Day problems addressed by field path, e.g. prevWeekDays[2].content"""
    return [
        FieldIssue(field=f"{prefix}[{index}].{name}", message=message)
        for name, message in _day_problems(day, content_limit)
    ]
