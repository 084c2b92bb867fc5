import logging
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .errors import InvalidDateError
from .models import DayTemplate, WeekComputation


logger = logging.getLogger(__name__)

# indexed by day-of-week with 0 = Sunday
WEEKDAY_JA = ("日", "月", "火", "水", "木", "金", "土")
DAYS_PER_WEEK = 7
FISCAL_YEAR_START_MONTH = 4


def parse_reference_date(value: Union[str, date]) -> date:
    """Parse an ISO date (or the date part of an ISO datetime)"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(value)

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDateError(value) from None


def weekday_kanji(day: date) -> str:
    return WEEKDAY_JA[day.isoweekday() % 7]


def week_start(day: date) -> date:
    """Monday on or before the given day"""
    return day - timedelta(days=day.weekday())


def format_week_label(start: date) -> str:
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    return f"{start:%Y/%m/%d}〜{end:%Y/%m/%d}"


def build_week_days(start: date) -> tuple[DayTemplate, ...]:
    days = []
    for offset in range(DAYS_PER_WEEK):
        day = start + timedelta(days=offset)
        iso = day.isoformat()
        days.append(DayTemplate(iso=iso, label=f"{iso} ({weekday_kanji(day)})"))
    return tuple(days)


def compute_weeks_from_reference(reference_date: Union[str, date]) -> WeekComputation:
    """Compute the previous week containing the reference date and the week after it.

    Weeks start on Monday. The default submission date is the Monday of the
    current week.

    Raises:
        InvalidDateError: if the reference date cannot be parsed

    """
    base = parse_reference_date(reference_date)
    prev_week_start = week_start(base)
    current_week_start = prev_week_start + timedelta(days=DAYS_PER_WEEK)

    return WeekComputation(
        prev_week_label=format_week_label(prev_week_start),
        current_week_label=format_week_label(current_week_start),
        prev_week_days=build_week_days(prev_week_start),
        current_week_days=build_week_days(current_week_start),
        submission_date=current_week_start.isoformat(),
    )


def derive_fiscal_year_label(base_date: Optional[date] = None) -> str:
    """Fiscal year label; the fiscal year starts in April"""
    base_date = base_date or date.today()
    if base_date.month >= FISCAL_YEAR_START_MONTH:
        return str(base_date.year)
    return str(base_date.year - 1)


def default_reference_date(today: Optional[date] = None) -> date:
    """A day in last week, which the form treats as the previous week"""
    today = today or date.today()
    return today - timedelta(days=DAYS_PER_WEEK)


def week_start_from_label(label: str) -> Optional[str]:
    """ISO date of the first day of a "yyyy/MM/dd〜yyyy/MM/dd" label"""
    head = label.split("〜", 1)[0].strip()
    try:
        return datetime.strptime(head, "%Y/%m/%d").date().isoformat()
    except ValueError:
        logger.debug(f"Could not read week start from label {label!r}")
        return None
