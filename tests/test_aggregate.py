import pytest

from weekly_report.reports.aggregate import round_hours_from_minutes, summarize_week, total_minutes
from weekly_report.reports.day_records import derive_day_record
from weekly_report.reports.models import DayInput

from .conftest import work_day


def _records(days):
    return [derive_day_record(f"day{i}", day, content_limit=20)[0] for i, day in enumerate(days)]


def test_full_week_of_eight_hour_days():
    totals = summarize_week(_records([work_day() for _ in range(7)]))

    assert totals.total_minutes == 3360
    assert totals.total_hours_rounded == 56


def test_invalid_days_contribute_nothing():
    days = [work_day(), DayInput(stay_start="09:00", stay_end="08:00"), DayInput()]
    assert total_minutes(_records(days)) == 480


@pytest.mark.parametrize(
    "minutes, hours",
    [(0, 0), (29, 0), (30, 1), (89, 1), (90, 2), (150, 3), (3360, 56), (-120, 0)],
)
def test_round_hours_half_up(minutes, hours):
    assert round_hours_from_minutes(minutes) == hours
