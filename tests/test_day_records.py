from weekly_report.reports.day_records import day_issues, derive_day, derive_day_record
from weekly_report.reports.models import DayInput

from .conftest import work_day


def test_valid_day():
    derivation = derive_day(work_day(), content_limit=20)

    assert derivation.break_minutes == 60
    assert derivation.minutes == 480
    assert derivation.errors == ()
    assert derivation.is_valid


def test_empty_day_is_valid_and_zero():
    derivation = derive_day(DayInput(), content_limit=20)
    assert derivation == derive_day(DayInput(), content_limit=20)
    assert derivation.minutes == 0
    assert derivation.break_minutes == 0
    assert derivation.is_valid


def test_end_before_start_is_an_error_with_zero_minutes():
    derivation = derive_day(DayInput(stay_start="09:00", stay_end="08:00"), content_limit=20)

    assert len(derivation.errors) == 1
    assert derivation.minutes == 0


def test_break_end_before_start_still_reports_break_minutes():
    day = DayInput(stay_start="09:00", stay_end="18:00", break_start="13:00", break_end="12:00")
    derivation = derive_day(day, content_limit=20)

    assert derivation.errors
    assert derivation.break_minutes == 0
    assert derivation.minutes == 0


def test_break_outside_stay_zeroes_minutes_but_keeps_break():
    day = DayInput(stay_start="09:00", stay_end="18:00", break_start="08:00", break_end="10:00")
    derivation = derive_day(day, content_limit=20)

    assert len(derivation.errors) == 1
    assert derivation.break_minutes == 120
    assert derivation.minutes == 0


def test_break_ending_after_stay_is_an_error():
    day = DayInput(stay_start="09:00", stay_end="18:00", break_start="17:00", break_end="19:00")
    derivation = derive_day(day, content_limit=20)

    assert len(derivation.errors) == 1
    assert derivation.break_minutes == 120
    assert derivation.minutes == 0
    assert [issue.field for issue in day_issues("currentWeekDays", 0, day, 20)] == [
        "currentWeekDays[0].breakStart"
    ]


def test_all_errors_are_collected():
    day = DayInput(
        stay_start="18:00",
        stay_end="09:00",
        break_start="13:00",
        break_end="12:00",
        content="x" * 21,
    )
    derivation = derive_day(day, content_limit=20)

    assert len(derivation.errors) == 4


def test_content_at_limit_is_accepted():
    assert derive_day(work_day("x" * 20), content_limit=20).is_valid
    assert not derive_day(work_day("x" * 21), content_limit=20).is_valid


def test_unparseable_times_are_treated_as_not_set():
    day = DayInput(stay_start="09:00", stay_end="later", break_start="12:00", break_end="13:00")
    derivation = derive_day(day, content_limit=20)

    assert derivation.is_valid
    assert derivation.break_minutes == 60
    assert derivation.minutes == 0


def test_derive_day_record_carries_label_and_inputs():
    record, derivation = derive_day_record("2025-04-07 (月)", work_day("測定"), content_limit=20)

    assert record.date == "2025-04-07 (月)"
    assert record.stay_start == "09:00"
    assert record.content == "測定"
    assert record.minutes == derivation.minutes == 480
    assert record.break_minutes == 60


def test_day_issues_use_field_paths():
    day = DayInput(stay_start="09:00", stay_end="08:00", content="x" * 30)
    issues = day_issues("prevWeekDays", 3, day, content_limit=20)

    assert [issue.field for issue in issues] == [
        "prevWeekDays[3].content",
        "prevWeekDays[3].stayEnd",
    ]
