import pytest

from weekly_report.reports.time_arithmetic import (
    calculate_break_minutes,
    calculate_stay_minutes,
    to_minutes,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("00:00", 0),
        ("09:00", 540),
        ("18:30", 1110),
        ("9:05", 545),
        ("09:00:00", 540),
    ],
)
def test_to_minutes(value, expected):
    assert to_minutes(value) == expected


@pytest.mark.parametrize(
    "value", ["", "abc", "09", "ab:cd", "09:xx", "xx:30", "9_0:00", "٠٩:٠٠", " 9:00", "+9:00", "09:-5"]
)
def test_to_minutes_unparseable(value):
    assert to_minutes(value) is None


def test_stay_without_break_is_plain_difference():
    for start, end in [("09:00", "18:00"), ("00:00", "23:59"), ("13:15", "13:16")]:
        assert calculate_stay_minutes(start, end, "", "") == to_minutes(end) - to_minutes(start)


def test_stay_with_break():
    assert calculate_break_minutes("12:00", "13:00") == 60
    assert calculate_stay_minutes("09:00", "18:00", "12:00", "13:00") == 480


@pytest.mark.parametrize("start, end", [("13:00", "12:00"), ("12:00", "12:00")])
def test_break_ending_at_or_before_start_is_zero(start, end):
    assert calculate_break_minutes(start, end) == 0


def test_break_with_missing_or_bad_endpoint_is_zero():
    assert calculate_break_minutes("", "13:00") == 0
    assert calculate_break_minutes("12:00", "") == 0
    assert calculate_break_minutes("noon", "13:00") == 0


@pytest.mark.parametrize(
    "args",
    [
        ("", "18:00", "", ""),
        ("09:00", "", "", ""),
        ("bad", "18:00", "", ""),
        ("09:00", "??:00", "", ""),
        ("18:00", "09:00", "", ""),
        ("09:00", "10:00", "09:00", "12:00"),
        ("garbage", "more garbage", "x", "y"),
    ],
)
def test_stay_minutes_never_negative(args):
    assert calculate_stay_minutes(*args) == 0
