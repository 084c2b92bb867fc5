import pytest

from weekly_report.reports.builder import ReportSubmission, build_weekly_report
from weekly_report.reports.models import DayInput


def work_day(content: str = "実験") -> DayInput:
    return DayInput(
        stay_start="09:00",
        stay_end="18:00",
        break_start="12:00",
        break_end="13:00",
        content=content,
    )


def make_submission(**overrides) -> ReportSubmission:
    fields = {
        "name": "テスト太郎",
        "year_label": "2025",
        "reference_date": "2025-04-07",
        "prev_week_days": [work_day(f"日{i + 1}の研究") for i in range(7)],
        "current_week_days": [work_day("予定") for _ in range(7)],
        "prev_goal": "論文を2本読む",
        "prev_goal_result_percent": 80,
        "achieved_points": "実験装置の調整が完了",
        "issues": "測定に時間がかかった",
        "current_goal": "測定を3回行う",
        "notes": "特になし",
    }
    fields.update(overrides)
    return ReportSubmission(**fields)


@pytest.fixture
def submission() -> ReportSubmission:
    return make_submission()


@pytest.fixture
def payload(submission):
    return build_weekly_report(submission)
