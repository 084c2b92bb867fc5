import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from .aggregate import summarize_week
from .day_records import day_issues, derive_day_record
from .errors import FieldIssue, InvalidDateError, ReportValidationError
from .limits import DEFAULT_FIELD_LIMITS, FieldLimits
from .models import DayInput, DayTemplate, WeekComputation, WeeklyReportPayload
from .weeks import (
    DAYS_PER_WEEK,
    compute_weeks_from_reference,
    derive_fiscal_year_label,
    parse_reference_date,
    week_start_from_label,
)


logger = logging.getLogger(__name__)

PERCENT_STEP = 10

# (payload field path, FieldLimits attribute, label used in messages)
TEXT_FIELDS = (
    ("prevGoal", "prev_goal", "前週の研究達成目標"),
    ("achievedPoints", "achieved_points", "達成点"),
    ("issues", "issues", "課題・反省点"),
    ("currentGoal", "current_goal", "今週の研究達成目標"),
    ("notes", "notes", "備考"),
)


@dataclass(frozen=True)
class ReportSubmission:
    """Raw report fields as submitted by the user.

    Week labels and day dates are recomputed from ``reference_date`` or, when
    it is absent, from the first day of ``prev_week_label``.
    """

    name: str
    year_label: str = ""
    submission_date: str = ""
    reference_date: str = ""
    prev_week_label: str = ""
    current_week_label: str = ""
    prev_week_days: Sequence[DayInput] = field(default_factory=tuple)
    current_week_days: Sequence[DayInput] = field(default_factory=tuple)
    prev_goal: str = ""
    prev_goal_result_percent: Optional[int] = None
    achieved_points: str = ""
    issues: str = ""
    current_goal: str = ""
    notes: str = ""


def _too_long(path: str, label: str, value: str, limit: int) -> Optional[FieldIssue]:
    if len(value) > limit:
        return FieldIssue(path, f"{label}は{limit}文字以内で入力してください")
    return None


def _resolve_weeks(submission: ReportSubmission) -> tuple[Optional[WeekComputation], list[FieldIssue]]:
    if submission.reference_date:
        try:
            return compute_weeks_from_reference(submission.reference_date), []
        except InvalidDateError:
            return None, [FieldIssue("referenceDate", "基準日の形式が正しくありません")]

    if not submission.prev_week_label.strip():
        return None, [FieldIssue("prevWeekLabel", "前週の期間を指定してください")]

    start = week_start_from_label(submission.prev_week_label)
    if start is None:
        return None, [FieldIssue("prevWeekLabel", "前週の期間の形式が正しくありません")]
    return compute_weeks_from_reference(start), []


def _day_array_issues(
    path: str, days: Sequence[DayInput], limits: FieldLimits
) -> list[FieldIssue]:
    issues = []
    if len(days) != DAYS_PER_WEEK:
        issues.append(FieldIssue(path, f"{DAYS_PER_WEEK}日分の入力が必要です（{len(days)}日分）"))
    for index, day in enumerate(days):
        issues.extend(day_issues(path, index, day, limits.content))
    return issues


def _percent_issue(value: object) -> Optional[FieldIssue]:
    path = "prevGoalResultPercent"
    if value is None:
        return FieldIssue(path, "目標達成度を選択してください")
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        return FieldIssue(path, "目標達成度は0〜100の整数で入力してください")
    if value % PERCENT_STEP:
        return FieldIssue(path, f"目標達成度は{PERCENT_STEP}%刻みで入力してください")
    return None


def validate_submission(
    submission: ReportSubmission, limits: FieldLimits = DEFAULT_FIELD_LIMITS
) -> tuple[Optional[WeekComputation], list[FieldIssue]]:
    """Collect every issue in field-declaration order"""
    issues: list[Optional[FieldIssue]] = []

    issues.append(_too_long("yearLabel", "年度", submission.year_label.strip(), limits.year_label))

    name = submission.name.strip()
    if not name:
        issues.append(FieldIssue("name", "氏名を入力してください"))
    else:
        issues.append(_too_long("name", "氏名", name, limits.name))

    if submission.submission_date:
        try:
            parse_reference_date(submission.submission_date)
        except InvalidDateError:
            issues.append(FieldIssue("submissionDate", "提出日の形式が正しくありません"))

    weeks, week_issues = _resolve_weeks(submission)
    issues.extend(week_issues)

    issues.extend(_day_array_issues("prevWeekDays", submission.prev_week_days, limits))
    issues.extend(_day_array_issues("currentWeekDays", submission.current_week_days, limits))

    for path, limit_name, label in TEXT_FIELDS:
        value = getattr(submission, limit_name)
        issues.append(_too_long(path, label, value, getattr(limits, limit_name)))
        if path == "prevGoal":
            issues.append(_percent_issue(submission.prev_goal_result_percent))

    return weeks, [issue for issue in issues if issue is not None]


def _records(templates: Sequence[DayTemplate], days: Sequence[DayInput], limits: FieldLimits):
    return tuple(
        derive_day_record(template.label, day, limits.content)[0]
        for template, day in zip(templates, days)
    )


def _normalized_submission_date(submission: ReportSubmission, weeks: WeekComputation) -> str:
    """Plain ISO date; a datetime is reduced to its date part"""
    if not submission.submission_date:
        return weeks.submission_date
    return parse_reference_date(submission.submission_date).isoformat()


def build_weekly_report(
    submission: ReportSubmission,
    limits: FieldLimits = DEFAULT_FIELD_LIMITS,
    today: Optional[date] = None,
) -> WeeklyReportPayload:
    """Validate a submission and assemble the immutable report payload.

    Day minutes and the previous-week totals are always derived here; any
    figures computed by the client are ignored.

    Raises:
        ReportValidationError: with every violated field, if any

    """
    weeks, issues = validate_submission(submission, limits)
    if issues:
        logger.info(f"Rejected weekly report submission with {len(issues)} issue(s)")
        raise ReportValidationError(issues)

    prev_days = _records(weeks.prev_week_days, submission.prev_week_days, limits)
    current_days = _records(weeks.current_week_days, submission.current_week_days, limits)
    totals = summarize_week(prev_days)

    return WeeklyReportPayload(
        year_label=submission.year_label.strip() or derive_fiscal_year_label(today),
        name=submission.name.strip(),
        submission_date=_normalized_submission_date(submission, weeks),
        prev_week_label=weeks.prev_week_label,
        current_week_label=weeks.current_week_label,
        prev_week_days=prev_days,
        current_week_days=current_days,
        total_prev_minutes=totals.total_minutes,
        total_prev_hours_rounded=totals.total_hours_rounded,
        prev_goal=submission.prev_goal,
        prev_goal_result_percent=submission.prev_goal_result_percent,
        achieved_points=submission.achieved_points,
        issues=submission.issues,
        current_goal=submission.current_goal,
        notes=submission.notes,
    )
