from .aggregate import round_hours_from_minutes, summarize_week, total_minutes
from .builder import ReportSubmission, build_weekly_report, validate_submission
from .day_records import day_issues, derive_day, derive_day_record
from .errors import (
    EmptyRenderOutputError,
    FieldIssue,
    InvalidDateError,
    PersistenceError,
    ReportValidationError,
    WeeklyReportError,
)
from .form import FormState, change_reference_date, derive_form, merge_day_inputs, seed_week_inputs
from .limits import DEFAULT_FIELD_LIMITS, FieldLimits, load_field_limits
from .models import (
    DayDerivation,
    DayInput,
    DayRecord,
    DayTemplate,
    WeekComputation,
    WeeklyReportPayload,
    WeekTotals,
)
from .time_arithmetic import calculate_break_minutes, calculate_stay_minutes, to_minutes
from .weeks import compute_weeks_from_reference, default_reference_date, derive_fiscal_year_label


__all__ = [
    "DEFAULT_FIELD_LIMITS",
    "DayDerivation",
    "DayInput",
    "DayRecord",
    "DayTemplate",
    "EmptyRenderOutputError",
    "FieldIssue",
    "FieldLimits",
    "FormState",
    "InvalidDateError",
    "PersistenceError",
    "ReportSubmission",
    "ReportValidationError",
    "WeekComputation",
    "WeekTotals",
    "WeeklyReportError",
    "WeeklyReportPayload",
    "build_weekly_report",
    "calculate_break_minutes",
    "calculate_stay_minutes",
    "change_reference_date",
    "compute_weeks_from_reference",
    "day_issues",
    "default_reference_date",
    "derive_day",
    "derive_day_record",
    "derive_fiscal_year_label",
    "derive_form",
    "load_field_limits",
    "merge_day_inputs",
    "round_hours_from_minutes",
    "seed_week_inputs",
    "summarize_week",
    "to_minutes",
    "total_minutes",
    "validate_submission",
]
