from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from ..reports.builder import ReportSubmission
from ..reports.form import FormState
from ..reports.models import DayInput, DayRecord, DayTemplate, WeekComputation


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


def _blank_if_null(value: Any) -> Any:
    return "" if value is None else value


class DayInputModel(CamelModel):
    stay_start: str = ""
    stay_end: str = ""
    break_start: str = ""
    break_end: str = ""
    content: str = ""
    # computed server-side; accepted so a full payload can be posted back
    date: Any = None
    break_minutes: Any = None
    minutes: Any = None

    blank_null_text = field_validator(
        "stay_start", "stay_end", "break_start", "break_end", "content", mode="before"
    )(_blank_if_null)

    def to_input(self) -> DayInput:
        return DayInput(
            stay_start=self.stay_start,
            stay_end=self.stay_end,
            break_start=self.break_start,
            break_end=self.break_end,
            content=self.content,
        )


class WeeklyReportRequest(CamelModel):
    year_label: str = ""
    name: str = ""
    submission_date: str = ""
    reference_date: str = ""
    prev_week_label: str = ""
    current_week_label: str = ""
    prev_week_days: list[DayInputModel] = []
    current_week_days: list[DayInputModel] = []
    # ignored, recomputed from the days
    total_prev_minutes: Any = None
    total_prev_hours_rounded: Any = None
    prev_goal: str = ""
    # checked with the other report fields so every issue is reported together
    prev_goal_result_percent: Any = None
    achieved_points: str = ""
    issues: str = ""
    current_goal: str = ""
    notes: str = ""

    blank_null_text = field_validator(
        "year_label",
        "name",
        "submission_date",
        "reference_date",
        "prev_week_label",
        "current_week_label",
        "prev_goal",
        "achieved_points",
        "issues",
        "current_goal",
        "notes",
        mode="before",
    )(_blank_if_null)

    def to_submission(self) -> ReportSubmission:
        return ReportSubmission(
            name=self.name,
            year_label=self.year_label,
            submission_date=self.submission_date,
            reference_date=self.reference_date,
            prev_week_label=self.prev_week_label,
            current_week_label=self.current_week_label,
            prev_week_days=[day.to_input() for day in self.prev_week_days],
            current_week_days=[day.to_input() for day in self.current_week_days],
            prev_goal=self.prev_goal,
            prev_goal_result_percent=self.prev_goal_result_percent,
            achieved_points=self.achieved_points,
            issues=self.issues,
            current_goal=self.current_goal,
            notes=self.notes,
        )


class PreviewRequest(CamelModel):
    reference_date: str
    prev_week_days: list[DayInputModel] = []
    current_week_days: list[DayInputModel] = []


class DayTemplateModel(CamelModel):
    iso: str
    label: str

    @classmethod
    def from_template(cls, template: DayTemplate) -> "DayTemplateModel":
        return cls(iso=template.iso, label=template.label)


class WeekComputationResponse(CamelModel):
    prev_week_label: str
    current_week_label: str
    prev_week_days: list[DayTemplateModel]
    current_week_days: list[DayTemplateModel]
    submission_date: str
    year_label: str
    reference_date: str

    @classmethod
    def from_week(cls, week: WeekComputation, year_label: str, reference_date: str) -> "WeekComputationResponse":
        return cls(
            prev_week_label=week.prev_week_label,
            current_week_label=week.current_week_label,
            prev_week_days=[DayTemplateModel.from_template(day) for day in week.prev_week_days],
            current_week_days=[DayTemplateModel.from_template(day) for day in week.current_week_days],
            submission_date=week.submission_date,
            year_label=year_label,
            reference_date=reference_date,
        )


class DayRecordModel(CamelModel):
    date: str
    stay_start: str
    stay_end: str
    break_start: str
    break_end: str
    break_minutes: int
    minutes: int
    content: str
    errors: list[str] = []

    @classmethod
    def from_record(cls, record: DayRecord, errors: tuple[str, ...] = ()) -> "DayRecordModel":
        return cls(
            date=record.date,
            stay_start=record.stay_start,
            stay_end=record.stay_end,
            break_start=record.break_start,
            break_end=record.break_end,
            break_minutes=record.break_minutes,
            minutes=record.minutes,
            content=record.content,
            errors=list(errors),
        )


class PreviewResponse(CamelModel):
    reference_date: str
    prev_week_label: str
    current_week_label: str
    submission_date: str
    prev_week_days: list[DayRecordModel]
    current_week_days: list[DayRecordModel]
    total_prev_minutes: int
    total_prev_hours_rounded: int

    @classmethod
    def from_state(cls, state: FormState) -> "PreviewResponse":
        return cls(
            reference_date=state.reference_date,
            prev_week_label=state.weeks.prev_week_label,
            current_week_label=state.weeks.current_week_label,
            submission_date=state.weeks.submission_date,
            prev_week_days=[
                DayRecordModel.from_record(record, errors)
                for record, errors in zip(state.prev_week_days, state.prev_week_errors)
            ],
            current_week_days=[
                DayRecordModel.from_record(record, errors)
                for record, errors in zip(state.current_week_days, state.current_week_errors)
            ],
            total_prev_minutes=state.prev_totals.total_minutes,
            total_prev_hours_rounded=state.prev_totals.total_hours_rounded,
        )


class FieldErrorModel(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: list[FieldErrorModel] = []


class HealthStatus(BaseModel):
    status: str
    version: str
