# weekly_report/reports/models.py
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class DayTemplate:
    """A calendar day of a report week"""

    iso: str  # yyyy-MM-dd
    label: str  # yyyy-MM-dd (月)


@dataclass(frozen=True)
class DayInput:
    """Raw values entered for a single day"""

    stay_start: str = ""
    stay_end: str = ""
    break_start: str = ""
    break_end: str = ""
    content: str = ""


@dataclass(frozen=True)
class DayDerivation:
    """Computed figures and validation errors for a single day"""

    break_minutes: int
    minutes: int
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class DayRecord:
    """A labelled day with its derived break and stay minutes"""

    date: str
    stay_start: str
    stay_end: str
    break_start: str
    break_end: str
    break_minutes: int
    minutes: int
    content: str


@dataclass(frozen=True)
class WeekComputation:
    """Previous and current week derived from a reference date"""

    prev_week_label: str
    current_week_label: str
    prev_week_days: tuple[DayTemplate, ...]
    current_week_days: tuple[DayTemplate, ...]
    submission_date: str


@dataclass(frozen=True)
class WeekTotals:
    total_minutes: int
    total_hours_rounded: int


@dataclass(frozen=True)
class WeeklyReportPayload:
    """Validated report handed to the renderer and the archive"""

    year_label: str
    name: str
    submission_date: str
    prev_week_label: str
    current_week_label: str
    prev_week_days: tuple[DayRecord, ...]
    current_week_days: tuple[DayRecord, ...]
    total_prev_minutes: int
    total_prev_hours_rounded: int
    prev_goal: str
    prev_goal_result_percent: int
    achieved_points: str
    issues: str
    current_goal: str
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
