# weekly_report/sheets/models.py
from dataclasses import astuple, dataclass
from datetime import datetime, timezone
from typing import List, Optional, Union

from ..reports.models import WeeklyReportPayload


LOG_HEADER = [
    "Timestamp",
    "Name",
    "Submission Date",
    "Previous Week",
    "Current Week",
    "Goal Result (%)",
    "Previous Goal",
    "Achieved Points",
    "Issues",
    "Current Goal",
    "Notes",
    "Drive Link",
    "Drive File ID",
]


@dataclass
class ReportLogRow:
    """Represents a single submitted report in the log sheet"""

    timestamp: str
    name: str
    submission_date: str
    prev_week_label: str
    current_week_label: str
    prev_goal_result_percent: int
    prev_goal: str
    achieved_points: str
    issues: str
    current_goal: str
    notes: str
    web_view_link: str
    file_id: str

    @classmethod
    def from_payload(
        cls,
        payload: WeeklyReportPayload,
        web_view_link: Optional[str],
        file_id: Optional[str],
        timestamp: Optional[datetime] = None,
    ) -> "ReportLogRow":
        timestamp = timestamp or datetime.now(timezone.utc)
        return cls(
            timestamp=timestamp.isoformat(),
            name=payload.name,
            submission_date=payload.submission_date,
            prev_week_label=payload.prev_week_label,
            current_week_label=payload.current_week_label,
            prev_goal_result_percent=payload.prev_goal_result_percent,
            prev_goal=payload.prev_goal,
            achieved_points=payload.achieved_points,
            issues=payload.issues,
            current_goal=payload.current_goal,
            notes=payload.notes,
            web_view_link=web_view_link or "",
            file_id=file_id or "",
        )

    def to_values(self) -> List[Union[str, int]]:
        return list(astuple(self))
