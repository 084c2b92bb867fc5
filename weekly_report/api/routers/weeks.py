from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from ...reports.weeks import (
    compute_weeks_from_reference,
    default_reference_date,
    derive_fiscal_year_label,
)
from ..schemas import WeekComputationResponse


router = APIRouter(prefix="/weeks", tags=["weeks"])


@router.get("")
async def get_weeks(
    reference: Optional[str] = Query(None, description="Any date in the previous week (YYYY-MM-DD)"),
) -> WeekComputationResponse:
    """Return week labels and day templates for a reference date."""
    today = date.today()
    reference = reference or default_reference_date(today).isoformat()
    week = compute_weeks_from_reference(reference)
    return WeekComputationResponse.from_week(
        week, year_label=derive_fiscal_year_label(today), reference_date=reference
    )
