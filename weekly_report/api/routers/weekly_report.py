import logging

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import Response

from ...pdf.renderer import ensure_pdf_bytes
from ...reports.builder import build_weekly_report
from ...reports.form import derive_form
from ...reports.limits import FieldLimits
from ...reports.text import build_report_filename, content_disposition
from ...storage.archiver import ReportArchiver
from ..dependencies import Renderer, get_archiver, get_field_limits, get_renderer
from ..schemas import ErrorResponse, PreviewRequest, PreviewResponse, WeeklyReportRequest


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/weekly-report", tags=["weekly-report"])


@router.post("/preview")
async def preview_weekly_report(
    body: PreviewRequest,
    limits: FieldLimits = Depends(get_field_limits),
) -> PreviewResponse:
    """Recompute week labels, day minutes, errors and totals for the form."""
    state = derive_form(
        body.reference_date,
        prev_inputs=[day.to_input() for day in body.prev_week_days],
        current_inputs=[day.to_input() for day in body.current_week_days],
        limits=limits,
    )
    return PreviewResponse.from_state(state)


@router.post(
    "",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_weekly_report(
    body: WeeklyReportRequest,
    background_tasks: BackgroundTasks,
    limits: FieldLimits = Depends(get_field_limits),
    archiver: ReportArchiver = Depends(get_archiver),
    render: Renderer = Depends(get_renderer),
) -> Response:
    """Validate a report, render it as PDF and archive it in the background."""
    payload = build_weekly_report(body.to_submission(), limits)
    pdf_bytes = ensure_pdf_bytes(render(payload))

    background_tasks.add_task(archiver.persist, payload, pdf_bytes)

    filename = build_report_filename(payload.name, payload.submission_date)
    logger.info(f"Generated {filename} ({len(pdf_bytes)} bytes)")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )
