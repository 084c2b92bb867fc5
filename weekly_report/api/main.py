import logging
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from .. import __version__
from ..config import AppConfig, load_config
from ..pdf.renderer import render_weekly_report_pdf
from ..reports.errors import (
    EmptyRenderOutputError,
    FieldIssue,
    InvalidDateError,
    ReportValidationError,
)
from ..storage.archiver import ReportArchiver
from .dependencies import Renderer
from .routers import weekly_report, weeks
from .schemas import HealthStatus


logger = logging.getLogger(__name__)


def _field_path(loc: tuple) -> str:
    """('body', 'prevWeekDays', 2, 'stayStart') -> 'prevWeekDays[2].stayStart'"""
    path = ""
    for part in loc:
        if part == "body" and not path:
            continue
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "body"


def _issues_response(issues: list[FieldIssue]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "detail": "; ".join(str(issue) for issue in issues),
            "errors": [{"field": issue.field, "message": issue.message} for issue in issues],
        },
    )


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = [FieldIssue(_field_path(tuple(error["loc"])), error["msg"]) for error in exc.errors()]
    return _issues_response(issues)


async def report_validation_handler(_request: Request, exc: ReportValidationError) -> JSONResponse:
    return _issues_response(exc.issues)


async def invalid_date_handler(_request: Request, exc: InvalidDateError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": f"{exc}. Please choose a valid date and try again.", "errors": []},
    )


async def empty_render_handler(_request: Request, exc: EmptyRenderOutputError) -> JSONResponse:
    logger.error(f"PDF rendering failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": "PDF generation failed", "errors": []})


def create_app(
    config: Optional[AppConfig] = None,
    archiver: Optional[ReportArchiver] = None,
    renderer: Optional[Renderer] = None,
) -> FastAPI:
    config = config or load_config()

    app = FastAPI(title="Weekly Report API", version=__version__)
    app.state.config = config
    app.state.archiver = archiver or ReportArchiver.from_config(config)
    app.state.renderer = renderer or render_weekly_report_pdf

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ReportValidationError, report_validation_handler)
    app.add_exception_handler(InvalidDateError, invalid_date_handler)
    app.add_exception_handler(EmptyRenderOutputError, empty_render_handler)

    # Create shared API v1 router
    api_v1 = APIRouter(prefix="/api/v1")

    @api_v1.get("/health")
    async def health_check() -> HealthStatus:
        """Return health status of the API."""
        return HealthStatus(status="healthy", version=__version__)

    api_v1.include_router(weeks.router)
    api_v1.include_router(weekly_report.router)
    app.include_router(api_v1)

    # i18n is not configured, so /ja/... serves the same pages as /...
    @app.get("/ja", include_in_schema=False)
    @app.get("/ja/{path:path}", include_in_schema=False)
    async def strip_locale_prefix(request: Request, path: str = "") -> RedirectResponse:
        url = request.url.replace(path=f"/{path}")
        return RedirectResponse(str(url))

    return app
