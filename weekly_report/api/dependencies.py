from typing import Callable

from fastapi import Request

from ..config import AppConfig
from ..reports.limits import FieldLimits
from ..reports.models import WeeklyReportPayload
from ..storage.archiver import ReportArchiver


Renderer = Callable[[WeeklyReportPayload], bytes]


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_field_limits(request: Request) -> FieldLimits:
    return request.app.state.config["FIELD_LIMITS"]


def get_archiver(request: Request) -> ReportArchiver:
    return request.app.state.archiver


def get_renderer(request: Request) -> Renderer:
    return request.app.state.renderer
