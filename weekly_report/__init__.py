"""Weekly Report - a weekly activity report generator.

This package computes report weeks and worked time from a reference date,
renders the report as a PDF and archives it to Google Drive and Google Sheets.
"""

__version__ = "0.1.0"

from .reports.builder import build_weekly_report
from .reports.weeks import compute_weeks_from_reference
from .storage.archiver import ReportArchiver


__all__ = [
    "ReportArchiver",
    "build_weekly_report",
    "compute_weeks_from_reference",
]
