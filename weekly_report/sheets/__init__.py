from .client import GoogleSheetsClient, SheetError
from .models import LOG_HEADER, ReportLogRow


__all__ = ["LOG_HEADER", "GoogleSheetsClient", "ReportLogRow", "SheetError"]
