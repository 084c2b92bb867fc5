import logging
from typing import List, Optional, Union

from google.api_core import retry
from googleapiclient.discovery import build

from ..reports.errors import PersistenceError
from .models import LOG_HEADER, ReportLogRow


logger = logging.getLogger(__name__)


class SheetError(PersistenceError):
    """Custom exception for sheet-related errors"""

    pass


class GoogleSheetsClient:
    """Appends submitted reports to the log spreadsheet"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(self, spreadsheet_id: str, credentials, service=None):
        self.spreadsheet_id = spreadsheet_id
        self.credentials = credentials
        self.service = service or self._build_sheets_service()

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            return build("sheets", "v4", credentials=self.credentials, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    @retry.Retry()
    def get_header_row(self, sheet_name: Optional[str] = None) -> List[str]:
        """Get the first row of the sheet"""
        range_name = f"{sheet_name}!1:1" if sheet_name else "1:1"
        try:
            result = (
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
                .execute()
            )
            values = result.get("values", [])
            return values[0] if values else []
        except Exception as e:
            logger.error(f"Error reading header row: {e}")
            raise SheetError(f"Failed to read header row: {str(e)}")

    @retry.Retry()
    def update_header_row(self, sheet_name: Optional[str] = None) -> None:
        """Write the log header into the first row"""
        range_name = f"{sheet_name}!A1" if sheet_name else "A1"
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": [LOG_HEADER]},
            ).execute()
        except Exception as e:
            logger.error(f"Error updating header row: {e}")
            raise SheetError(f"Failed to update header row: {str(e)}")

    def ensure_header_row(self, sheet_name: Optional[str] = None) -> None:
        """Add the header row to an empty sheet"""
        if not self.get_header_row(sheet_name):
            logger.info("Log sheet is empty, writing header row")
            self.update_header_row(sheet_name)

    @retry.Retry()
    def append_row(self, values: List[Union[str, int]], range_name: str = "A1") -> None:
        """Append a row to the sheet with retry logic"""
        try:
            self.service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": [values]},
            ).execute()
        except Exception as e:
            logger.error(f"Error appending to sheet: {e}")
            raise SheetError(f"Failed to append to sheet: {str(e)}")

    def log_report(self, row: ReportLogRow, range_name: str = "A1") -> None:
        logger.info(f"Logging weekly report for {row.name} ({row.submission_date})")
        self.append_row(row.to_values(), range_name=range_name)
