import logging
from dataclasses import dataclass
from typing import Optional

from google.oauth2 import service_account

from ..drive.client import GoogleDriveClient
from ..reports.models import WeeklyReportPayload
from ..reports.text import build_report_filename
from ..sheets.client import GoogleSheetsClient
from ..sheets.models import ReportLogRow


logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
DRY_RUN_ID = "dry-run"


@dataclass(frozen=True)
class PersistResult:
    file_id: Optional[str]
    web_view_link: Optional[str]


def build_service_account_credentials(email: str, private_key: str, scopes: list[str]):
    """Service account credentials from an email and an inline private key"""
    info = {
        "type": "service_account",
        "client_email": email,
        # env files hold the key with escaped newlines
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(info, scopes=scopes)


class ReportArchiver:
    """Best-effort upload of rendered reports to Drive with a log row in Sheets"""

    SCOPES = GoogleDriveClient.SCOPES + GoogleSheetsClient.SCOPES

    def __init__(
        self,
        folder_id: Optional[str] = None,
        spreadsheet_id: Optional[str] = None,
        service_account_email: Optional[str] = None,
        service_account_key: Optional[str] = None,
        sheet_range: str = "A1",
        dry_run: bool = False,
        drive_client: Optional[GoogleDriveClient] = None,
        sheets_client: Optional[GoogleSheetsClient] = None,
    ):
        self.folder_id = folder_id
        self.spreadsheet_id = spreadsheet_id
        self.service_account_email = service_account_email
        self.service_account_key = service_account_key
        self.sheet_range = sheet_range
        self.dry_run = dry_run
        self._drive_client = drive_client
        self._sheets_client = sheets_client

    @classmethod
    def from_config(cls, config) -> "ReportArchiver":
        return cls(
            folder_id=config.get("GOOGLE_DRIVE_FOLDER_ID"),
            spreadsheet_id=config.get("GOOGLE_SHEETS_ID"),
            service_account_email=config.get("GOOGLE_SERVICE_ACCOUNT_EMAIL"),
            service_account_key=config.get("GOOGLE_SERVICE_ACCOUNT_KEY"),
            sheet_range=config.get("GOOGLE_SHEETS_RANGE") or "A1",
            dry_run=bool(config.get("PERSIST_DRY_RUN")),
        )

    @property
    def sheet_name(self) -> Optional[str]:
        if "!" in self.sheet_range:
            return self.sheet_range.split("!", 1)[0]
        return None

    def is_configured(self) -> bool:
        return all(
            (
                self.folder_id,
                self.spreadsheet_id,
                self.service_account_email,
                self.service_account_key,
            )
        )

    def _clients(self) -> tuple[GoogleDriveClient, GoogleSheetsClient]:
        """Clients for one persist call; injected clients are used as given.

        persist runs on worker threads and httplib2 transports must not be
        shared between threads, so nothing built here is kept.
        """
        drive_client, sheets_client = self._drive_client, self._sheets_client
        if drive_client is None or sheets_client is None:
            credentials = build_service_account_credentials(
                self.service_account_email, self.service_account_key, self.SCOPES
            )
            if drive_client is None:
                drive_client = GoogleDriveClient(self.folder_id, credentials)
            if sheets_client is None:
                sheets_client = GoogleSheetsClient(self.spreadsheet_id, credentials)
        return drive_client, sheets_client

    def persist(self, payload: WeeklyReportPayload, pdf_bytes: bytes) -> Optional[PersistResult]:
        """Upload the PDF and log the submission.

        Never raises: failures are logged and reported as ``None`` so that
        archiving can not affect the document already delivered to the user.
        """
        if self.dry_run:
            logger.info(f"Dry run: skipping archive of report for {payload.name}")
            return PersistResult(file_id=DRY_RUN_ID, web_view_link=DRY_RUN_ID)

        if not self.is_configured():
            logger.warning("Google credentials or IDs are missing. Skipping persistence.")
            return None

        try:
            drive_client, sheets_client = self._clients()
            file_name = build_report_filename(payload.name, payload.submission_date)
            uploaded = drive_client.upload_pdf(file_name, pdf_bytes)

            row = ReportLogRow.from_payload(payload, uploaded.web_view_link, uploaded.file_id)
            sheets_client.ensure_header_row(self.sheet_name)
            sheets_client.log_report(row, range_name=self.sheet_range)

            return PersistResult(file_id=uploaded.file_id, web_view_link=uploaded.web_view_link)
        except Exception:
            logger.exception("Failed to persist weekly report")
            return None
