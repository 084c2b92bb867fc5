import io
import logging
from dataclasses import dataclass
from typing import Optional

from google.api_core import retry
from googleapiclient.discovery import build
from googleapiclient.http import MediaIoBaseUpload

from ..reports.errors import PersistenceError


logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


class DriveError(PersistenceError):
    """Custom exception for drive-related errors"""

    pass


@dataclass(frozen=True)
class UploadedFile:
    file_id: Optional[str]
    web_view_link: Optional[str]


class GoogleDriveClient:
    """Uploads rendered reports into a Drive folder"""

    SCOPES = ["https://www.googleapis.com/auth/drive.file"]

    def __init__(self, folder_id: str, credentials, service=None):
        self.folder_id = folder_id
        self.credentials = credentials
        self.service = service or self._build_drive_service()

    def _build_drive_service(self):
        """Create and return an authorized Drive API service object"""
        try:
            return build("drive", "v3", credentials=self.credentials, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build drive service: {e}")
            raise DriveError(f"Could not initialize drive service: {str(e)}")

    @staticmethod
    def view_link(file_id: str) -> str:
        return f"https://drive.google.com/file/d/{file_id}/view"

    @retry.Retry()
    def upload_pdf(self, file_name: str, content: bytes) -> UploadedFile:
        """Upload PDF bytes to the configured folder"""
        metadata = {
            "name": file_name,
            "parents": [self.folder_id],
            "mimeType": PDF_MIME_TYPE,
        }
        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=PDF_MIME_TYPE)
        try:
            result = (
                self.service.files()
                .create(body=metadata, media_body=media, fields="id, webViewLink")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error uploading {file_name}: {e}")
            raise DriveError(f"Failed to upload {file_name}: {str(e)}")

        file_id = result.get("id")
        link = result.get("webViewLink") or (self.view_link(file_id) if file_id else None)
        logger.info(f"Uploaded {file_name} to Drive as {file_id}")
        return UploadedFile(file_id=file_id, web_view_link=link)
