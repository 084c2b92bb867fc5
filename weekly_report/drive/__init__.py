from .client import DriveError, GoogleDriveClient, UploadedFile


__all__ = ["DriveError", "GoogleDriveClient", "UploadedFile"]
