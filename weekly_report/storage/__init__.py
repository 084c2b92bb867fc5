from .archiver import PersistResult, ReportArchiver, build_service_account_credentials


__all__ = ["PersistResult", "ReportArchiver", "build_service_account_credentials"]
