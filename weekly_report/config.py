import os
from typing import Iterable, Mapping, Optional, TypedDict

from dotenv import load_dotenv

from .reports.limits import FieldLimits, load_field_limits


TRUTHY = {"1", "true", "yes", "on"}
PERSISTENCE_KEYS = (
    "GOOGLE_DRIVE_FOLDER_ID",
    "GOOGLE_SHEETS_ID",
    "GOOGLE_SERVICE_ACCOUNT_EMAIL",
    "GOOGLE_SERVICE_ACCOUNT_KEY",
)


class AppConfig(TypedDict):
    """Configuration for the application"""

    APP_NAME: str
    LOG_DIR: str
    HOST: str
    PORT: int
    GOOGLE_DRIVE_FOLDER_ID: Optional[str]
    GOOGLE_SHEETS_ID: Optional[str]
    GOOGLE_SERVICE_ACCOUNT_EMAIL: Optional[str]
    GOOGLE_SERVICE_ACCOUNT_KEY: Optional[str]
    GOOGLE_SHEETS_RANGE: str
    PERSIST_DRY_RUN: bool
    FIELD_LIMITS: FieldLimits


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Load configuration from environment variables"""
    if env is None:
        load_dotenv()
        env = os.environ

    return {
        "APP_NAME": env.get("APP_NAME", "weekly-report"),
        "LOG_DIR": env.get("LOG_DIR", "logs"),
        "HOST": env.get("HOST", "0.0.0.0"),
        "PORT": int(env.get("PORT", "8000")),
        "GOOGLE_DRIVE_FOLDER_ID": env.get("GOOGLE_DRIVE_FOLDER_ID"),
        "GOOGLE_SHEETS_ID": env.get("GOOGLE_SHEETS_ID"),
        "GOOGLE_SERVICE_ACCOUNT_EMAIL": env.get("GOOGLE_SERVICE_ACCOUNT_EMAIL"),
        "GOOGLE_SERVICE_ACCOUNT_KEY": env.get("GOOGLE_SERVICE_ACCOUNT_KEY"),
        "GOOGLE_SHEETS_RANGE": env.get("GOOGLE_SHEETS_RANGE", "A1"),
        "PERSIST_DRY_RUN": _flag(env.get("PERSIST_DRY_RUN")),
        "FIELD_LIMITS": load_field_limits(env),
    }


def require_config(config: Mapping[str, object], keys: Iterable[str]) -> None:
    missing = [k for k in keys if not config.get(k)]
    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")
