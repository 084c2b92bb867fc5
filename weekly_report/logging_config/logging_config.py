import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_PREFIX = "weekly_report."
MAX_LOG_BYTES = 10_000_000  # 10MB
LOG_BACKUPS = 5


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _remove_own_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(app_name: str = "weekly-report", log_dir: str | None = None) -> None:
    """Configure application logging

    Safe to call more than once: handlers from an earlier call are replaced.

    Args:
        app_name: Name to use for log files
        log_dir: Directory for log files, defaults to $LOG_DIR or ./logs

    """
    log_dir_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    os.makedirs(log_dir_path, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    _remove_own_handlers(root_logger)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    handlers = {
        "console": console_handler,
        "file": _rotating_handler(log_dir_path / f"{app_name}.log", logging.INFO, formatter),
        # ERROR and above also go to their own file
        "errors": _rotating_handler(log_dir_path / f"{app_name}-error.log", logging.ERROR, formatter),
    }
    for name, handler in handlers.items():
        handler.set_name(f"{HANDLER_PREFIX}{name}")
        root_logger.addHandler(handler)
