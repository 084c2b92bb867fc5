import re
from urllib.parse import quote


UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_name_for_filename(name: str) -> str:
    if not name:
        return ""
    return WHITESPACE_RUN.sub("_", UNSAFE_FILENAME_CHARS.sub("_", name))


def build_report_filename(name: str, date_iso: str) -> str:
    safe_name = sanitize_name_for_filename(name.strip()) or "noname"
    return f"週報_{safe_name}_{date_iso}.pdf"


def content_disposition(filename: str) -> str:
    """Attachment header that survives non-ASCII file names"""
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{encoded}\"; filename*=UTF-8''{encoded}"


def repeat_to_length(seed: str, limit: int) -> str:
    if not seed:
        return " " * limit
    repeats = -(-limit // len(seed))
    return (seed * repeats)[:limit]
