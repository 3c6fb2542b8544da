import re
from datetime import date

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def is_valid_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value or ""):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True

def sanitize_name(text: str, max_length: int = 200) -> str:
    if text is None:
        return ""
    t = str(text).strip()
    if len(t) > max_length:
        return t[:max_length]
    return t
