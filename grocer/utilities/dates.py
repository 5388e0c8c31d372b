"""ISO-8601 helpers for the persisted document shape."""
from datetime import date, datetime
from typing import Optional, Union


def parse_timestamp(value: Union[str, date, datetime, None]) -> Optional[datetime]:
    '''Parses an ISO timestamp (a trailing 'Z' is accepted). Returns None for empty values.'''
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()
