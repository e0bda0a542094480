# File: dayview/models/common.py

from datetime import date, datetime
from typing import Optional, Union

DATE_ONLY_FORMAT = "%Y-%m-%d"


def parse_iso_datetime(value: Union[str, date, None]) -> Optional[datetime]:
    """
    Best-effort conversion of an event instant to a datetime.
    
    Accepts datetimes (returned as-is), dates (midnight), and ISO strings
    with a trailing 'Z' or a numeric offset. Anything unreadable gives None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    
    text = str(value).strip()
    if not text:
        return None
    if text.endswith(('Z', 'z')):
        # fromisoformat only accepts 'Z' from 3.11 on
        text = text[:-1] + '+00:00'
    
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.strptime(text[:10], DATE_ONLY_FORMAT) if len(text) == 10 else None
    except ValueError:
        return None
