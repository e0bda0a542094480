# File: dayview/utils/time_helpers.py
"""
Temporal helpers for the day view.

Decomposes instants into minute-of-day offsets, formats times and
durations for display, and builds the grid's time slots and week dates.
"""

import datetime
from dataclasses import dataclass
from typing import List, Optional, Union

import pytz

from dayview.models.common import parse_iso_datetime
from dayview.models.enums import TimeFormat

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


@dataclass(frozen=True)
class TimeSlot:
    """One row of the day view's time column."""
    hour: int
    minute: int
    label: str


def to_timezone(dt: datetime.datetime, tz_name: Optional[str]) -> datetime.datetime:
    """
    Convert an aware datetime to the given timezone.
    
    Naive datetimes are treated as already expressed in local wall time and
    are returned unchanged, as is everything when no timezone is given.
    """
    if not tz_name or dt.tzinfo is None:
        return dt
    return dt.astimezone(pytz.timezone(tz_name))


def minutes_since_midnight(
    dt: datetime.datetime,
    day: Optional[datetime.date] = None
) -> int:
    """
    Whole minutes elapsed between midnight of `day` and `dt`.
    
    When `day` is omitted the instant's own date is used, which reduces to
    ``dt.hour * 60 + dt.minute``. Seconds are truncated. Instants on other
    days yield values below 0 or above 1440; callers clamp as needed.
    """
    minute_of_day = dt.hour * MINUTES_PER_HOUR + dt.minute
    if day is None:
        return minute_of_day
    day_offset = (dt.date() - day).days
    return day_offset * MINUTES_PER_DAY + minute_of_day


def seconds_since_midnight(
    dt: datetime.datetime,
    day: Optional[datetime.date] = None
) -> int:
    """Whole seconds elapsed between midnight of `day` (or the instant's date) and `dt`."""
    second_of_day = (dt.hour * MINUTES_PER_HOUR + dt.minute) * 60 + dt.second
    if day is None:
        return second_of_day
    return (dt.date() - day).days * MINUTES_PER_DAY * 60 + second_of_day


def format_time(value: Union[datetime.datetime, datetime.time, str], time_format: TimeFormat = TimeFormat.H24) -> str:
    """
    Format a time for display.
    
    Args:
        value: datetime, time or ISO string
        time_format: TimeFormat.H24 ("13:05") or TimeFormat.H12 ("1:05 PM")
    
    Returns:
        Formatted time string, or "" when the value cannot be parsed
    """
    if isinstance(value, str):
        value = parse_iso_datetime(value)
        if value is None:
            return ""
    
    if isinstance(time_format, str):
        time_format = TimeFormat(time_format)
    
    if time_format == TimeFormat.H12:
        hour12 = value.hour % 12 or 12
        suffix = "AM" if value.hour < 12 else "PM"
        return f"{hour12}:{value.minute:02d} {suffix}"
    return f"{value.hour:02d}:{value.minute:02d}"


def format_duration(
    start: Optional[datetime.datetime],
    end: Optional[datetime.datetime]
) -> str:
    """
    Human-readable duration between two instants (e.g. "1h 30m").
    
    Always uses the real instants, never the widened layout interval.
    Returns "" when the span cannot be computed or is not positive.
    """
    if start is None or end is None:
        return ""
    if (start.utcoffset() is None) != (end.utcoffset() is None):
        return ""
    
    diff_minutes = int((end - start).total_seconds() / 60)
    if diff_minutes <= 0:
        return ""
    
    hours, minutes = divmod(diff_minutes, MINUTES_PER_HOUR)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    return " ".join(parts)


def generate_time_slots(
    start_hour: int = 0,
    end_hour: int = 24,
    slot_minutes: int = 60,
    time_format: TimeFormat = TimeFormat.H24
) -> List[TimeSlot]:
    """Build the labelled rows of the time column between two hours."""
    if slot_minutes <= 0:
        raise ValueError(f"slot_minutes must be positive, got {slot_minutes}")
    
    total_minutes = (end_hour - start_hour) * MINUTES_PER_HOUR
    slots: List[TimeSlot] = []
    
    for offset in range(0, max(total_minutes, 0), slot_minutes):
        hour = start_hour + offset // MINUTES_PER_HOUR
        minute = offset % MINUTES_PER_HOUR
        label = format_time(datetime.time(hour % 24, minute), time_format)
        slots.append(TimeSlot(hour=hour, minute=minute, label=label))
    
    return slots


def week_start(day: datetime.date, first_day_of_week: int = 1) -> datetime.date:
    """
    First day of the week containing `day`.
    
    `first_day_of_week` uses 0 = Sunday ... 6 = Saturday.
    """
    # date.weekday() is Monday=0; shift to Sunday=0
    day_of_week = (day.weekday() + 1) % 7
    days_to_subtract = (day_of_week - first_day_of_week + 7) % 7
    return day - datetime.timedelta(days=days_to_subtract)


def week_dates(day: datetime.date, first_day_of_week: int = 1) -> List[datetime.date]:
    """The seven dates of the week containing `day`."""
    start = week_start(day, first_day_of_week)
    return [start + datetime.timedelta(days=i) for i in range(7)]


def current_time_position(
    now: datetime.datetime,
    start_hour: int = 0,
    end_hour: int = 24
) -> float:
    """
    Position of `now` as a percentage of the visible hours.
    
    Returns -1 when `now` falls outside [start_hour, end_hour).
    """
    if now.hour < start_hour or now.hour >= end_hour:
        return -1
    
    total_minutes = (end_hour - start_hour) * MINUTES_PER_HOUR
    current_minutes = (now.hour - start_hour) * MINUTES_PER_HOUR + now.minute
    return current_minutes / total_minutes * 100
