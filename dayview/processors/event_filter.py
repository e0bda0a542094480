# File: dayview/processors/event_filter.py
"""
Event filtering for the calendar views.
Selects the events that belong on a given day or date range and separates
all-day events from the timed grid.
"""

import datetime
from typing import Iterable, List, Optional, Tuple

from dayview.models import CalendarEvent
from dayview.utils.logger import setup_logger
from dayview.utils.time_helpers import MINUTES_PER_DAY, to_timezone

logger = setup_logger(__name__)


def _local_dates(
    event: CalendarEvent,
    tz_name: Optional[str]
) -> Tuple[datetime.date, datetime.date]:
    start = to_timezone(event.start, tz_name)
    end = to_timezone(event.end, tz_name)
    end_date = end.date()
    # An end at midnight is exclusive: the event does not touch that day
    if end.time() == datetime.time(0, 0) and end_date > start.date():
        end_date -= datetime.timedelta(days=1)
    return start.date(), end_date


def _matches_resource(event: CalendarEvent, resource_id: Optional[str]) -> bool:
    return not resource_id or event.resource_id == resource_id


def events_for_date(
    events: Iterable[CalendarEvent],
    day: datetime.date,
    resource_id: Optional[str] = None,
    tz_name: Optional[str] = None
) -> List[CalendarEvent]:
    """
    Filter events occurring on a specific date.
    
    An event occurs on the date when it starts or ends on it, or starts
    before and ends after it. Events without both instants never match.
    
    Args:
        events: Candidate events
        day: Target date
        resource_id: Optional resource filter
        tz_name: Timezone in which dates are compared
    
    Returns:
        Matching events in input order
    """
    matching = []
    for event in events:
        if not event.has_interval() or not _matches_resource(event, resource_id):
            continue
        start_date, end_date = _local_dates(event, tz_name)
        if start_date <= day <= end_date:
            matching.append(event)
    return matching


def events_for_range(
    events: Iterable[CalendarEvent],
    start_day: datetime.date,
    end_day: datetime.date,
    resource_id: Optional[str] = None,
    tz_name: Optional[str] = None
) -> List[CalendarEvent]:
    """Filter events overlapping the inclusive date range [start_day, end_day]."""
    matching = []
    for event in events:
        if not event.has_interval() or not _matches_resource(event, resource_id):
            continue
        start_date, end_date = _local_dates(event, tz_name)
        if start_date <= end_day and end_date >= start_day:
            matching.append(event)
    return matching


def is_all_day(event: CalendarEvent) -> bool:
    """
    Check if an event is all-day.
    
    True when flagged, or when it starts exactly at midnight and lasts at
    least 24 hours.
    """
    if event.is_all_day:
        return True
    if not event.has_interval():
        return False
    
    start = event.start
    duration = event.duration_minutes()
    return (
        duration is not None
        and start.hour == 0
        and start.minute == 0
        and start.second == 0
        and duration >= MINUTES_PER_DAY
    )


def split_all_day(
    events: Iterable[CalendarEvent]
) -> Tuple[List[CalendarEvent], List[CalendarEvent]]:
    """
    Split events into (all_day_events, timed_events).
    
    Only timed events go through the day-view layout engine.
    """
    all_day_events: List[CalendarEvent] = []
    timed: List[CalendarEvent] = []
    
    for event in events:
        if is_all_day(event):
            all_day_events.append(event)
        else:
            timed.append(event)
    
    logger.debug(f"Split events: {len(all_day_events)} all-day, {len(timed)} timed")
    return all_day_events, timed


def sort_by_start(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    """Sort events by start instant; events without a start go last."""
    events = list(events)
    with_start = [e for e in events if e.start is not None]
    without_start = [e for e in events if e.start is None]
    return sorted(with_start, key=lambda e: e.start) + without_start
