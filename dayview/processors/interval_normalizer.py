# File: dayview/processors/interval_normalizer.py
"""
Interval normalization for the day-view layout.
Converts event instants into minute offsets and applies the one-hour visual floor.
"""

import datetime
from typing import Iterable, List, Optional, Tuple

from dayview.models import CalendarEvent, NormalizedEvent, DroppedEvent, LayoutConfig
from dayview.utils.logger import setup_logger
from dayview.utils.time_helpers import (
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    seconds_since_midnight,
    to_timezone,
)

logger = setup_logger(__name__)

SECONDS_PER_DAY = MINUTES_PER_DAY * 60


def _clamp_to_day(minute: int) -> int:
    return min(max(minute, 0), MINUTES_PER_DAY)


def normalize_event(
    event: CalendarEvent,
    index: int,
    config: LayoutConfig,
    day: Optional[datetime.date] = None
) -> Tuple[Optional[NormalizedEvent], Optional[DroppedEvent]]:
    """
    Normalize a single event.
    
    The one-hour floor is applied to the minute offsets themselves, so the
    packed interval always matches the block drawn for it.
    
    Returns:
        (normalized, None) when the event survives, (None, reason) otherwise
    """
    if event.start is None or event.end is None:
        missing = 'start' if event.start is None else 'end'
        return None, DroppedEvent(event.id, missing, f"Missing {missing} instant", index)
    
    if event.has_mixed_timezones():
        return None, DroppedEvent(
            event.id, 'timezone', "Start and end disagree on having a UTC offset", index
        )
    
    if event.end <= event.start:
        return None, DroppedEvent(
            event.id, 'duration', f"Non-positive duration ({event.start} - {event.end})", index
        )
    
    start = to_timezone(event.start, config.timezone)
    end = to_timezone(event.end, config.timezone)
    rendered_day = day if day is not None else start.date()
    
    start_second = seconds_since_midnight(start, rendered_day)
    end_second = seconds_since_midnight(end, rendered_day)
    if end_second <= 0 or start_second >= SECONDS_PER_DAY:
        return None, DroppedEvent(
            event.id, 'day', f"Does not touch {rendered_day.isoformat()}", index
        )
    
    start_minute = _clamp_to_day(start_second // 60)
    end_minute = _clamp_to_day(end_second // 60)
    
    # Layout-only widening; event.start/event.end stay untouched
    widened = False
    if end_minute - start_minute < MINUTES_PER_HOUR:
        end_minute = min(start_minute + MINUTES_PER_HOUR, MINUTES_PER_DAY)
        widened = True
    
    return NormalizedEvent(
        event=event,
        start_minute=start_minute,
        end_minute=end_minute,
        index=index,
        widened=widened,
    ), None


def normalize_events(
    events: Iterable[CalendarEvent],
    config: LayoutConfig,
    day: Optional[datetime.date] = None
) -> Tuple[List[NormalizedEvent], List[DroppedEvent]]:
    """
    Annotate events with minute offsets from midnight of the rendered day.
    
    Intervals shorter than one hour are widened to a one-hour footprint for
    layout purposes only. Events that cannot be placed on the rendered day
    are dropped rather than reported as errors.
    
    Args:
        events: Events of one day, in any order
        config: Layout configuration (supplies the display timezone)
        day: Date whose midnight anchors the offsets; defaults to each
             event's own start date
    
    Returns:
        Tuple of (normalized events in input order, dropped events)
    """
    normalized: List[NormalizedEvent] = []
    dropped: List[DroppedEvent] = []
    
    for index, event in enumerate(events):
        result, reason = normalize_event(event, index, config, day)
        if result is None:
            logger.debug(f"Dropping event: {reason}")
            dropped.append(reason)
            continue
        if result.widened:
            logger.debug(
                f"Widened short event '{event.id}' to {result.start_minute}-{result.end_minute}"
            )
        normalized.append(result)
    
    logger.debug(f"Normalized {len(normalized)} events ({len(dropped)} dropped)")
    return normalized, dropped
