# File: dayview/models/calendar.py

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from .common import parse_iso_datetime
from .enums import SpecialEventType

T = TypeVar("T")


@dataclass
class CalendarEvent(Generic[T]):
    """
    A calendar event as supplied by the caller.
    
    `payload` is owned by the caller and passed through the layout engine
    untouched. Construction never rejects an event: events without a usable
    interval are filtered out later by the interval normalizer.
    """
    id: str
    title: str = ""
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    payload: Optional[T] = None
    description: Optional[str] = None
    resource_id: Optional[str] = None
    color: Optional[str] = None
    event_type: Optional[SpecialEventType] = None
    is_all_day: bool = False
    
    def __post_init__(self):
        """Auto-convert ISO strings and enum values."""
        self.id = str(self.id)
        
        if self.start is not None and not isinstance(self.start, datetime):
            self.start = parse_iso_datetime(self.start)
        if self.end is not None and not isinstance(self.end, datetime):
            self.end = parse_iso_datetime(self.end)
        
        if isinstance(self.event_type, str):
            try:
                self.event_type = SpecialEventType(self.event_type)
            except ValueError:
                self.event_type = None
    
    def has_interval(self) -> bool:
        """Check that both instants are present."""
        return self.start is not None and self.end is not None
    
    def has_mixed_timezones(self) -> bool:
        """True when one instant carries a UTC offset and the other does not."""
        if not self.has_interval():
            return False
        return (self.start.utcoffset() is None) != (self.end.utcoffset() is None)
    
    def duration_minutes(self) -> Optional[int]:
        """
        Calculate event duration in minutes.
        
        None when an instant is missing or only one of them is timezone-aware.
        """
        if not self.has_interval() or self.has_mixed_timezones():
            return None
        return int((self.end - self.start).total_seconds() / 60)
    
    def overlaps_with(self, other: 'CalendarEvent') -> bool:
        """Check if this event overlaps with another."""
        if not (self.has_interval() and other.has_interval()):
            return False
        if (self.start.utcoffset() is None) != (other.start.utcoffset() is None):
            return False
        if self.has_mixed_timezones() or other.has_mixed_timezones():
            return False
        return self.start < other.end and self.end > other.start
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'id': self.id,
            'title': self.title,
            'start': self.start.isoformat() if self.start else None,
            'end': self.end.isoformat() if self.end else None,
            'description': self.description,
            'resourceId': self.resource_id,
            'color': self.color,
            'eventType': self.event_type.value if self.event_type else None,
            'isAllDay': self.is_all_day,
            'payload': self.payload,
        }


@dataclass(frozen=True)
class NormalizedEvent(Generic[T]):
    """
    An event annotated with minute offsets from midnight of the rendered day.
    
    `end_minute` may be later than the real end when the minimum-duration
    floor widened the event. `index` is the event's position in the input
    list and breaks ties deterministically.
    """
    event: CalendarEvent[T]
    start_minute: int
    end_minute: int
    index: int
    widened: bool = False
    
    def __post_init__(self):
        if self.end_minute <= self.start_minute:
            raise ValueError(
                f"Normalized event must end after it starts: {self.event.id} "
                f"({self.start_minute}-{self.end_minute})"
            )
    
    @property
    def span_minutes(self) -> int:
        return self.end_minute - self.start_minute
    
    def sort_key(self) -> Tuple[int, int, int]:
        """Start ascending, longer events first, then input order."""
        return (self.start_minute, -self.end_minute, self.index)
    
    def overlaps_with(self, other: 'NormalizedEvent') -> bool:
        """Half-open [start, end) intersection test."""
        return self.start_minute < other.end_minute and other.start_minute < self.end_minute


def event_from_dict(data: Dict[str, Any]) -> CalendarEvent:
    """
    Create CalendarEvent from dictionary.
    
    Accepts both snake_case and the camelCase keys used by calendar
    front-ends (startTime/endTime, from/to, resourceId, isAllDay).
    """
    def first(*keys, default=None):
        for key in keys:
            if data.get(key) is not None:
                return data[key]
        return default
    
    raw_all_day = str(first('is_all_day', 'isAllDay', default=False)).lower()
    
    return CalendarEvent(
        id=str(first('id', default='')),
        title=str(first('title', 'summary', default='')),
        start=first('start', 'startTime', 'start_time', 'from'),
        end=first('end', 'endTime', 'end_time', 'to'),
        payload=first('payload', 'metadata'),
        description=first('description'),
        resource_id=first('resource_id', 'resourceId'),
        color=first('color'),
        event_type=first('event_type', 'eventType'),
        is_all_day=raw_all_day in ['true', '1', 'yes', 'y', 't'],
    )
