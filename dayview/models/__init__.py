from .enums import TimeFormat, SpecialEventType
from .common import parse_iso_datetime
from .calendar import CalendarEvent, NormalizedEvent, event_from_dict
from .layout import CollisionGroup, ColumnAssignment, LayoutBlock, PositionedEvent
from .api import LayoutConfigError, DroppedEvent, LayoutResult
from .config import LayoutConfig

__all__ = [
    "TimeFormat",
    "SpecialEventType",
    "parse_iso_datetime",
    "CalendarEvent",
    "NormalizedEvent",
    "event_from_dict",
    "CollisionGroup",
    "ColumnAssignment",
    "LayoutBlock",
    "PositionedEvent",
    "LayoutConfigError",
    "DroppedEvent",
    "LayoutResult",
    "LayoutConfig"
]
