"""
Day-view event layout: places overlapping calendar events side by side.
"""

from dayview.models import (
    CalendarEvent,
    LayoutBlock,
    LayoutConfig,
    LayoutConfigError,
    LayoutResult,
    PositionedEvent,
    event_from_dict,
)
from dayview.core.layout_engine import DayLayoutEngine, layout_day_events

__version__ = "0.1.0"

__all__ = [
    "CalendarEvent",
    "LayoutBlock",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutResult",
    "PositionedEvent",
    "event_from_dict",
    "DayLayoutEngine",
    "layout_day_events",
]
