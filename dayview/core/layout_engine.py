# File: dayview/core/layout_engine.py
"""
Day-view layout engine.
Runs the layout pipeline for one day, or for several independent days.

Pipeline Steps:
    1. Normalize intervals (minute offsets, one-hour floor)
    2. Group collisions (sweep line)
    3. Pack columns (first fit)
    4. Resolve geometry (pixels and percentages)
"""

import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from dayview.core.config_manager import Config
from dayview.models import CalendarEvent, LayoutConfig, LayoutResult, PositionedEvent
from dayview.processors.interval_normalizer import normalize_events
from dayview.processors.collision_grouper import group_collisions
from dayview.processors.column_packer import pack_columns
from dayview.processors.geometry_resolver import resolve_geometry
from dayview.processors.event_filter import events_for_date, split_all_day
from dayview.utils.logger import setup_logger
from dayview.utils.time_helpers import week_dates

logger = setup_logger(__name__)


class DayLayoutEngine:
    """
    Lays out the timed events of a day view.
    
    The engine holds only its configuration; every call recomputes the
    layout from the events it is given and keeps no reference to them.
    """
    
    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize the engine.
        
        Args:
            config: Layout configuration; defaults to Config's environment values
        """
        self.config = config or Config.default_layout_config()
    
    def run_day(
        self,
        events: Iterable[CalendarEvent],
        day: Optional[datetime.date] = None
    ) -> LayoutResult:
        """
        Execute the full layout pipeline for one day.
        
        Args:
            events: The day's events, in any order
            day: Rendered date; defaults to each event's own start date
        
        Returns:
            LayoutResult with positioned events (group order, then start
            order) and the events that were dropped
        """
        normalized, dropped = normalize_events(events, self.config, day)
        
        if dropped:
            logger.warning(f"Dropped {len(dropped)} events without a usable interval")
            for reason in dropped:
                logger.debug(f"  - {reason}")
        
        groups = group_collisions(normalized)
        
        positioned: List[PositionedEvent] = []
        for group_index, group in enumerate(groups):
            assignment = pack_columns(group)
            positioned.extend(
                resolve_geometry(group, assignment, self.config, group_index)
            )
        
        logger.info(
            f"Laid out {len(positioned)} events in {len(groups)} groups"
            + (f" for {day.isoformat()}" if day else "")
        )
        return LayoutResult(positioned=positioned, dropped=dropped, group_count=len(groups))
    
    def layout_day(
        self,
        events: Iterable[CalendarEvent],
        day: Optional[datetime.date] = None
    ) -> List[PositionedEvent]:
        """Lay out one day and return only the positioned events."""
        return self.run_day(events, day).positioned
    
    def layout_days(
        self,
        events_by_day: Mapping[datetime.date, Iterable[CalendarEvent]]
    ) -> Dict[datetime.date, LayoutResult]:
        """
        Lay out several days independently.
        
        Days never influence each other, so callers may equally run
        `run_day` per date in parallel.
        """
        return {
            day: self.run_day(day_events, day)
            for day, day_events in events_by_day.items()
        }
    
    def layout_week(
        self,
        events: Iterable[CalendarEvent],
        anchor_date: datetime.date,
        first_day_of_week: int = Config.FIRST_DAY_OF_WEEK
    ) -> Dict[datetime.date, LayoutResult]:
        """
        Lay out the timed events of the week containing `anchor_date`.
        
        All-day events are left out of the timed grid. An event spanning
        midnight appears on each day it touches, clipped to that day.
        """
        _, timed = split_all_day(list(events))
        
        events_by_day = {
            day: events_for_date(timed, day, tz_name=self.config.timezone)
            for day in week_dates(anchor_date, first_day_of_week)
        }
        return self.layout_days(events_by_day)


def layout_day_events(
    events: Iterable[CalendarEvent],
    config: Optional[LayoutConfig] = None,
    day: Optional[datetime.date] = None
) -> List[PositionedEvent]:
    """Convenience wrapper: lay out one day's events with a fresh engine."""
    return DayLayoutEngine(config).layout_day(events, day)
