# File: dayview/processors/collision_grouper.py
"""
Partitions normalized events into collision groups with a sweep line.
"""

from typing import Iterable, List

from dayview.models import CollisionGroup, NormalizedEvent
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def sort_normalized(events: Iterable[NormalizedEvent]) -> List[NormalizedEvent]:
    """Sort by start ascending, end descending, then input order."""
    return sorted(events, key=NormalizedEvent.sort_key)


def group_collisions(events: Iterable[NormalizedEvent]) -> List[CollisionGroup]:
    """
    Partition events into maximal clusters of overlapping events.
    
    Walks the sorted events keeping the current group's running maximum
    end minute. An event starting at or after that maximum opens a new
    group; otherwise it joins the current group and may extend the
    maximum. Touching intervals (end == next start) do not collide.
    
    Args:
        events: Normalized events in any order
    
    Returns:
        Collision groups ordered by their first start minute
    """
    groups: List[CollisionGroup] = []
    current: List[NormalizedEvent] = []
    running_max_end = None
    
    for event in sort_normalized(events):
        if current and event.start_minute < running_max_end:
            current.append(event)
            running_max_end = max(running_max_end, event.end_minute)
            continue
        
        if current:
            groups.append(CollisionGroup(tuple(current)))
        current = [event]
        running_max_end = event.end_minute
    
    if current:
        groups.append(CollisionGroup(tuple(current)))
    
    logger.debug(f"Grouped events into {len(groups)} collision groups")
    return groups
