# File: dayview/processors/column_packer.py
"""
First-fit column packing within a collision group.
"""

from typing import List

from dayview.models import CollisionGroup, ColumnAssignment
from dayview.utils.logger import setup_logger

logger = setup_logger(__name__)


def pack_columns(group: CollisionGroup) -> ColumnAssignment:
    """
    Assign each member of a group to the leftmost free column.
    
    Columns are scanned in index order; an event fits a column when the
    column's last event ends at or before the event starts, so back-to-back
    events share a lane. With members sorted by start this greedy pass uses
    exactly as many columns as the largest set of mutually overlapping
    events.
    
    Args:
        group: Collision group, members sorted by start
    
    Returns:
        ColumnAssignment with one column index per member, in group order
    """
    column_ends: List[int] = []
    columns: List[int] = []
    
    for event in group:
        for col_index, last_end in enumerate(column_ends):
            if last_end <= event.start_minute:
                column_ends[col_index] = event.end_minute
                columns.append(col_index)
                break
        else:
            columns.append(len(column_ends))
            column_ends.append(event.end_minute)
    
    logger.debug(
        f"Packed group starting at minute {group.start_minute}: "
        f"{len(group)} events into {len(column_ends)} columns"
    )
    return ColumnAssignment(columns=tuple(columns), column_count=len(column_ends))
