# File: dayview/processors/geometry_resolver.py
"""
Converts column assignments into pixel and percentage geometry.
"""

from typing import List

from dayview.models import (
    CollisionGroup,
    ColumnAssignment,
    LayoutBlock,
    LayoutConfig,
    NormalizedEvent,
    PositionedEvent,
)

FULL_WIDTH_PERCENT = 100.0


def resolve_block(
    event: NormalizedEvent,
    column: int,
    column_count: int,
    config: LayoutConfig
) -> LayoutBlock:
    """
    Compute the layout block of one event.
    
    The event is centered in its column slot and shrunk to
    `item_width_percent` of it; the remainder is the gutter. Heights never
    drop below one hour of grid.
    """
    column_width = FULL_WIDTH_PERCENT / column_count
    event_width = column_width * (config.item_width_percent / 100)
    left = column * column_width + (column_width - event_width) / 2
    
    top = max(0.0, (event.start_minute - config.day_view_start_minute) * config.minute_height_px)
    height = max(config.hour_height_px, event.span_minutes * config.minute_height_px)
    
    return LayoutBlock(
        top=top,
        height=height,
        left=left,
        width=event_width,
        z_index=column + 1,
    )


def resolve_geometry(
    group: CollisionGroup,
    assignment: ColumnAssignment,
    config: LayoutConfig,
    group_index: int = 0
) -> List[PositionedEvent]:
    """
    Lay out every member of one collision group.
    
    Only the group's own members and column count are consulted, so groups
    can be resolved independently.
    
    Returns:
        Positioned events in group order
    """
    if len(assignment.columns) != len(group):
        raise ValueError(
            f"Assignment covers {len(assignment.columns)} events, group has {len(group)}"
        )
    
    return [
        PositionedEvent(
            event=event.event,
            start_minute=event.start_minute,
            end_minute=event.end_minute,
            column=column,
            column_count=assignment.column_count,
            group_index=group_index,
            layout=resolve_block(event, column, assignment.column_count, config),
        )
        for event, column in zip(group, assignment.columns)
    ]
