# File: dayview/models/layout.py

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Tuple

from .calendar import CalendarEvent, NormalizedEvent, T


@dataclass(frozen=True)
class CollisionGroup(Generic[T]):
    """
    A maximal cluster of overlapping events.
    
    Members are sorted by start minute, longer events first on ties.
    """
    events: Tuple[NormalizedEvent[T], ...]
    
    def __post_init__(self):
        if not self.events:
            raise ValueError("A collision group needs at least one event")
    
    def __len__(self) -> int:
        return len(self.events)
    
    def __iter__(self) -> Iterator[NormalizedEvent[T]]:
        return iter(self.events)
    
    @property
    def start_minute(self) -> int:
        return self.events[0].start_minute
    
    @property
    def max_end_minute(self) -> int:
        return max(e.end_minute for e in self.events)


@dataclass(frozen=True)
class ColumnAssignment:
    """Column index for each member of a collision group, in group order."""
    columns: Tuple[int, ...]
    column_count: int
    
    def __post_init__(self):
        if self.columns and max(self.columns) >= self.column_count:
            raise ValueError(
                f"Column index out of range for {self.column_count} columns"
            )


@dataclass(frozen=True)
class LayoutBlock:
    """Geometry for one event: pixels for top/height, percent for left/width."""
    top: float
    height: float
    left: float
    width: float
    z_index: int
    
    @property
    def bottom(self) -> float:
        return self.top + self.height
    
    @property
    def right(self) -> float:
        return self.left + self.width
    
    def to_dict(self) -> dict:
        """Convert to the key names a rendering layer expects."""
        return {
            'top': self.top,
            'height': self.height,
            'left': self.left,
            'width': self.width,
            'zIndex': self.z_index,
        }
    
    def to_css(self) -> dict:
        """Inline style values for an absolutely positioned element."""
        return {
            'top': f"{self.top:g}px",
            'height': f"{self.height:g}px",
            'left': f"{self.left:g}%",
            'width': f"{self.width:g}%",
            'z-index': str(self.z_index),
        }


@dataclass(frozen=True)
class PositionedEvent(Generic[T]):
    """An event together with its computed placement."""
    event: CalendarEvent[T]
    start_minute: int
    end_minute: int
    column: int
    column_count: int
    group_index: int
    layout: LayoutBlock
    
    @property
    def id(self) -> str:
        return self.event.id
    
    @property
    def payload(self) -> Optional[T]:
        return self.event.payload
    
    @property
    def column_width(self) -> float:
        return 100 / self.column_count
    
    def to_dict(self) -> dict:
        """Flatten for JSON serialization."""
        data = self.event.to_dict()
        data.update({
            'startMinute': self.start_minute,
            'endMinute': self.end_minute,
            'column': self.column,
            'columnCount': self.column_count,
            'group': self.group_index,
            'layout': self.layout.to_dict(),
        })
        return data
