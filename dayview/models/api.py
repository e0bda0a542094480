# File: dayview/models/api.py
"""
Result and error models returned by the layout engine.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .layout import PositionedEvent


class LayoutConfigError(ValueError):
    """Raised when layout configuration values are out of range."""


@dataclass
class DroppedEvent:
    """Records why an event was left out of the layout."""
    event_id: str
    field: str
    message: str
    entry_index: Optional[int] = None
    
    def __str__(self) -> str:
        """String representation of the drop reason."""
        if self.entry_index is not None:
            return f"Entry {self.entry_index} ({self.event_id}) - {self.field}: {self.message}"
        return f"{self.event_id} - {self.field}: {self.message}"


@dataclass
class LayoutResult:
    """Outcome of laying out one day."""
    positioned: List[PositionedEvent] = field(default_factory=list)
    dropped: List[DroppedEvent] = field(default_factory=list)
    group_count: int = 0
    
    def is_empty(self) -> bool:
        """Check if nothing was placed."""
        return not self.positioned
    
    @property
    def max_columns(self) -> int:
        """Widest collision group of the day."""
        return max((p.column_count for p in self.positioned), default=0)
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'events': [p.to_dict() for p in self.positioned],
            'dropped': [
                {'id': d.event_id, 'field': d.field, 'message': d.message}
                for d in self.dropped
            ],
            'groupCount': self.group_count,
        }
