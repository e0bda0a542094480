# File: dayview/models/config.py
"""
Data models for day-view layout configuration.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import pytz

from .api import LayoutConfigError

_KEY_ALIASES = (
    ('day_view_start_hour', 'dayViewStartHour'),
    ('minute_height_px', 'minuteHeightPx'),
    ('item_width_percent', 'itemWidthPercent'),
    ('timezone', 'timezone'),
)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Geometry options for one day column.
    
    Degenerate values raise LayoutConfigError instead of being clamped.
    """
    day_view_start_hour: int = 0
    minute_height_px: float = 1.0
    item_width_percent: float = 90.0
    timezone: Optional[str] = None
    
    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.day_view_start_hour, bool) or not isinstance(self.day_view_start_hour, int):
            raise LayoutConfigError(
                f"day_view_start_hour must be an integer, got {self.day_view_start_hour!r}"
            )
        if not 0 <= self.day_view_start_hour <= 23:
            raise LayoutConfigError(
                f"day_view_start_hour must be between 0 and 23, got {self.day_view_start_hour}"
            )
        if not self.minute_height_px > 0:
            raise LayoutConfigError(
                f"minute_height_px must be positive, got {self.minute_height_px}"
            )
        if not 0 <= self.item_width_percent <= 100:
            raise LayoutConfigError(
                f"item_width_percent must be between 0 and 100, got {self.item_width_percent}"
            )
        if self.timezone:
            try:
                pytz.timezone(self.timezone)
            except pytz.UnknownTimeZoneError as e:
                raise LayoutConfigError(f"Unknown timezone: {self.timezone}") from e
    
    @property
    def day_view_start_minute(self) -> int:
        """Minute offset of the grid's top edge."""
        return self.day_view_start_hour * 60
    
    @property
    def hour_height_px(self) -> float:
        """Pixel height of one hour, also the minimum event height."""
        return self.minute_height_px * 60
    
    def to_dict(self) -> dict:
        return {
            'dayViewStartHour': self.day_view_start_hour,
            'minuteHeightPx': self.minute_height_px,
            'itemWidthPercent': self.item_width_percent,
            'timezone': self.timezone,
        }
    
    @staticmethod
    def settings_from_dict(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Collect the layout keys present in `data` under their snake_case names.
        
        camelCase spellings (as written in JSON files) are accepted; when
        both are present the snake_case value wins. Missing and null values
        are left out so the result can be merged over defaults.
        """
        settings = {}
        for snake, camel in _KEY_ALIASES:
            for key in (snake, camel):
                if data.get(key) is not None:
                    settings[snake] = data[key]
                    break
        return settings
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LayoutConfig':
        """Create LayoutConfig from dictionary (e.g., loaded from JSON)."""
        settings = {
            'day_view_start_hour': 0,
            'minute_height_px': 1.0,
            'item_width_percent': 90.0,
            'timezone': None,
        }
        settings.update(cls.settings_from_dict(data))
        
        try:
            return cls(
                day_view_start_hour=int(settings['day_view_start_hour']),
                minute_height_px=float(settings['minute_height_px']),
                item_width_percent=float(settings['item_width_percent']),
                timezone=settings['timezone'],
            )
        except LayoutConfigError:
            raise
        except (TypeError, ValueError) as e:
            raise LayoutConfigError(f"Invalid layout configuration: {e}") from e
