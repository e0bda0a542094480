# File: dayview/services/color_registry.py
"""
Color assignment for calendar resources and special events.

Colors are passed to the renderer as event payload; the layout engine never
reads them. Each ColorRegistry owns its own cache, so callers control its
lifecycle (create, populate, clear) instead of sharing process-wide state.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Union

from dayview.models import CalendarEvent, SpecialEventType
from dayview.utils.logger import LoggerMixin

DEFAULT_EVENT_COLOR = '#6b7280'  # Gray

DEFAULT_SPECIAL_EVENT_COLORS: Dict[SpecialEventType, str] = {
    SpecialEventType.DAY_OFF: '#ef4444',         # Red
    SpecialEventType.ANNUAL_LEAVE: '#3b82f6',    # Blue
    SpecialEventType.SICK_LEAVE: '#f59e0b',      # Amber
    SpecialEventType.PERSONAL_LEAVE: '#8b5cf6',  # Violet
    SpecialEventType.TRAINING: '#10b981',        # Emerald
    SpecialEventType.MEETING: '#6366f1',         # Indigo
    SpecialEventType.MAINTENANCE: '#f97316',     # Orange
    SpecialEventType.HOLIDAY: '#ec4899',         # Pink
    SpecialEventType.OVERTIME: '#84cc16',        # Lime
    SpecialEventType.VACATION: '#06b6d4',        # Cyan
}

RESOURCE_COLOR_PALETTE: List[str] = [
    '#3b82f6',  # Blue
    '#10b981',  # Emerald
    '#f59e0b',  # Amber
    '#8b5cf6',  # Violet
    '#ef4444',  # Red
    '#06b6d4',  # Cyan
    '#84cc16',  # Lime
    '#f97316',  # Orange
    '#ec4899',  # Pink
    '#6366f1',  # Indigo
    '#14b8a6',  # Teal
    '#f43f5e',  # Rose
    '#a855f7',  # Purple
    '#22c55e',  # Green
    '#eab308',  # Yellow
    '#0ea5e9',  # Sky
]


def string_hash(value: str) -> int:
    """
    Signed 32-bit ``h * 31 + code_unit`` hash over UTF-16 code units.
    
    Matches the hash browsers compute for the same id, so a resource keeps
    its color across front-end and back-end rendering.
    """
    encoded = value.encode('utf-16-le')
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + code_unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


class ColorRegistry(LoggerMixin):
    """Consistent color assignment per resource id."""
    
    def __init__(
        self,
        palette: Optional[List[str]] = None,
        special_colors: Optional[Mapping[Union[SpecialEventType, str], str]] = None,
        default_color: str = DEFAULT_EVENT_COLOR
    ):
        """
        Initialize the registry.
        
        Args:
            palette: Colors to hash resource ids into
            special_colors: Overrides for special event type colors
            default_color: Color for events with nothing to go on
        """
        self.palette = list(palette) if palette is not None else list(RESOURCE_COLOR_PALETTE)
        if not self.palette:
            raise ValueError("Color palette cannot be empty")
        
        self.special_colors: Dict[SpecialEventType, str] = dict(DEFAULT_SPECIAL_EVENT_COLORS)
        for key, color in (special_colors or {}).items():
            self.special_colors[SpecialEventType(key) if isinstance(key, str) else key] = color
        
        self.default_color = default_color
        self._cache: Dict[str, str] = {}
    
    def color_for(self, resource_id: str) -> str:
        """Get the cached or hashed color for a resource."""
        resource_id = str(resource_id)
        if resource_id not in self._cache:
            index = abs(string_hash(resource_id)) % len(self.palette)
            self._cache[resource_id] = self.palette[index]
        return self._cache[resource_id]
    
    def assign(self, resource_id: str, color: str) -> None:
        """Pin an explicit color for a resource."""
        self._cache[str(resource_id)] = color
    
    def special_color(self, event_type: Union[SpecialEventType, str]) -> str:
        """Color for a special event type."""
        if isinstance(event_type, str):
            event_type = SpecialEventType(event_type)
        return self.special_colors[event_type]
    
    def event_color(
        self,
        event: CalendarEvent,
        resource_colors: Optional[Mapping[str, Optional[str]]] = None
    ) -> str:
        """
        Pick an event's color.
        
        Priority:
            1. Explicit event color
            2. Special event type color
            3. Resource's configured color
            4. Hashed resource color
            5. Default gray
        """
        if event.color:
            return event.color
        
        if event.event_type:
            return self.special_color(event.event_type)
        
        if event.resource_id:
            configured = (resource_colors or {}).get(event.resource_id)
            if configured:
                return configured
            return self.color_for(event.resource_id)
        
        return self.default_color
    
    def assign_resource_colors(
        self,
        resources: Iterable[Mapping[str, Optional[str]]]
    ) -> List[dict]:
        """
        Fill in a color for every resource that lacks one.
        
        Args:
            resources: Resource dicts with at least an 'id' key
        
        Returns:
            Copies of the resources, each with a 'color'
        """
        assigned = []
        for resource in resources:
            updated = dict(resource)
            if not updated.get('color'):
                updated['color'] = self.color_for(updated['id'])
            assigned.append(updated)
        return assigned
    
    def snapshot(self) -> Dict[str, str]:
        """Copy of the current resource → color assignments."""
        return dict(self._cache)
    
    def clear(self) -> None:
        """Forget all cached assignments."""
        self.logger.debug(f"Clearing {len(self._cache)} cached resource colors")
        self._cache.clear()
    
    def __len__(self) -> int:
        return len(self._cache)
