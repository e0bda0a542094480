# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data for all tests.
"""

import os
import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

# Keep test runs from writing log files
os.environ.setdefault("DAYVIEW_LOG_DIR", "")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dayview.models import CalendarEvent, LayoutConfig


RENDER_DAY = date(2025, 11, 18)


def at(hhmm: str, day: date = RENDER_DAY) -> datetime:
    """Build a naive datetime on the render day from "HH:MM"."""
    hour, minute = (int(part) for part in hhmm.split(":"))
    return datetime(day.year, day.month, day.day, hour, minute)


# ==================== Configuration Fixtures ====================

@pytest.fixture
def render_day():
    """The day being rendered in most tests."""
    return RENDER_DAY


@pytest.fixture
def full_width_config():
    """Events fill their whole column."""
    return LayoutConfig(day_view_start_hour=0, minute_height_px=1.0, item_width_percent=100)


@pytest.fixture
def padded_config():
    """Events take 90% of their column."""
    return LayoutConfig(day_view_start_hour=0, minute_height_px=1.0, item_width_percent=90)


@pytest.fixture
def sample_config_dict():
    """Layout settings as they appear in a JSON file."""
    return {
        'dayViewStartHour': 6,
        'minuteHeightPx': 1.5,
        'itemWidthPercent': 95,
        'timezone': 'Europe/Amsterdam',
    }


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event():
    """Factory fixture for events on the render day."""
    def _create(
        event_id: str,
        start: str = "09:00",
        end: str = "10:00",
        **kwargs
    ) -> CalendarEvent:
        """Create an event from "HH:MM" strings (None leaves the instant unset)."""
        return CalendarEvent(
            id=event_id,
            title=kwargs.pop('title', f"Event {event_id}"),
            start=at(start) if start else None,
            end=at(end) if end else None,
            **kwargs
        )
    
    return _create


@pytest.fixture
def overlapping_events(make_event):
    """Three mutually overlapping events (clique of 3)."""
    return [
        make_event("long", "09:00", "12:00"),
        make_event("mid", "10:00", "11:00"),
        make_event("early", "09:30", "10:30"),
    ]


@pytest.fixture
def busy_day(make_event):
    """A realistic day: two clusters and a lone event."""
    return [
        make_event("standup", "09:00", "09:15"),
        make_event("planning", "09:00", "10:30"),
        make_event("one_on_one", "10:00", "11:00"),
        make_event("review", "10:30", "11:30"),
        make_event("lunch", "12:00", "13:00"),
        make_event("workshop", "14:00", "17:00"),
        make_event("call", "15:00", "15:30"),
        make_event("sync", "15:30", "16:30"),
    ]


# ==================== Helper Fixtures ====================

@pytest.fixture
def assert_layout_valid():
    """Helper function to validate a day's positioned events."""
    def _assert_valid(positioned, config: LayoutConfig):
        """Assert the structural layout invariants."""
        by_group = {}
        for placed in positioned:
            by_group.setdefault(placed.group_index, []).append(placed)
        
        for members in by_group.values():
            column_count = members[0].column_count
            assert all(m.column_count == column_count for m in members)
            assert column_count * members[0].column_width == pytest.approx(100)
            
            for i, a in enumerate(members):
                for b in members[i + 1:]:
                    if a.column == b.column:
                        assert a.end_minute <= b.start_minute or b.end_minute <= a.start_minute, \
                            f"{a.id} and {b.id} overlap in column {a.column}"
        
        for placed in positioned:
            assert placed.layout.height >= config.minute_height_px * 60
            assert placed.layout.top >= 0
            assert placed.layout.z_index == placed.column + 1
            assert placed.layout.right <= 100 + 1e-9
    
    return _assert_valid


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
