# File: dayview/models/enums.py

from enum import Enum


class TimeFormat(Enum):
    """Clock format for time labels."""
    H12 = "12h"  # 1:00 PM
    H24 = "24h"  # 13:00


class SpecialEventType(Enum):
    """Event categories that carry a fixed color regardless of resource."""
    DAY_OFF = "day-off"
    ANNUAL_LEAVE = "annual-leave"
    SICK_LEAVE = "sick-leave"
    PERSONAL_LEAVE = "personal-leave"
    TRAINING = "training"
    MEETING = "meeting"
    MAINTENANCE = "maintenance"
    HOLIDAY = "holiday"
    OVERTIME = "overtime"
    VACATION = "vacation"
