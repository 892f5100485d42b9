from .models import (
    END_OF_DAY,
    MINUTES_PER_DAY,
    ORDER_BY_END,
    ORDER_BY_START,
    START_OF_DAY,
    WHOLE_DAY,
    Event,
    MeetingRequest,
    TimeRange,
    get_time_in_minutes,
)
from .busy_times import collect_busy_ranges
from .free_windows import find_free_windows
from .find_meeting_query import FindMeetingQuery, find_meeting_times, window_intersections
from .validation import WindowViolation, validate_windows

__all__ = [
    "END_OF_DAY",
    "Event",
    "FindMeetingQuery",
    "MINUTES_PER_DAY",
    "MeetingRequest",
    "ORDER_BY_END",
    "ORDER_BY_START",
    "START_OF_DAY",
    "TimeRange",
    "WHOLE_DAY",
    "WindowViolation",
    "collect_busy_ranges",
    "find_free_windows",
    "find_meeting_times",
    "get_time_in_minutes",
    "validate_windows",
    "window_intersections",
]
