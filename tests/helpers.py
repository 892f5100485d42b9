"""
Shared constants and builders for meeting finder tests.
"""
from meeting_finder.models import Event, TimeRange, get_time_in_minutes

PERSON_A = "Person A"
PERSON_B = "Person B"
PERSON_C = "Person C"

TIME_0800AM = get_time_in_minutes(8, 0)
TIME_0830AM = get_time_in_minutes(8, 30)
TIME_0900AM = get_time_in_minutes(9, 0)
TIME_0930AM = get_time_in_minutes(9, 30)
TIME_1000AM = get_time_in_minutes(10, 0)
TIME_1100AM = get_time_in_minutes(11, 0)

DURATION_15_MINUTES = 15
DURATION_30_MINUTES = 30
DURATION_60_MINUTES = 60
DURATION_90_MINUTES = 90
DURATION_1_HOUR = 60


def make_event(title: str, start: int, end: int, *attendees: str) -> Event:
    """Build an event over [start, end) for the given attendees."""
    return Event(title, TimeRange.from_start_end(start, end, inclusive=False), frozenset(attendees))
