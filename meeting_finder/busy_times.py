"""
Busy-time collection for a group of attendees.

Reduces a calendar of events to the intervals during which at least one
member of a group is occupied. Overlapping and nested intervals are left
as-is; merging them is the job of the free-window sweep.
"""

from collections.abc import Collection, Iterable

from .models import ORDER_BY_END, ORDER_BY_START, Event, TimeRange


def is_attended_by(event: Event, attendees: Collection[str]) -> bool:
    """Check whether anyone in ``attendees`` takes part in ``event``."""
    return not event.attendees.isdisjoint(attendees)


def collect_busy_ranges(attendees: Collection[str], events: Iterable[Event]) -> list[TimeRange]:
    """
    Collect the distinct busy ranges of a group, sorted by start time.

    Args:
        attendees: Names of the attendees whose calendars matter
        events: All known events for the day

    Returns:
        Sorted list of distinct ranges where at least one attendee is busy
    """
    # Zero-length events block no time
    busy = {
        event.when
        for event in events
        if event.when.duration and is_attended_by(event, attendees)
    }

    # Ties on start are broken by end so the order is deterministic
    by_end = sorted(busy, key=ORDER_BY_END)
    return sorted(by_end, key=ORDER_BY_START)
