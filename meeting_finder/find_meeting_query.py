"""
Meeting query engine.

Finds the windows of a single day in which a meeting can be held, first for
the mandatory attendees and then, when every optional attendee can also make
it, narrowed to the windows that work for everyone.
"""

import logging
from collections.abc import Collection, Sequence

from .busy_times import collect_busy_ranges
from .free_windows import find_free_windows
from .models import MINUTES_PER_DAY, WHOLE_DAY, Event, MeetingRequest, TimeRange

logger = logging.getLogger(__name__)


def window_intersections(
    mandatory: Sequence[TimeRange],
    optional: Sequence[TimeRange],
    duration: int,
) -> list[TimeRange]:
    """
    Intersect two window lists, keeping pieces of at least ``duration``.

    Both inputs are sorted and free of internal overlaps, so the result is
    sorted and non-overlapping as well.
    """
    intersections: list[TimeRange] = []
    for mandatory_window in mandatory:
        for optional_window in optional:
            if not mandatory_window.overlaps(optional_window):
                continue
            overlap = mandatory_window.get_overlap(optional_window)
            if overlap.duration >= duration:
                intersections.append(overlap)
    return intersections


def free_windows_for(attendees: Collection[str], events: Collection[Event], duration: int) -> list[TimeRange]:
    """Free windows of at least ``duration`` for everyone in ``attendees``."""
    busy = collect_busy_ranges(attendees, events)
    return find_free_windows(busy, duration)


class FindMeetingQuery:
    """Stateless entry point for meeting time queries."""

    def query(self, events: Collection[Event], request: MeetingRequest) -> list[TimeRange]:
        duration = request.duration

        if duration > MINUTES_PER_DAY:
            logger.debug(f"Requested {duration} minutes, longer than a day")
            return []

        if not events or not request.attendees:
            logger.debug("Nothing constrains the day, whole day is free")
            return [WHOLE_DAY]

        mandatory_windows = free_windows_for(request.attendees, events, duration)
        logger.debug(f"Mandatory attendees have {len(mandatory_windows)} window(s)")

        if not request.optional_attendees:
            return mandatory_windows

        optional_windows = free_windows_for(request.optional_attendees, events, duration)
        logger.debug(f"Optional attendees have {len(optional_windows)} window(s)")

        if not mandatory_windows:
            return optional_windows

        accommodating = window_intersections(mandatory_windows, optional_windows, duration)
        if accommodating:
            return accommodating

        logger.debug("Optional attendees cannot be accommodated, dropping them")
        return mandatory_windows


def find_meeting_times(events: Collection[Event], request: MeetingRequest) -> list[TimeRange]:
    """Convenience wrapper around :meth:`FindMeetingQuery.query`."""
    return FindMeetingQuery().query(events, request)
