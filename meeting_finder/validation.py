"""
Sanity checks for computed meeting windows.

Validates that a list of windows satisfies the guarantees of the query
engine without recomputing it. Used by the CLI after every query.
"""

from collections.abc import Collection, Sequence

from .busy_times import collect_busy_ranges
from .free_windows import find_free_windows
from .models import WHOLE_DAY, Event, MeetingRequest, TimeRange
from .schedule_printer import format_range


class WindowViolation(Exception):
    """Raised when a meeting window breaks a scheduling guarantee."""

    pass


def validate_windows(
    windows: Sequence[TimeRange],
    events: Collection[Event],
    request: MeetingRequest,
) -> None:
    """
    Validate that meeting windows fit the day, the request and the calendar.

    Args:
        windows: Windows returned for ``request``
        events: Events the windows were computed from
        request: The meeting request

    Raises:
        WindowViolation: If any guarantee is violated
    """
    _validate_shape(windows, request.duration)
    _validate_attendees_free(windows, events, request.attendees, request.duration)


def _validate_shape(windows: Sequence[TimeRange], duration: int) -> None:
    """Check day bounds, minimum length, ordering and overlaps."""
    for window in windows:
        if not WHOLE_DAY.contains(window):
            raise WindowViolation(f"Window {format_range(window)} lies outside the day")
        if window.duration < duration:
            raise WindowViolation(
                f"Window {format_range(window)} is shorter than the requested {duration} minutes"
            )

    for current, following in zip(windows, windows[1:]):
        if following.start < current.start:
            raise WindowViolation(
                f"Windows out of order: {format_range(following)} comes after {format_range(current)}"
            )
        if current.overlaps(following):
            raise WindowViolation(
                f"Window {format_range(current)} overlaps {format_range(following)}"
            )


def _validate_attendees_free(
    windows: Sequence[TimeRange],
    events: Collection[Event],
    attendees: Collection[str],
    duration: int,
) -> None:
    """Check that no mandatory attendee is busy during any window.

    When the mandatory attendees have no common window at all, the engine
    falls back to the optional attendees' windows and there is nothing to check.
    """
    if not attendees:
        return

    busy = collect_busy_ranges(attendees, events)
    if not find_free_windows(busy, duration):
        return

    for window in windows:
        for busy_range in busy:
            if window.overlaps(busy_range):
                raise WindowViolation(
                    f"Window {format_range(window)} conflicts with busy time {format_range(busy_range)}"
                )


def validate_and_report(
    windows: Sequence[TimeRange],
    events: Collection[Event],
    request: MeetingRequest,
) -> tuple[bool, list[str]]:
    """
    Validate windows and return a report instead of raising.

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    try:
        validate_windows(windows, events, request)
        return (True, [])
    except WindowViolation as e:
        return (False, [str(e)])
