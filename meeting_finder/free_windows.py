"""
Free-window derivation.

Turns a start-ordered sequence of busy ranges into the complementary windows
of the day that are long enough to hold a meeting.
"""

from collections.abc import Iterable

from .models import MINUTES_PER_DAY, START_OF_DAY, TimeRange


def find_free_windows(busy: Iterable[TimeRange], duration: int) -> list[TimeRange]:
    """
    Sweep the busy ranges and return the free windows of at least ``duration``.

    The busy ranges must be sorted by start. They may overlap, touch or be
    nested inside each other.

    Args:
        busy: Busy ranges ordered by start time
        duration: Minimum length of a returned window, in minutes

    Returns:
        Maximal free windows in start order
    """
    if duration > MINUTES_PER_DAY:
        return []

    windows: list[TimeRange] = []
    # End of the busy region swept so far
    cursor = START_OF_DAY

    for busy_range in busy:
        if busy_range.start <= cursor:
            cursor = max(cursor, busy_range.end)
            continue

        gap = busy_range.start - cursor
        if gap >= duration:
            windows.append(TimeRange.from_start_end(cursor, busy_range.start, inclusive=False))
        cursor = busy_range.end

    remaining = MINUTES_PER_DAY - cursor
    if remaining > 0 and remaining >= duration:
        windows.append(TimeRange.from_start_end(cursor, MINUTES_PER_DAY, inclusive=False))

    return windows
