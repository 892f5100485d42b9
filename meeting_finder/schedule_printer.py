"""
Schedule printing and formatting utilities.

This module contains functions for formatting and printing free meeting
windows and busy ranges in a readable format with emojis and clock times.
"""

from collections.abc import Sequence

from .models import TimeRange


def format_minutes(minutes: int) -> str:
    """Format a day-minute offset as HH:MM (the end of the day is 24:00)."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_range(time_range: TimeRange) -> str:
    return f"{format_minutes(time_range.start)}-{format_minutes(time_range.end)}"


def format_windows_for_printing(windows: Sequence[TimeRange]) -> str:
    """Format free windows one per line in start order."""
    if not windows:
        return "No available time slots"

    lines: list[str] = []
    lines.append(f"Available windows: {len(windows)}")
    lines.append("-" * 40)
    for window in windows:
        lines.append(f"🟢 {format_range(window)} ({window.duration} min)")
    return "\n".join(lines)


def format_busy_for_printing(busy: Sequence[TimeRange]) -> str:
    if not busy:
        return "No busy time"
    return "\n".join(f"🔴 {format_range(r)} ({r.duration} min)" for r in busy)


def print_windows(
    windows: Sequence[TimeRange],
    title: str = "Meeting windows",
) -> None:
    """Print formatted windows with a title."""
    print(f"\n📅 {title}")
    print(format_windows_for_printing(windows))
