"""
Events CSV import and windows CSV export.

The events CSV lists one calendar entry per row with its attendees; the
windows CSV holds the meeting windows found for a request.
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from .dtos import EventRow, WindowRow
from .models import Event, TimeRange

logger = logging.getLogger(__name__)

EVENT_COLUMNS = ('title', 'start', 'end', 'attendees')
WINDOW_COLUMNS = ('start', 'end', 'duration_minutes')


def import_events_csv(csv_path: Path) -> list[Event]:
    """
    Import and validate an events CSV.

    Args:
        csv_path: Path to the events CSV file

    Returns:
        List of events in file order

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        ValueError: If CSV is invalid or fails validation
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Events CSV not found: {csv_path}")

    events: list[Event] = []

    with csv_path.open('r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)

        if reader.fieldnames is None:
            raise ValueError("CSV file is empty or has no header")

        missing_columns = set(EVENT_COLUMNS) - set(reader.fieldnames)
        if missing_columns:
            raise ValueError(
                f"Missing required columns in CSV: {', '.join(sorted(missing_columns))}"
            )

        for line_num, row_dict in enumerate(reader, start=2):  # Header is line 1
            try:
                events.append(EventRow.from_csv_dict(row_dict).to_event())
            except (ValueError, KeyError) as e:
                raise ValueError(f"Validation error on line {line_num}: {e}") from e

    logger.info(f"Imported {len(events)} events from {csv_path}")
    return events


def export_windows_csv(windows: Sequence[TimeRange], output_path: Path) -> None:
    """Write meeting windows to a CSV file with HH:MM start/end columns."""
    with output_path.open('w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=list(WINDOW_COLUMNS))
        writer.writeheader()
        for window in windows:
            writer.writerow(WindowRow.from_time_range(window).to_csv_dict())

    logger.info(f"Exported {len(windows)} windows to {output_path}")
