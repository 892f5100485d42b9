"""
Pydantic DTOs for CSV import/export validation.

All CSV I/O goes through these validated DTOs so that malformed rows are
rejected with a clear message before they reach the scheduling core.
"""

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import Event, TimeRange, get_time_in_minutes
from .schedule_printer import format_minutes

ATTENDEE_SEPARATOR = ";"


def parse_clock(value: str) -> int:
    """Parse an ``HH:MM`` string into a day-minute offset (``24:00`` allowed)."""
    hours_str, sep, minutes_str = value.strip().partition(":")
    if not sep or not hours_str.isdigit() or not minutes_str.isdigit():
        raise ValueError(f"Invalid time format: {value!r}. Expected HH:MM")
    return get_time_in_minutes(int(hours_str), int(minutes_str))


class EventRow(BaseModel):
    """
    A single row of the events CSV.

    Columns: title, start (HH:MM), end (HH:MM), attendees (';'-separated).
    """

    title: str = Field(description="Human readable event title")
    start: int = Field(description="Start as day-minute (parsed from HH:MM)", ge=0)
    end: int = Field(description="Exclusive end as day-minute (parsed from HH:MM)", ge=0)
    attendees: frozenset[str] = Field(
        default_factory=frozenset,
        description="Names of the attendees taking part in the event",
    )

    @field_validator('start', 'end', mode='before')
    @classmethod
    def parse_time(cls, v: str | int) -> int:
        """Parse time from string if needed."""
        if isinstance(v, int):
            return v
        if isinstance(v, str):
            return parse_clock(v)
        raise ValueError(f"Invalid time format: {v}")

    @field_validator('attendees', mode='before')
    @classmethod
    def split_attendees(cls, v: str | frozenset[str] | set[str] | list[str]) -> frozenset[str]:
        """Split a separated attendee string into a set of names."""
        if isinstance(v, str):
            names = v.split(ATTENDEE_SEPARATOR)
        else:
            names = list(v)
        return frozenset(name.strip() for name in names if name.strip())

    @model_validator(mode='after')
    def validate_time_range(self) -> Self:
        """Ensure end is not before start."""
        if self.end < self.start:
            raise ValueError(
                f"end ({format_minutes(self.end)}) must not be before start ({format_minutes(self.start)})"
            )
        return self

    def to_event(self) -> Event:
        when = TimeRange.from_start_end(self.start, self.end, inclusive=False)
        return Event(self.title, when, self.attendees)

    @classmethod
    def from_csv_dict(cls, row: dict[str, str]) -> 'EventRow':
        """Create from CSV row dictionary with validation."""
        return cls(
            title=row['title'],
            start=row['start'],
            end=row['end'],
            attendees=row.get('attendees') or '',
        )


class WindowRow(BaseModel):
    """A single free window in the exported windows CSV."""

    start: int = Field(description="Start as day-minute", ge=0)
    end: int = Field(description="Exclusive end as day-minute", ge=0)

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    @classmethod
    def from_time_range(cls, window: TimeRange) -> 'WindowRow':
        return cls(start=window.start, end=window.end)

    def to_csv_dict(self) -> dict[str, str]:
        """Convert to dictionary for CSV writing."""
        return {
            'start': format_minutes(self.start),
            'end': format_minutes(self.end),
            'duration_minutes': str(self.duration_minutes),
        }
