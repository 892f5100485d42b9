from dataclasses import dataclass, field, replace
from operator import attrgetter


MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def get_time_in_minutes(hours: int, minutes: int) -> int:
    """Convert an hour/minute pair into a day-minute offset."""
    if hours < 0 or hours > 24:
        raise ValueError(f"Hours must be between 0 and 24, got {hours}")
    if minutes < 0 or minutes >= MINUTES_PER_HOUR:
        raise ValueError(f"Minutes must be between 0 and 59, got {minutes}")
    total = hours * MINUTES_PER_HOUR + minutes
    if total > MINUTES_PER_DAY:
        raise ValueError(f"{hours:02d}:{minutes:02d} is past the end of the day")
    return total


START_OF_DAY: int = get_time_in_minutes(0, 0)
END_OF_DAY: int = get_time_in_minutes(23, 59)


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval of day-minutes: [start, start + duration)."""

    start: int
    duration: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"TimeRange start must be non-negative, got {self.start}")
        if self.duration < 0:
            raise ValueError(f"TimeRange duration must be non-negative, got {self.duration}")

    @property
    def end(self) -> int:
        return self.start + self.duration

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        return cls(start, duration)

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool) -> "TimeRange":
        """Build a range from two endpoints.

        When ``inclusive`` is true, ``end`` is the last minute that belongs to
        the range, so the exclusive boundary is ``end + 1``.
        """
        if inclusive:
            end += 1
        return cls(start, end - start)

    def _contains_point(self, point: int) -> bool:
        return self.start <= point < self.end

    def contains(self, other: "TimeRange | int") -> bool:
        """Check whether a minute or a whole range lies inside this range."""
        if isinstance(other, int):
            return self._contains_point(other)
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "TimeRange") -> bool:
        # One range must contain the start of the other
        return self._contains_point(other.start) or other._contains_point(self.start)

    def get_overlap(self, other: "TimeRange") -> "TimeRange":
        """Return the intersection of two overlapping ranges."""
        if not self.overlaps(other):
            raise ValueError(f"{self} does not overlap {other}")
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        return TimeRange(start, end - start)

    def __str__(self) -> str:
        return f"Range: [{self.start}, {self.end})"


WHOLE_DAY: TimeRange = TimeRange(START_OF_DAY, MINUTES_PER_DAY)

ORDER_BY_START = attrgetter("start")
ORDER_BY_END = attrgetter("end")


@dataclass(frozen=True)
class Event:
    title: str
    when: TimeRange
    attendees: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of names but store an immutable set
        object.__setattr__(self, "attendees", frozenset(self.attendees))
        if not WHOLE_DAY.contains(self.when):
            raise ValueError(f"Event '{self.title}' ({self.when}) does not fit within a single day")


@dataclass(frozen=True)
class MeetingRequest:
    """A request for a meeting of ``duration`` minutes.

    ``attendees`` must all be able to attend. ``optional_attendees`` are
    included only when every one of them can be accommodated.
    """

    attendees: frozenset[str]
    duration: int
    optional_attendees: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attendees", frozenset(self.attendees))
        object.__setattr__(self, "optional_attendees", frozenset(self.optional_attendees))
        if self.duration < 0:
            raise ValueError(f"Meeting duration must be non-negative, got {self.duration}")

    def with_optional_attendee(self, attendee: str) -> "MeetingRequest":
        return replace(self, optional_attendees=self.optional_attendees | {attendee})

