"""
Teacher weekly availability model.

Availability arrives from the data layer as JSON-style dicts:
    {"monday": [{"startTime": "09:00", "endTime": "11:00"}], ...}

and is held as immutable TimeRange tuples keyed by WeekDay for the duration
of one scheduling session. Overlapping ranges are not repaired here.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..enums import WeekDay

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


def parse_time(value: str) -> int:
    """
    Parse an "HH:MM" string into minutes since midnight.

    Seconds are not supported. "24:00" is accepted as end of day.
    """
    try:
        hours_str, minutes_str = value.strip().split(":")
        hours, minutes = int(hours_str), int(minutes_str)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time (expected HH:MM): {value!r}") from None

    if not 0 <= minutes < MINUTES_PER_HOUR:
        raise ValueError(f"Invalid time (minutes out of range): {value!r}")
    total = hours * MINUTES_PER_HOUR + minutes
    if not 0 <= total <= MINUTES_PER_DAY:
        raise ValueError(f"Invalid time (hours out of range): {value!r}")
    return total


def format_time(minutes: int) -> str:
    """
    Format minutes since midnight as "HH:MM".

    Values past midnight keep counting hours ("24:30").
    """
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


@dataclass(frozen=True, order=True)
class TimeRange:
    """A same-day time window at minute resolution, start < end."""

    start: int  # minutes since midnight
    end: int

    def __post_init__(self):
        if not 0 <= self.start < self.end <= MINUTES_PER_DAY:
            raise ValueError(
                f"Invalid time range {format_time(self.start)}-{format_time(self.end)}"
            )

    @classmethod
    def parse(cls, start: str, end: str) -> "TimeRange":
        return cls(parse_time(start), parse_time(end))

    @property
    def start_hour(self) -> int:
        return self.start // MINUTES_PER_HOUR

    @property
    def end_hour(self) -> int:
        return self.end // MINUTES_PER_HOUR

    def to_dict(self) -> dict[str, str]:
        return {"startTime": format_time(self.start), "endTime": format_time(self.end)}


Availability = Mapping[WeekDay, tuple[TimeRange, ...]]


def parse_availability(
    raw: Mapping[str, Any] | None,
) -> dict[WeekDay, tuple[TimeRange, ...]]:
    """
    Convert JSON-style availability into the engine's model.

    Args:
        raw: Day key ("monday" or "Monday") -> list of
            {"startTime": "HH:MM", "endTime": "HH:MM"}

    Returns:
        Dict of WeekDay -> ranges sorted by start. Days without ranges map
        to an empty tuple.
    """
    availability: dict[WeekDay, tuple[TimeRange, ...]] = {day: () for day in WeekDay}
    if not raw:
        return availability

    for day_key, ranges in raw.items():
        day = WeekDay.parse(day_key)
        parsed = [
            TimeRange.parse(item["startTime"], item["endTime"]) for item in ranges or []
        ]
        availability[day] = tuple(sorted(parsed))

    return availability


def availability_to_dict(availability: Availability) -> dict[str, list[dict[str, str]]]:
    """Inverse of parse_availability, used for API responses."""
    return {
        day.value: [r.to_dict() for r in availability.get(day, ())] for day in WeekDay
    }


@dataclass
class Teacher:
    """A teacher eligible for a course, with their weekly availability."""

    id: str
    name: str
    availability: dict[WeekDay, tuple[TimeRange, ...]] = field(default_factory=dict)
    email: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Teacher":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            email=data.get("email"),
            availability=parse_availability(data.get("availability")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "availability": availability_to_dict(self.availability),
        }
