"""
Slot feasibility evaluation.

A grid cell (weekday, hour) is feasible when the hour-aligned window
[hour, hour + ceil(duration / 60)) sits inside a single availability range
for that weekday. Availability ranges are compared at whole-hour precision
(their hour components only). No merging across adjacent ranges.

The stored end time of a selected slot uses exact minutes instead
(see class_end_time). The two granularities intentionally differ.
"""

import math

from ..constants import HOURS_PER_DAY
from ..enums import WeekDay
from .availability import MINUTES_PER_HOUR, Availability, format_time


def required_hours(class_duration_minutes: int) -> int:
    """Whole hours a class occupies on the grid (rounded up)."""
    return math.ceil(class_duration_minutes / MINUTES_PER_HOUR)


def is_feasible(
    availability: Availability,
    weekday: WeekDay,
    hour_start: int,
    class_duration_minutes: int,
) -> bool:
    """
    Check whether a class can start at hour_start on weekday.

    Args:
        availability: Teacher availability (WeekDay -> ranges)
        weekday: Day of the grid cell
        hour_start: Grid hour (0-23)
        class_duration_minutes: Course class duration

    Returns:
        True if one availability range covers the whole rounded-up window
    """
    required_end_hour = hour_start + required_hours(class_duration_minutes)

    return any(
        r.start_hour <= hour_start and required_end_hour <= r.end_hour
        for r in availability.get(weekday, ())
    )


def feasible_cells(
    availability: Availability,
    class_duration_minutes: int,
) -> set[tuple[WeekDay, int]]:
    """All feasible (weekday, hour) cells for the whole week."""
    return {
        (day, hour)
        for day in WeekDay
        for hour in range(HOURS_PER_DAY)
        if is_feasible(availability, day, hour, class_duration_minutes)
    }


def class_end_time(hour_start: int, class_duration_minutes: int) -> str:
    """Exact "HH:MM" end time of a class starting on the hour."""
    return format_time(hour_start * MINUTES_PER_HOUR + class_duration_minutes)
