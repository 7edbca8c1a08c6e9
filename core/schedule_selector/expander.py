"""
Schedule expansion.

Turns the committed weekly cells into:
- a weekly recurring pattern (WeeklyScheduleSlot), persisted as the student's
  ongoing commitment, and
- concrete dated class instances (ScheduledClass), either every matching day
  from max(today, period start) to period end (recurring), or once inside
  the navigated week (single week).

Inputs are trusted: past or out-of-period dates are kept out upstream by
disabling grid columns, so nothing here re-validates bounds.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable

from ..enums import WeekDay
from .selection import SlotCell, sort_cells


@dataclass(frozen=True)
class AcademicPeriod:
    """Inclusive date range bounding every generated class."""

    start_date: date
    end_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class WeeklyScheduleSlot:
    """One recurring weekly class time with a teacher."""

    teacher_id: str
    weekday: WeekDay
    start_time: str
    end_time: str

    @property
    def day_of_week(self) -> int:
        return self.weekday.day_of_week

    def to_dict(self) -> dict[str, Any]:
        return {
            "teacherId": self.teacher_id,
            "dayOfWeek": self.day_of_week,
            "startTime": self.start_time,
            "endTime": self.end_time,
        }


@dataclass(frozen=True)
class ScheduledClass:
    """One concrete class meeting on a calendar date."""

    date: date
    weekday: WeekDay
    start_time: str
    end_time: str
    teacher_id: str

    @property
    def day_of_week(self) -> int:
        return self.weekday.day_of_week

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "dayOfWeek": self.day_of_week,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "teacherId": self.teacher_id,
        }


def _sort_classes(classes: list[ScheduledClass]) -> list[ScheduledClass]:
    # "HH:MM" strings are zero-padded, so string order is time order
    return sorted(classes, key=lambda c: (c.date, c.start_time))


def to_weekly_pattern(
    cells: Iterable[SlotCell],
    teacher_id: str,
    class_duration_minutes: int,
) -> list[WeeklyScheduleSlot]:
    """Project selected cells onto weekly slots, in display order."""
    return [
        WeeklyScheduleSlot(
            teacher_id=teacher_id,
            weekday=cell.weekday,
            start_time=cell.start_time,
            end_time=cell.end_time(class_duration_minutes),
        )
        for cell in sort_cells(cells)
    ]


def expand_recurring(
    pattern: list[WeeklyScheduleSlot],
    period: AcademicPeriod,
    today: date,
) -> list[ScheduledClass]:
    """
    Every date in [max(today, period start), period end] whose weekday
    matches a pattern slot yields one class per matching slot.
    """
    by_weekday: dict[WeekDay, list[WeeklyScheduleSlot]] = {}
    for slot in pattern:
        by_weekday.setdefault(slot.weekday, []).append(slot)

    classes = []
    current = max(today, period.start_date)
    while current <= period.end_date:
        for slot in by_weekday.get(WeekDay.from_date(current), []):
            classes.append(
                ScheduledClass(
                    date=current,
                    weekday=slot.weekday,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    teacher_id=slot.teacher_id,
                )
            )
        current += timedelta(days=1)

    return _sort_classes(classes)


def expand_single_week(
    pattern: list[WeeklyScheduleSlot],
    week_start: date,
) -> list[ScheduledClass]:
    """One class per pattern slot, dated inside the week starting on week_start."""
    classes = [
        ScheduledClass(
            date=week_start + timedelta(days=slot.weekday.display_index),
            weekday=slot.weekday,
            start_time=slot.start_time,
            end_time=slot.end_time,
            teacher_id=slot.teacher_id,
        )
        for slot in pattern
    ]
    return _sort_classes(classes)


def expand(
    pattern: list[WeeklyScheduleSlot],
    is_recurring: bool,
    period: AcademicPeriod,
    today: date,
    navigated_week_start: date | None = None,
) -> list[ScheduledClass]:
    """
    Expand a weekly pattern into dated classes for the given mode.

    Args:
        pattern: Weekly slots from to_weekly_pattern
        is_recurring: Recurring mode (True) or single-week mode (False)
        period: Academic period bounding recurring expansion
        today: Current date in the student's timezone
        navigated_week_start: Monday of the viewed week (single-week mode)

    Returns:
        Classes sorted by (date, start time)
    """
    if is_recurring:
        return expand_recurring(pattern, period, today)

    if navigated_week_start is None:
        raise ValueError("Single-week expansion needs the navigated week start")
    return expand_single_week(pattern, navigated_week_start)
