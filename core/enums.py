"""Enum definitions shared by the scheduling engine and the database schema."""

import enum

from sqlalchemy import Enum as SQLEnum

from .constants import DAY_LABELS, DAY_NAMES


# =====================================================
# Python Enum Classes
# =====================================================


class WeekDay(str, enum.Enum):
    """
    Day of the week.

    Two orderings exist side by side:
    - display_index: Monday=0 ... Sunday=6, used for the grid columns
    - day_of_week: Sunday=0 ... Saturday=6, used for date arithmetic and storage
    """

    monday = "monday"
    tuesday = "tuesday"
    wednesday = "wednesday"
    thursday = "thursday"
    friday = "friday"
    saturday = "saturday"
    sunday = "sunday"

    @property
    def display_index(self) -> int:
        return DISPLAY_ORDER.index(self)

    @property
    def day_of_week(self) -> int:
        return (self.display_index + 1) % 7

    @property
    def label(self) -> str:
        """Display name, e.g. "Monday"."""
        return DAY_NAMES[self.display_index]

    @property
    def short_label(self) -> str:
        return DAY_LABELS[self.label]

    @classmethod
    def from_display_index(cls, index: int) -> "WeekDay":
        if not 0 <= index < len(DISPLAY_ORDER):
            raise ValueError(f"Display index out of range: {index}")
        return DISPLAY_ORDER[index]

    @classmethod
    def from_day_of_week(cls, day_of_week: int) -> "WeekDay":
        if not 0 <= day_of_week < 7:
            raise ValueError(f"Day of week out of range: {day_of_week}")
        return DISPLAY_ORDER[(day_of_week + 6) % 7]

    @classmethod
    def from_date(cls, value) -> "WeekDay":
        """Weekday of a date (date.weekday() is already Monday-first)."""
        return DISPLAY_ORDER[value.weekday()]

    @classmethod
    def parse(cls, value: "str | WeekDay") -> "WeekDay":
        """Accept "monday", "Monday" or an existing WeekDay."""
        if isinstance(value, WeekDay):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown weekday: {value!r}") from None


DISPLAY_ORDER = list(WeekDay)


class SelectionPhase(str, enum.Enum):
    idle = "idle"
    dragging = "dragging"
    pending_decision = "pending_decision"


class LoadState(str, enum.Enum):
    """Lifecycle of the teacher/availability fetch."""

    loading = "loading"
    ready = "ready"
    empty = "empty"
    failed = "failed"


# =====================================================
# SQLAlchemy Enum Types
# These reference existing PostgreSQL types (create_type=False)
# =====================================================

weekday_enum = SQLEnum(WeekDay, name="weekday", create_type=False, native_enum=True)
