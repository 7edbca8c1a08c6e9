"""Class schedule selection for live-taught course enrollments."""

from .availability import (
    Availability,
    Teacher,
    TimeRange,
    availability_to_dict,
    format_time,
    parse_availability,
    parse_time,
)
from .errors import (
    DataLoadError,
    ScheduleSelectorError,
    UnknownTeacherError,
    ValidationError,
)
from .expander import (
    AcademicPeriod,
    ScheduledClass,
    WeeklyScheduleSlot,
    expand,
    expand_recurring,
    expand_single_week,
    to_weekly_pattern,
)
from .feasibility import class_end_time, feasible_cells, is_feasible, required_hours
from .selection import (
    Dragging,
    GridSelection,
    Idle,
    PendingDecision,
    SlotCell,
    sort_cells,
)
from .selector import ConfirmedSchedule, GridCell, GridColumn, ScheduleSelector

__all__ = [
    # Availability
    "Availability",
    "Teacher",
    "TimeRange",
    "availability_to_dict",
    "format_time",
    "parse_availability",
    "parse_time",
    # Errors
    "DataLoadError",
    "ScheduleSelectorError",
    "UnknownTeacherError",
    "ValidationError",
    # Expansion
    "AcademicPeriod",
    "ScheduledClass",
    "WeeklyScheduleSlot",
    "expand",
    "expand_recurring",
    "expand_single_week",
    "to_weekly_pattern",
    # Feasibility
    "class_end_time",
    "feasible_cells",
    "is_feasible",
    "required_hours",
    # Selection
    "Dragging",
    "GridSelection",
    "Idle",
    "PendingDecision",
    "SlotCell",
    "sort_cells",
    # Orchestration
    "ConfirmedSchedule",
    "GridCell",
    "GridColumn",
    "ScheduleSelector",
]
