"""
Schedule selector orchestration.

Composes the availability model, feasibility evaluator, grid selection state
machine and schedule expander into the object a host UI drives while a
student is enrolled in a live-taught course:

    selector = ScheduleSelector(class_duration_minutes=60, period=period,
                                timezone="America/Lima")
    await selector.load_teachers(lambda: get_teachers_for_course(course_id))
    selector.selection.mouse_down(SlotCell(WeekDay.monday, 9))
    selector.selection.mouse_up()
    result = selector.confirm()

Everything except load_teachers is synchronous, derived values are
recomputed on every access, and confirm() is the only hand-off point.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Awaitable, Callable

from ..constants import HOURS_PER_DAY
from ..enums import LoadState, WeekDay
from ..timezone import format_week_label, is_past_date, today_in_timezone, week_start
from .availability import Teacher
from .errors import DataLoadError, UnknownTeacherError, ValidationError
from .expander import (
    AcademicPeriod,
    ScheduledClass,
    WeeklyScheduleSlot,
    expand,
    to_weekly_pattern,
)
from .feasibility import is_feasible
from .selection import GridSelection, SlotCell, sort_cells

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmedSchedule:
    """What the enrollment workflow persists after confirmation."""

    teacher_id: str
    scheduled_classes: list[ScheduledClass]
    is_recurring: bool
    weekly_schedule: list[WeeklyScheduleSlot]

    def to_dict(self) -> dict[str, Any]:
        return {
            "teacherId": self.teacher_id,
            "scheduledClasses": [c.to_dict() for c in self.scheduled_classes],
            "isRecurring": self.is_recurring,
            "weeklySchedule": [s.to_dict() for s in self.weekly_schedule],
        }


@dataclass(frozen=True)
class GridColumn:
    weekday: WeekDay
    date: date
    disabled: bool
    is_today: bool


@dataclass(frozen=True)
class GridCell:
    """Render state of one grid cell."""

    cell: SlotCell
    available: bool
    disabled: bool
    selected: bool
    pending: bool


class ScheduleSelector:
    """Teacher choice, weekly grid selection and derived class schedule."""

    def __init__(
        self,
        class_duration_minutes: int,
        period: AcademicPeriod,
        timezone: str = "UTC",
        today: date | None = None,
    ):
        if class_duration_minutes <= 0:
            raise ValueError("Class duration must be positive")

        self.class_duration_minutes = class_duration_minutes
        self.period = period
        self.timezone = timezone
        self.today = today or today_in_timezone(timezone)

        self.load_state = LoadState.loading
        self.teachers: list[Teacher] = []
        self.selected_teacher: Teacher | None = None
        self.is_recurring = True
        self.navigated_week_start = week_start(max(self.today, period.start_date))

        # Inert until teachers arrive
        self.selection = GridSelection()

    # -------------------------------------------------
    # Teachers
    # -------------------------------------------------

    async def load_teachers(
        self,
        loader: Callable[[], Awaitable[list[Teacher]]],
    ) -> LoadState:
        """
        Fetch eligible teachers once and pick the first one.

        A failed fetch leaves the grid inert in the failed state; retrying is
        up to the host.
        """
        try:
            teachers = await loader()
        except DataLoadError as e:
            logger.error(f"Failed to load teachers: {e}")
            self.teachers = []
            self.selected_teacher = None
            self.selection.reset(None)
            self.load_state = LoadState.failed
            return self.load_state

        self.set_teachers(teachers)
        return self.load_state

    def set_teachers(self, teachers: list[Teacher]) -> None:
        self.teachers = list(teachers)
        self.selected_teacher = None
        self.selection.reset(None)

        if not self.teachers:
            self.load_state = LoadState.empty
            logger.info("No teachers available for this course")
            return

        self.load_state = LoadState.ready
        logger.info(f"Loaded {len(self.teachers)} teacher(s)")
        self.select_teacher(self.teachers[0].id)

    def select_teacher(self, teacher_id: str) -> Teacher:
        """Switch teacher. The old selection is invalid against the new surface."""
        teacher = next((t for t in self.teachers if t.id == teacher_id), None)
        if teacher is None:
            raise UnknownTeacherError(teacher_id)

        self.selected_teacher = teacher
        self.selection.reset(self._is_selectable)
        logger.info(f"Selected teacher {teacher_id}")
        return teacher

    @property
    def interactive(self) -> bool:
        return self.selection.interactive

    # -------------------------------------------------
    # Mode and week navigation
    # -------------------------------------------------

    def set_recurrence_mode(self, is_recurring: bool) -> None:
        """Change how cells expand into classes. The selected cells stay."""
        self.is_recurring = is_recurring

    def navigate_week(self, delta: int) -> date:
        """
        Move the viewed week by delta weeks (single-week mode only).

        The target is clamped to the weeks that overlap the academic period.
        """
        if not self.is_recurring:
            current = self.navigated_week_start
            earliest = (week_start(self.period.start_date) - current).days // 7
            latest = (week_start(self.period.end_date) - current).days // 7
            delta = max(earliest, min(delta, latest))
            self.navigated_week_start = current + timedelta(weeks=delta)
        return self.navigated_week_start

    @property
    def displayed_week_start(self) -> date:
        if self.is_recurring:
            return week_start(self.today)
        return self.navigated_week_start

    @property
    def week_label(self) -> str:
        return format_week_label(self.displayed_week_start)

    def column_date(self, weekday: WeekDay) -> date:
        return self.displayed_week_start + timedelta(days=weekday.display_index)

    def is_column_disabled(self, weekday: WeekDay) -> bool:
        """Past or out-of-period days are disabled in single-week mode."""
        if self.is_recurring:
            return False
        day = self.column_date(weekday)
        return is_past_date(day, self.today) or not self.period.contains(day)

    # -------------------------------------------------
    # Feasibility surface
    # -------------------------------------------------

    def is_feasible(self, cell: SlotCell) -> bool:
        if self.selected_teacher is None:
            return False
        return is_feasible(
            self.selected_teacher.availability,
            cell.weekday,
            cell.hour,
            self.class_duration_minutes,
        )

    def _is_selectable(self, cell: SlotCell) -> bool:
        return self.is_feasible(cell) and not self.is_column_disabled(cell.weekday)

    def columns(self) -> list[GridColumn]:
        return [
            GridColumn(
                weekday=day,
                date=self.column_date(day),
                disabled=self.is_column_disabled(day),
                is_today=self.column_date(day) == self.today,
            )
            for day in WeekDay
        ]

    def grid(self) -> list[list[GridCell]]:
        """Rows of cells, one row per hour, Monday-first columns."""
        selected = self.selection.selected
        pending = self.selection.pending_span
        disabled = {day: self.is_column_disabled(day) for day in WeekDay}

        rows = []
        for hour in range(HOURS_PER_DAY):
            row = []
            for day in WeekDay:
                cell = SlotCell(day, hour)
                row.append(
                    GridCell(
                        cell=cell,
                        available=self.is_feasible(cell),
                        disabled=disabled[day],
                        selected=cell in selected,
                        pending=cell in pending,
                    )
                )
            rows.append(row)
        return rows

    # -------------------------------------------------
    # Derived schedule
    # -------------------------------------------------

    @property
    def selected_slots(self) -> list[SlotCell]:
        return sort_cells(self.selection.selected)

    @property
    def weekly_schedule(self) -> list[WeeklyScheduleSlot]:
        if self.selected_teacher is None:
            return []
        return to_weekly_pattern(
            self.selection.selected,
            self.selected_teacher.id,
            self.class_duration_minutes,
        )

    @property
    def scheduled_classes(self) -> list[ScheduledClass]:
        pattern = self.weekly_schedule
        if not pattern:
            return []
        return expand(
            pattern,
            self.is_recurring,
            self.period,
            self.today,
            self.navigated_week_start,
        )

    @property
    def class_count(self) -> int:
        return len(self.scheduled_classes)

    def clear_selection(self) -> None:
        self.selection.clear()

    def remove_slot(self, cell: SlotCell) -> None:
        self.selection.remove(cell)

    def confirm(self) -> ConfirmedSchedule:
        """
        Finalize the selection for the enrollment workflow.

        Raises:
            ValidationError: No teacher selected or no slots selected
        """
        if self.selected_teacher is None:
            raise ValidationError("A teacher must be selected")
        if not self.selection.selected:
            raise ValidationError("At least one time slot must be selected")

        result = ConfirmedSchedule(
            teacher_id=self.selected_teacher.id,
            scheduled_classes=self.scheduled_classes,
            is_recurring=self.is_recurring,
            weekly_schedule=self.weekly_schedule,
        )
        logger.info(
            f"Confirmed schedule with teacher {result.teacher_id}: "
            f"{len(result.weekly_schedule)} weekly slot(s), "
            f"{len(result.scheduled_classes)} class(es), "
            f"recurring={result.is_recurring}"
        )
        return result
