"""
Schedule selector routes.

Endpoints:
- GET /api/schedule/courses/{course_id}/teachers - Teachers with weekly availability
- POST /api/schedule/preview - Expand a selection without confirming it
- POST /api/schedule/confirm - Validate and finalize a selection

Preview and confirm replay the client's selection through ScheduleSelector,
so the server applies the same feasibility and column rules as the grid.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from core.config import get_default_timezone
from core.enrollment import get_scheduling_context, get_teachers_for_course
from core.enums import LoadState, WeekDay
from core.schedule_selector import (
    DataLoadError,
    ScheduleSelector,
    SlotCell,
    UnknownTeacherError,
    ValidationError,
)
from core.timezone import today_in_timezone

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schedule", tags=["schedule"])


class SlotRequest(BaseModel):
    day: str
    hour: int = Field(ge=0, le=23)


class ScheduleRequest(BaseModel):
    course_id: str
    academic_period_id: str
    teacher_id: str
    slots: list[SlotRequest] = []
    is_recurring: bool = True
    week_offset: int = Field(default=0, ge=-520, le=520)
    timezone: str | None = None


@router.get("/courses/{course_id}/teachers")
async def list_teachers(course_id: str) -> dict[str, Any]:
    """Get teachers eligible for a course with their weekly availability."""
    try:
        teachers = await get_teachers_for_course(course_id)
    except DataLoadError as e:
        raise HTTPException(503, str(e))

    return {"teachers": [teacher.to_dict() for teacher in teachers]}


async def _build_selector(request: ScheduleRequest) -> ScheduleSelector:
    """Recreate the client's selector state from a request body."""
    try:
        context = await get_scheduling_context(
            request.course_id, request.academic_period_id
        )
    except DataLoadError as e:
        raise HTTPException(503, str(e))
    if context is None:
        raise HTTPException(404, "Course or academic period not found")

    class_duration_minutes, period = context
    tz_name = request.timezone or get_default_timezone()
    selector = ScheduleSelector(
        class_duration_minutes=class_duration_minutes,
        period=period,
        timezone=tz_name,
        today=today_in_timezone(tz_name),
    )

    state = await selector.load_teachers(
        lambda: get_teachers_for_course(request.course_id)
    )
    if state == LoadState.failed:
        raise HTTPException(503, "Could not load teacher availability")

    try:
        selector.select_teacher(request.teacher_id)
    except UnknownTeacherError as e:
        raise HTTPException(404, str(e))

    selector.set_recurrence_mode(request.is_recurring)
    selector.navigate_week(request.week_offset)

    try:
        cells = {SlotCell(WeekDay.parse(slot.day), slot.hour) for slot in request.slots}
    except ValueError as e:
        raise HTTPException(400, str(e))

    for cell in cells:
        if not selector.selection.mouse_down(cell):
            raise HTTPException(400, f"Time slot not available: {cell.key}")
        selector.selection.mouse_up()

    return selector


@router.post("/preview")
async def preview_schedule(request: ScheduleRequest) -> dict[str, Any]:
    """Expand the selection into weekly slots and dated classes."""
    selector = await _build_selector(request)

    return {
        "isRecurring": selector.is_recurring,
        "weekStart": selector.displayed_week_start.isoformat(),
        "weekLabel": selector.week_label,
        "weeklySchedule": [slot.to_dict() for slot in selector.weekly_schedule],
        "scheduledClasses": [c.to_dict() for c in selector.scheduled_classes],
        "classCount": selector.class_count,
    }


@router.post("/confirm")
async def confirm_schedule(request: ScheduleRequest) -> dict[str, Any]:
    """
    Finalize a selection for the enrollment workflow.

    The result is returned to the caller, which persists the enrollment.
    """
    selector = await _build_selector(request)

    try:
        result = selector.confirm()
    except ValidationError as e:
        raise HTTPException(400, str(e))

    return result.to_dict()
