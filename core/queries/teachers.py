"""Teacher, course and academic period queries using SQLAlchemy Core."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncConnection

from ..tables import (
    academic_periods,
    course_teachers,
    courses,
    teacher_availability,
    teachers,
)


async def get_course(
    conn: AsyncConnection,
    course_id: str,
) -> dict[str, Any] | None:
    """Get a course by ID."""
    result = await conn.execute(select(courses).where(courses.c.course_id == course_id))
    row = result.mappings().first()
    return dict(row) if row else None


async def get_academic_period(
    conn: AsyncConnection,
    academic_period_id: str,
) -> dict[str, Any] | None:
    """Get an academic period by ID."""
    result = await conn.execute(
        select(academic_periods).where(
            academic_periods.c.academic_period_id == academic_period_id
        )
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def get_teachers_with_availability(
    conn: AsyncConnection,
    course_id: str,
) -> list[dict[str, Any]]:
    """
    Get active teachers assigned to a course with their weekly availability.

    Returns:
        List of dicts: {"id", "name", "email", "availability"} where
        availability is {"monday": [{"startTime", "endTime"}, ...], ...}.
        Teachers are ordered by name.
    """
    teacher_result = await conn.execute(
        select(
            teachers.c.teacher_id,
            teachers.c.name,
            teachers.c.last_name,
            teachers.c.email,
        )
        .join(course_teachers, teachers.c.teacher_id == course_teachers.c.teacher_id)
        .where(course_teachers.c.course_id == course_id)
        .where(teachers.c.is_active.is_(True))
        .order_by(teachers.c.name, teachers.c.last_name)
    )
    teacher_rows = list(teacher_result.mappings())
    if not teacher_rows:
        return []

    teacher_ids = [row["teacher_id"] for row in teacher_rows]
    availability_result = await conn.execute(
        select(teacher_availability)
        .where(teacher_availability.c.teacher_id.in_(teacher_ids))
        .order_by(teacher_availability.c.start_time)
    )

    by_teacher: dict[str, dict[str, list[dict[str, str]]]] = {
        tid: {} for tid in teacher_ids
    }
    for row in availability_result.mappings():
        day = row["day"].value if hasattr(row["day"], "value") else row["day"]
        by_teacher[row["teacher_id"]].setdefault(day, []).append(
            {"startTime": row["start_time"], "endTime": row["end_time"]}
        )

    return [
        {
            "id": row["teacher_id"],
            "name": f"{row['name']} {row['last_name'] or ''}".strip(),
            "email": row["email"],
            "availability": by_teacher[row["teacher_id"]],
        }
        for row in teacher_rows
    ]
