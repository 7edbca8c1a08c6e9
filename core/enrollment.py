"""
Enrollment scheduling helpers.

Loads the inputs the schedule selector needs for a course: eligible teachers
with their weekly availability, the class duration and the academic period.
Database and connection failures (including a missing DATABASE_URL) are
reported to Sentry and surfaced as DataLoadError so the selector
can show its "no teachers available" state.
"""

import logging

import sentry_sdk
from sqlalchemy.exc import SQLAlchemyError

from .database import get_connection
from .queries import teachers as teacher_queries
from .schedule_selector import AcademicPeriod, DataLoadError, Teacher

logger = logging.getLogger(__name__)


async def get_teachers_for_course(course_id: str) -> list[Teacher]:
    """
    Get teachers eligible to teach a course, with parsed availability.

    Raises:
        DataLoadError: The database could not be reached or read, or returned
            availability the engine cannot parse
    """
    try:
        async with get_connection() as conn:
            rows = await teacher_queries.get_teachers_with_availability(conn, course_id)
    except (SQLAlchemyError, OSError, ValueError) as e:
        logger.error(f"Failed to load teachers for course {course_id}: {e}")
        sentry_sdk.capture_exception(e)
        raise DataLoadError(f"Could not load teachers for course {course_id}") from e

    try:
        teachers = [Teacher.from_dict(row) for row in rows]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Malformed availability for course {course_id}: {e}")
        sentry_sdk.capture_exception(e)
        raise DataLoadError(f"Malformed availability for course {course_id}") from e

    logger.info(f"Loaded {len(teachers)} teacher(s) for course {course_id}")
    return teachers


async def get_scheduling_context(
    course_id: str,
    academic_period_id: str,
) -> tuple[int, AcademicPeriod] | None:
    """
    Get the class duration and academic period for an enrollment.

    Returns:
        (class_duration_minutes, AcademicPeriod), or None if either the
        course or the period does not exist

    Raises:
        DataLoadError: The database could not be reached or read
    """
    try:
        async with get_connection() as conn:
            course = await teacher_queries.get_course(conn, course_id)
            period = await teacher_queries.get_academic_period(conn, academic_period_id)
    except (SQLAlchemyError, OSError, ValueError) as e:
        logger.error(f"Failed to load scheduling context for course {course_id}: {e}")
        sentry_sdk.capture_exception(e)
        raise DataLoadError(f"Could not load course {course_id}") from e

    if not course or not period:
        return None

    return (
        course["class_duration_minutes"],
        AcademicPeriod(start_date=period["start_date"], end_date=period["end_date"]),
    )
