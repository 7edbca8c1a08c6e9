"""Query layer for database operations using SQLAlchemy Core."""

from .teachers import get_academic_period, get_course, get_teachers_with_availability

__all__ = [
    "get_course",
    "get_academic_period",
    "get_teachers_with_availability",
]
