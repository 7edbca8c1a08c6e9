"""SQLAlchemy Core table definitions read by the schedule selector."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

from .enums import weekday_enum

# Naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
metadata = MetaData(naming_convention=convention)


# =====================================================
# 1. TEACHERS
# =====================================================
teachers = Table(
    "teachers",
    metadata,
    Column("teacher_id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("last_name", Text),
    Column("email", Text),
    Column("is_active", Boolean, server_default="true"),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    Index("idx_teachers_email", "email"),
)


# =====================================================
# 2. COURSES
# =====================================================
courses = Table(
    "courses",
    metadata,
    Column("course_id", Text, primary_key=True),
    Column("title", Text, nullable=False),
    Column("class_duration_minutes", Integer, nullable=False, server_default="60"),
    Column("is_synchronous", Boolean, server_default="true"),
    Column("created_at", TIMESTAMP(timezone=True), server_default=func.now()),
    CheckConstraint("class_duration_minutes > 0", name="positive_duration"),
)


# =====================================================
# 3. COURSE_TEACHERS
# =====================================================
course_teachers = Table(
    "course_teachers",
    metadata,
    Column("course_teacher_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "course_id",
        Text,
        ForeignKey("courses.course_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "teacher_id",
        Text,
        ForeignKey("teachers.teacher_id", ondelete="CASCADE"),
        nullable=False,
    ),
    UniqueConstraint("course_id", "teacher_id", name="uq_course_teachers_pair"),
    Index("idx_course_teachers_course_id", "course_id"),
)


# =====================================================
# 4. TEACHER_AVAILABILITY
# =====================================================
# Weekly ranges in the teacher's local time, "HH:MM" strings
teacher_availability = Table(
    "teacher_availability",
    metadata,
    Column("availability_id", Integer, primary_key=True, autoincrement=True),
    Column(
        "teacher_id",
        Text,
        ForeignKey("teachers.teacher_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("day", weekday_enum, nullable=False),
    Column("start_time", Text, nullable=False),
    Column("end_time", Text, nullable=False),
    CheckConstraint("start_time < end_time", name="start_before_end"),
    Index("idx_teacher_availability_teacher_id", "teacher_id"),
)


# =====================================================
# 5. ACADEMIC_PERIODS
# =====================================================
academic_periods = Table(
    "academic_periods",
    metadata,
    Column("academic_period_id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("is_active", Boolean, server_default="true"),
    CheckConstraint("start_date <= end_date", name="start_before_end"),
)
