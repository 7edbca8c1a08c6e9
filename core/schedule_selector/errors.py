"""Exceptions raised by the schedule selector."""


class ScheduleSelectorError(Exception):
    """Base exception for schedule selector errors."""

    pass


class ValidationError(ScheduleSelectorError):
    """The selection cannot be confirmed (no teacher or no slots)."""

    pass


class DataLoadError(ScheduleSelectorError):
    """Teacher availability could not be loaded."""

    pass


class UnknownTeacherError(ScheduleSelectorError):
    """A teacher id was requested that is not among the loaded teachers."""

    def __init__(self, teacher_id: str):
        super().__init__(f"Teacher not available for this course: {teacher_id}")
        self.teacher_id = teacher_id
