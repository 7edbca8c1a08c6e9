"""
Core business logic - platform-agnostic.
Can be used by the web API or any other interface.
"""

# Database (SQLAlchemy)
from .database import get_connection, get_engine, close_engine, is_configured

# Constants
from .constants import DAY_NAMES, HOURS_PER_DAY

# Enums
from .enums import WeekDay, SelectionPhase, LoadState

# Timezone utilities
from .timezone import today_in_timezone, is_past_date, week_start, format_week_label

# Enrollment data loading (async)
from .enrollment import get_teachers_for_course, get_scheduling_context

__all__ = [
    # Database (SQLAlchemy)
    'get_connection', 'get_engine', 'close_engine', 'is_configured',
    # Constants
    'DAY_NAMES', 'HOURS_PER_DAY',
    # Enums
    'WeekDay', 'SelectionPhase', 'LoadState',
    # Timezone
    'today_in_timezone', 'is_past_date', 'week_start', 'format_week_label',
    # Enrollment (async)
    'get_teachers_for_course', 'get_scheduling_context',
]
