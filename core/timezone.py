"""
Timezone and calendar-week utilities.

The scheduling engine never converts stored times between zones. The
student's zone is only used to decide what "today" is, which in turn decides
which dates count as past.
"""

from datetime import date, datetime, timedelta

import pytz


def get_timezone(tz_name: str | None):
    """Resolve a timezone name, falling back to UTC for unknown names."""
    if not tz_name:
        return pytz.UTC
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def today_in_timezone(tz_name: str | None, now: datetime | None = None) -> date:
    """
    Get the current calendar date in a timezone.

    Args:
        tz_name: Timezone string (e.g., "America/Lima")
        now: Optional reference instant (naive datetimes treated as UTC)

    Returns:
        The local date at that instant
    """
    if now is None:
        now = datetime.now(pytz.UTC)
    elif now.tzinfo is None:
        now = pytz.UTC.localize(now)

    return now.astimezone(get_timezone(tz_name)).date()


def is_past_date(day: date, today: date) -> bool:
    """A date is past when it is strictly before today; today itself is not."""
    return day < today


def week_start(day: date) -> date:
    """Monday of the week containing the given date."""
    return day - timedelta(days=day.weekday())


def format_week_label(start: date) -> str:
    """
    Format a Monday-first week for display.

    Returns:
        Formatted string like "1 Jan - 7 Jan 2024"
    """
    end = start + timedelta(days=6)
    first = f"{start.day} {start.strftime('%b')}"
    last = f"{end.day} {end.strftime('%b')} {end.year}"
    return f"{first} - {last}"
