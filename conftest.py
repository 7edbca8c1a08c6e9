"""Root pytest configuration and shared scheduling fixtures."""

from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

from core.schedule_selector import AcademicPeriod, Teacher

# Load environment variables before tests run
_root = Path(__file__).parent
load_dotenv(_root / ".env")
load_dotenv(_root / ".env.local", override=True)


@pytest.fixture
def january_period():
    """Mon 2024-01-01 through Mon 2024-01-29."""
    return AcademicPeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, 29))


@pytest.fixture
def monday_teacher():
    """Teacher available Monday 09:00-11:00 only."""
    return Teacher.from_dict(
        {
            "id": "teacher-1",
            "name": "Ana Torres",
            "email": "ana@example.com",
            "availability": {"monday": [{"startTime": "09:00", "endTime": "11:00"}]},
        }
    )


@pytest.fixture
def weekday_teacher():
    """Teacher available Mon-Fri 08:00-12:00 and 14:00-18:00."""
    ranges = [
        {"startTime": "08:00", "endTime": "12:00"},
        {"startTime": "14:00", "endTime": "18:00"},
    ]
    return Teacher.from_dict(
        {
            "id": "teacher-2",
            "name": "Luis Vega",
            "email": "luis@example.com",
            "availability": {
                day: ranges
                for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
            },
        }
    )

