# web_api/tests/conftest.py
"""Pytest fixtures for web API tests.

Patches the enrollment data loaders used by the schedule routes so API tests
run without a database, and pins "today" so expansions are deterministic.
"""

import sys
from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

# Ensure we import from root main.py
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from main import app
from core.schedule_selector import AcademicPeriod


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_loaders(monday_teacher, weekday_teacher):
    """Course with 60 minute classes over January 2024, two teachers, today Jan 1."""
    with (
        patch(
            "web_api.routes.schedule.get_teachers_for_course",
            new_callable=AsyncMock,
            return_value=[monday_teacher, weekday_teacher],
        ) as mock_teachers,
        patch(
            "web_api.routes.schedule.get_scheduling_context",
            new_callable=AsyncMock,
            return_value=(60, AcademicPeriod(date(2024, 1, 1), date(2024, 1, 29))),
        ) as mock_context,
        patch(
            "web_api.routes.schedule.today_in_timezone",
            return_value=date(2024, 1, 1),
        ),
    ):
        yield {"teachers": mock_teachers, "context": mock_context}
