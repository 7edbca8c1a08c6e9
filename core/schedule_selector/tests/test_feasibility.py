"""Tests for slot feasibility evaluation."""

from core.constants import HOURS_PER_DAY
from core.enums import WeekDay
from core.schedule_selector.availability import parse_availability
from core.schedule_selector.feasibility import (
    class_end_time,
    feasible_cells,
    is_feasible,
    required_hours,
)


def _availability(**days):
    return parse_availability(
        {
            day: [{"startTime": start, "endTime": end} for start, end in ranges]
            for day, ranges in days.items()
        }
    )


class TestIsFeasible:
    def test_one_hour_class_inside_range(self, monday_teacher):
        availability = monday_teacher.availability

        assert is_feasible(availability, WeekDay.monday, 9, 60)
        assert is_feasible(availability, WeekDay.monday, 10, 60)

    def test_window_ending_past_range_is_rejected(self, monday_teacher):
        # 11:00 start needs the window to end at 12:00, range ends at 11:00
        assert not is_feasible(monday_teacher.availability, WeekDay.monday, 11, 60)
        assert not is_feasible(monday_teacher.availability, WeekDay.monday, 8, 60)

    def test_partial_hours_round_up(self, monday_teacher):
        # 90 minutes is checked as a 2 hour window
        assert is_feasible(monday_teacher.availability, WeekDay.monday, 9, 90)
        assert not is_feasible(monday_teacher.availability, WeekDay.monday, 10, 90)

    def test_no_ranges_means_infeasible(self, monday_teacher):
        assert not is_feasible(monday_teacher.availability, WeekDay.tuesday, 9, 60)

    def test_window_straddling_a_gap_is_rejected(self):
        availability = _availability(monday=[("08:00", "12:00"), ("14:00", "18:00")])

        assert is_feasible(availability, WeekDay.monday, 10, 120)
        assert not is_feasible(availability, WeekDay.monday, 11, 120)
        assert not is_feasible(availability, WeekDay.monday, 13, 120)

    def test_adjacent_ranges_are_not_merged(self):
        availability = _availability(monday=[("09:00", "10:00"), ("10:00", "11:00")])

        assert is_feasible(availability, WeekDay.monday, 9, 60)
        assert not is_feasible(availability, WeekDay.monday, 9, 120)

    def test_range_minutes_are_ignored(self):
        availability = _availability(monday=[("09:30", "11:45")])

        assert is_feasible(availability, WeekDay.monday, 9, 120)
        assert not is_feasible(availability, WeekDay.monday, 10, 120)

    def test_shorter_classes_are_never_less_feasible(self, weekday_teacher):
        availability = weekday_teacher.availability
        durations = [15, 30, 45, 60, 90, 120, 150, 180, 240]

        for day in WeekDay:
            for hour in range(HOURS_PER_DAY):
                for i, longer in enumerate(durations):
                    if not is_feasible(availability, day, hour, longer):
                        continue
                    for shorter in durations[:i]:
                        assert is_feasible(availability, day, hour, shorter)


def test_feasible_cells_covers_whole_week(monday_teacher):
    cells = feasible_cells(monday_teacher.availability, 60)
    assert cells == {(WeekDay.monday, 9), (WeekDay.monday, 10)}


def test_required_hours_rounds_up():
    assert required_hours(60) == 1
    assert required_hours(61) == 2
    assert required_hours(45) == 1


def test_end_time_uses_exact_minutes():
    assert class_end_time(9, 60) == "10:00"
    assert class_end_time(9, 90) == "10:30"
    assert class_end_time(23, 90) == "24:30"
