"""Tests for WeekDay conversions between display order and day-of-week numbers."""

from datetime import date

import pytest

from core.enums import WeekDay


def test_display_order_is_monday_first():
    assert [day.display_index for day in WeekDay] == list(range(7))
    assert WeekDay.from_display_index(0) == WeekDay.monday
    assert WeekDay.from_display_index(6) == WeekDay.sunday


def test_day_of_week_is_sunday_zero():
    assert WeekDay.sunday.day_of_week == 0
    assert WeekDay.monday.day_of_week == 1
    assert WeekDay.saturday.day_of_week == 6


def test_conversions_round_trip():
    for day in WeekDay:
        assert WeekDay.from_day_of_week(day.day_of_week) == day
        assert WeekDay.from_display_index(day.display_index) == day


def test_from_date():
    assert WeekDay.from_date(date(2024, 1, 1)) == WeekDay.monday
    assert WeekDay.from_date(date(2024, 1, 7)) == WeekDay.sunday


def test_labels():
    assert WeekDay.wednesday.label == "Wednesday"
    assert WeekDay.wednesday.short_label == "WED"


def test_parse():
    assert WeekDay.parse("Monday") == WeekDay.monday
    assert WeekDay.parse(" friday ") == WeekDay.friday
    assert WeekDay.parse(WeekDay.sunday) == WeekDay.sunday
    with pytest.raises(ValueError):
        WeekDay.parse("funday")


@pytest.mark.parametrize("value", [-1, 7])
def test_out_of_range_indexes(value):
    with pytest.raises(ValueError):
        WeekDay.from_day_of_week(value)
    with pytest.raises(ValueError):
        WeekDay.from_display_index(value)
