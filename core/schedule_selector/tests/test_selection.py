"""Tests for the grid selection state machine."""

import itertools

import pytest

from core.enums import SelectionPhase, WeekDay
from core.schedule_selector.feasibility import is_feasible
from core.schedule_selector.selection import (
    Dragging,
    GridSelection,
    Idle,
    PendingDecision,
    SlotCell,
)

MON, TUE, WED, SAT = WeekDay.monday, WeekDay.tuesday, WeekDay.wednesday, WeekDay.saturday


@pytest.fixture
def selection(weekday_teacher):
    """Selection over Mon-Fri 08:00-12:00 and 14:00-18:00, 60 minute classes."""

    def is_selectable(cell):
        return is_feasible(weekday_teacher.availability, cell.weekday, cell.hour, 60)

    return GridSelection(is_selectable)


def drag(selection, origin, target, anchor=None):
    selection.mouse_down(origin)
    selection.mouse_enter(target)
    return selection.mouse_up(anchor)


class TestSlotCell:
    def test_key_and_start_time(self):
        cell = SlotCell(MON, 9)
        assert cell.key == "monday-09:00"
        assert cell.start_time == "09:00"
        assert cell.end_time(90) == "10:30"

    def test_display_coordinates(self):
        assert SlotCell.at(0, 9) == SlotCell(MON, 9)
        assert SlotCell.at(6, 0).weekday == WeekDay.sunday

    def test_hour_out_of_range(self):
        with pytest.raises(ValueError):
            SlotCell(MON, 24)


class TestMouseDown:
    def test_infeasible_cell_does_not_start_drag(self, selection):
        assert selection.mouse_down(SlotCell(MON, 12)) is False
        assert isinstance(selection.state, Idle)
        assert selection.selected == frozenset()

    def test_feasible_cell_starts_drag(self, selection):
        assert selection.mouse_down(SlotCell(MON, 9)) is True
        assert selection.state == Dragging(
            origin=SlotCell(MON, 9), span=frozenset({SlotCell(MON, 9)})
        )
        assert selection.state.phase == SelectionPhase.dragging

    def test_inert_grid_ignores_gestures(self):
        selection = GridSelection()

        assert not selection.interactive
        assert selection.mouse_down(SlotCell(MON, 9)) is False
        assert isinstance(selection.mouse_up(), Idle)

    def test_new_drag_discards_undecided_span(self, selection):
        drag(selection, SlotCell(MON, 9), SlotCell(MON, 10))
        assert isinstance(selection.state, PendingDecision)

        selection.mouse_down(SlotCell(TUE, 15))

        assert isinstance(selection.state, Dragging)
        assert selection.pending_span == frozenset({SlotCell(TUE, 15)})
        assert selection.selected == frozenset()


class TestSingleCell:
    def test_click_toggles_membership(self, selection):
        drag(selection, SlotCell(MON, 9), SlotCell(MON, 9))
        assert selection.selected == frozenset({SlotCell(MON, 9)})
        assert isinstance(selection.state, Idle)

    def test_toggle_twice_restores_selection(self, selection):
        selection.toggle(SlotCell(TUE, 8))
        before = selection.selected

        drag(selection, SlotCell(MON, 9), SlotCell(MON, 9))
        drag(selection, SlotCell(MON, 9), SlotCell(MON, 9))

        assert selection.selected == before

    def test_pointer_lost_commits_like_mouse_up(self, selection):
        selection.mouse_down(SlotCell(MON, 9))
        selection.pointer_lost()

        assert isinstance(selection.state, Idle)
        assert SlotCell(MON, 9) in selection.selected


class TestDragRectangle:
    def test_span_is_rectangle_between_origin_and_target(self, selection):
        selection.mouse_down(SlotCell(MON, 9))
        selection.mouse_enter(SlotCell(WED, 10))

        assert selection.pending_span == {
            SlotCell(day, hour) for day in (MON, TUE, WED) for hour in (9, 10)
        }

    def test_dragging_backwards_spans_the_same_rectangle(self, selection):
        selection.mouse_down(SlotCell(WED, 10))
        selection.mouse_enter(SlotCell(MON, 9))

        assert len(selection.pending_span) == 6

    def test_infeasible_cells_are_skipped(self, selection):
        selection.mouse_down(SlotCell(MON, 11))
        selection.mouse_enter(SlotCell(MON, 14))

        # 12:00 and 13:00 fall in the lunch gap
        assert selection.pending_span == {SlotCell(MON, 11), SlotCell(MON, 14)}

    def test_span_shrinks_when_pointer_moves_back(self, selection):
        selection.mouse_down(SlotCell(MON, 8))
        selection.mouse_enter(SlotCell(MON, 11))
        selection.mouse_enter(SlotCell(MON, 9))

        assert selection.pending_span == {SlotCell(MON, 8), SlotCell(MON, 9)}

    def test_span_is_exactly_the_selectable_part_of_the_rectangle(self, selection):
        corners = [SlotCell(MON, 7), SlotCell(WED, 15), SlotCell(SAT, 10), SlotCell(TUE, 11)]

        for a, b in itertools.product(corners, repeat=2):
            span = selection.span_between(a, b)
            days = range(min(a.day_index, b.day_index), max(a.day_index, b.day_index) + 1)
            hours = range(min(a.hour, b.hour), max(a.hour, b.hour) + 1)
            rectangle = {SlotCell.at(d, h) for d in days for h in hours}

            assert span == {c for c in rectangle if selection.can_select(c)}

    def test_mouse_enter_without_drag_is_ignored(self, selection):
        selection.mouse_enter(SlotCell(MON, 9))
        assert isinstance(selection.state, Idle)


class TestPendingDecision:
    def test_multi_cell_release_waits_for_decision(self, selection):
        state = drag(selection, SlotCell(MON, 9), SlotCell(MON, 11), anchor=(120.0, 340.0))

        assert isinstance(state, PendingDecision)
        assert state.anchor == (120.0, 340.0)
        assert state.phase == SelectionPhase.pending_decision
        assert selection.selected == frozenset()

    def test_add_unions_span(self, selection):
        selection.toggle(SlotCell(MON, 9))
        selection.toggle(SlotCell(TUE, 8))
        before = selection.selected

        drag(selection, SlotCell(MON, 9), SlotCell(MON, 11))
        span = selection.pending_span
        selection.apply_add()

        assert len(span) == 3
        assert selection.selected == before | span
        assert isinstance(selection.state, Idle)
        assert selection.pending_span == frozenset()

    def test_remove_subtracts_only_present_cells(self, selection):
        selection.toggle(SlotCell(MON, 9))
        selection.toggle(SlotCell(TUE, 8))

        drag(selection, SlotCell(MON, 9), SlotCell(MON, 11))
        selection.apply_remove()

        assert selection.selected == frozenset({SlotCell(TUE, 8)})
        assert isinstance(selection.state, Idle)

    def test_cancel_leaves_selection_untouched(self, selection):
        selection.toggle(SlotCell(MON, 9))

        drag(selection, SlotCell(MON, 8), SlotCell(TUE, 11))
        selection.cancel()

        assert selection.selected == frozenset({SlotCell(MON, 9)})
        assert isinstance(selection.state, Idle)

    def test_mouse_up_while_pending_is_ignored(self, selection):
        drag(selection, SlotCell(MON, 9), SlotCell(MON, 11))
        state = selection.mouse_up()

        assert isinstance(state, PendingDecision)

    def test_summary_describes_span(self, selection):
        drag(selection, SlotCell(TUE, 10), SlotCell(MON, 9))
        assert selection.summary() == "MON, TUE • 09:00 - 11:00"

    def test_summary_empty_when_idle(self, selection):
        assert selection.summary() == ""


def test_drag_over_blocked_area_changes_nothing():
    allowed = {SlotCell(MON, 9)}
    selection = GridSelection(lambda cell: cell in allowed)

    selection.mouse_down(SlotCell(MON, 9))
    allowed.clear()
    selection.mouse_enter(SlotCell(MON, 9))
    state = selection.mouse_up()

    assert isinstance(state, Idle)
    assert selection.selected == frozenset()


def test_reset_drops_selection_and_drag(selection):
    selection.toggle(SlotCell(MON, 9))
    selection.mouse_down(SlotCell(TUE, 9))

    selection.reset(None)

    assert selection.selected == frozenset()
    assert isinstance(selection.state, Idle)
    assert not selection.interactive


def test_remove_and_clear(selection):
    selection.toggle(SlotCell(MON, 9))
    selection.toggle(SlotCell(MON, 10))

    selection.remove(SlotCell(MON, 9))
    assert selection.selected == frozenset({SlotCell(MON, 10)})

    selection.clear()
    assert selection.selected == frozenset()
