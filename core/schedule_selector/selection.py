"""
Grid selection state machine.

Drives the drag-to-select interaction on the weekly grid:

    Idle --mouse_down(feasible)--> Dragging(origin, span)
    Dragging --mouse_enter(cell)--> Dragging(origin, rectangle span)
    Dragging --mouse_up--> Idle               (0 cells: nothing happens,
                                               1 cell: toggled directly)
    Dragging --mouse_up--> PendingDecision    (2+ cells)
    PendingDecision --apply_add/apply_remove/cancel--> Idle

Losing pointer tracking resolves exactly like mouse_up. A selection with no
surface (teacher data still loading) is inert and ignores every gesture.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from ..constants import HOURS_PER_DAY
from ..enums import SelectionPhase, WeekDay
from .feasibility import class_end_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotCell:
    """One selectable (weekday, hour) cell of the weekly grid."""

    weekday: WeekDay
    hour: int

    def __post_init__(self):
        if not 0 <= self.hour < HOURS_PER_DAY:
            raise ValueError(f"Hour out of range: {self.hour}")

    @classmethod
    def at(cls, day_index: int, hour: int) -> "SlotCell":
        """Build a cell from display-order grid coordinates."""
        return cls(WeekDay.from_display_index(day_index), hour)

    @property
    def day_index(self) -> int:
        return self.weekday.display_index

    @property
    def start_time(self) -> str:
        return f"{self.hour:02d}:00"

    @property
    def key(self) -> str:
        return f"{self.weekday.value}-{self.start_time}"

    def sort_key(self) -> tuple[int, int]:
        return (self.day_index, self.hour)

    def end_time(self, class_duration_minutes: int) -> str:
        return class_end_time(self.hour, class_duration_minutes)


def sort_cells(cells: Iterable[SlotCell]) -> list[SlotCell]:
    """Cells in display order: Monday first, then by hour."""
    return sorted(cells, key=SlotCell.sort_key)


# =====================================================
# States
# =====================================================


@dataclass(frozen=True)
class Idle:
    phase = SelectionPhase.idle


@dataclass(frozen=True)
class Dragging:
    origin: SlotCell
    span: frozenset[SlotCell]
    phase = SelectionPhase.dragging


@dataclass(frozen=True)
class PendingDecision:
    span: frozenset[SlotCell]
    anchor: tuple[float, float] | None = None  # release point for the popover
    phase = SelectionPhase.pending_decision


SelectionState = Idle | Dragging | PendingDecision

IDLE = Idle()


class GridSelection:
    """
    Selected cells plus the in-flight drag state.

    is_selectable decides which cells may enter a span. It is consulted on
    every gesture, never cached, so callers can change what it answers
    (navigating weeks, switching modes) without notifying the selection.
    """

    def __init__(self, is_selectable: Callable[[SlotCell], bool] | None = None):
        self.is_selectable = is_selectable
        self.state: SelectionState = IDLE
        self._selected: set[SlotCell] = set()

    @property
    def interactive(self) -> bool:
        return self.is_selectable is not None

    @property
    def selected(self) -> frozenset[SlotCell]:
        return frozenset(self._selected)

    @property
    def pending_span(self) -> frozenset[SlotCell]:
        """Cells highlighted by the current drag or awaiting a decision."""
        if isinstance(self.state, (Dragging, PendingDecision)):
            return self.state.span
        return frozenset()

    def reset(self, is_selectable: Callable[[SlotCell], bool] | None) -> None:
        """Swap the selectable surface, dropping the selection and any drag."""
        self.is_selectable = is_selectable
        self.state = IDLE
        self._selected.clear()

    def can_select(self, cell: SlotCell) -> bool:
        return self.is_selectable is not None and self.is_selectable(cell)

    def span_between(self, a: SlotCell, b: SlotCell) -> frozenset[SlotCell]:
        """Selectable cells in the display-order rectangle spanned by a and b."""
        min_day, max_day = sorted((a.day_index, b.day_index))
        min_hour, max_hour = sorted((a.hour, b.hour))

        return frozenset(
            cell
            for day_index in range(min_day, max_day + 1)
            for hour in range(min_hour, max_hour + 1)
            if self.can_select(cell := SlotCell.at(day_index, hour))
        )

    # -------------------------------------------------
    # Pointer events
    # -------------------------------------------------

    def mouse_down(self, cell: SlotCell) -> bool:
        """
        Start a drag on cell.

        Returns:
            True if a drag started. Unselectable cells and inert grids are
            ignored and leave the state untouched.
        """
        if not self.can_select(cell):
            logger.debug(f"Ignoring mouse down on unselectable cell {cell.key}")
            return False

        # Starting a new drag discards an undecided span
        self.state = Dragging(origin=cell, span=frozenset({cell}))
        return True

    def mouse_enter(self, cell: SlotCell) -> None:
        if not isinstance(self.state, Dragging):
            return
        self.state = Dragging(
            origin=self.state.origin,
            span=self.span_between(self.state.origin, cell),
        )

    def mouse_up(self, anchor: tuple[float, float] | None = None) -> SelectionState:
        """
        Finish a drag.

        A single-cell span toggles that cell immediately. A multi-cell span is
        held in PendingDecision until apply_add, apply_remove or cancel.
        """
        if not isinstance(self.state, Dragging):
            return self.state

        span = self.state.span
        if len(span) == 0:
            self.state = IDLE
        elif len(span) == 1:
            self.toggle(next(iter(span)))
            self.state = IDLE
        else:
            self.state = PendingDecision(span=span, anchor=anchor)
        return self.state

    def pointer_lost(self) -> SelectionState:
        """Pointer left the tracked surface without a mouse up."""
        return self.mouse_up()

    # -------------------------------------------------
    # Pending decision
    # -------------------------------------------------

    def apply_add(self) -> None:
        if isinstance(self.state, PendingDecision):
            self._selected |= self.state.span
        self.state = IDLE

    def apply_remove(self) -> None:
        if isinstance(self.state, PendingDecision):
            self._selected -= self.state.span
        self.state = IDLE

    def cancel(self) -> None:
        self.state = IDLE

    # -------------------------------------------------
    # Direct edits
    # -------------------------------------------------

    def toggle(self, cell: SlotCell) -> bool:
        """Flip a cell's membership. Returns True if it is now selected."""
        if cell in self._selected:
            self._selected.discard(cell)
            return False
        self._selected.add(cell)
        return True

    def remove(self, cell: SlotCell) -> None:
        self._selected.discard(cell)

    def clear(self) -> None:
        self._selected.clear()

    def summary(self) -> str:
        """
        Describe the pending span, e.g. "MON, TUE • 09:00 - 11:00".

        The end is one hour past the latest start in the span.
        """
        span = self.pending_span
        if not span:
            return ""

        days = sorted({cell.weekday for cell in span}, key=lambda d: d.display_index)
        hours = sorted({cell.hour for cell in span})
        day_labels = ", ".join(day.short_label for day in days)
        return f"{day_labels} • {hours[0]:02d}:00 - {hours[-1] + 1:02d}:00"
