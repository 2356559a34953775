from __future__ import annotations

from datetime import tzinfo
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import Clock
from ..core.constants import DEFAULT_CALENDAR_WEEKS
from ..shifts.model import ShiftRecord
from .cursor import MonthCursor
from .grid import build_month_grid, weeks_needed
from .model import CalendarCell, CalendarView
from .placer import place_shifts


class CalendarBoard:
    """Month cursor wired to the grid builder and shift placement.

    Every cursor move rebuilds the grid from scratch and forwards the "Month Year" label to
    ``on_label``. The board emits once on creation.
    """

    def __init__(
        self,
        cursor: MonthCursor,
        *,
        weeks: Optional[int] = DEFAULT_CALENDAR_WEEKS,
        tz: Optional[tzinfo] = None,
        on_label: Optional[Callable[[str], None]] = None,
    ):
        self.cursor = cursor
        self._weeks = weeks
        self._tz = tz
        self._on_label = on_label
        self.cells: list[CalendarCell] = []
        cursor.subscribe(self._rebuild)
        cursor.start()

    def _rebuild(self, cursor: MonthCursor) -> None:
        self.cells = build_month_grid(cursor.year, cursor.month, weeks=self._weeks)
        if self._on_label:
            self._on_label(cursor.label)

    @property
    def weeks(self) -> int:
        if self._weeks is None:
            return weeks_needed(self.cursor.year, self.cursor.month)
        return int(self._weeks)

    def next_month(self) -> None:
        self.cursor.advance()

    def prev_month(self) -> None:
        self.cursor.retreat()

    def view(self, shifts: Iterable[ShiftRecord] = ()) -> CalendarView:
        return CalendarView(
            year=self.cursor.year,
            month=self.cursor.month,
            label=self.cursor.label,
            weeks=self.weeks,
            cells=tuple(place_shifts(self.cells, shifts, tz=self._tz)),
        )


class CalendarService:
    def __init__(self, clock: Clock, *, weeks: Optional[int] = DEFAULT_CALENDAR_WEEKS, tz: Optional[tzinfo] = None):
        self._clock = clock
        self._weeks = weeks
        self._tz = tz

    def open_board(
        self,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        on_label: Optional[Callable[[str], None]] = None,
    ) -> CalendarBoard:
        """Board at (year, month), or at the clock's current month when either is missing."""
        if year is None or month is None:
            cursor = MonthCursor.from_clock(self._clock)
        else:
            cursor = MonthCursor(year, month)
        return CalendarBoard(cursor, weeks=self._weeks, tz=self._tz, on_label=on_label)
