from __future__ import annotations

from typing import Callable, Optional

from ..common.datetime_utils import Clock
from ..common.validators import require_month
from ..core.constants import MONTH_NAMES

CursorListener = Callable[["MonthCursor"], None]


class MonthCursor:
    """Displayed (year, month), month 1-based. Each move notifies ``on_change``."""

    def __init__(self, year: int, month: int, *, on_change: Optional[CursorListener] = None):
        self.year = int(year)
        self.month = require_month(month)
        self._on_change = on_change

    @classmethod
    def from_clock(cls, clock: Clock, *, on_change: Optional[CursorListener] = None) -> "MonthCursor":
        now = clock.now()
        cursor = cls(now.year, now.month, on_change=on_change)
        cursor.start()
        return cursor

    @property
    def label(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def subscribe(self, listener: CursorListener) -> None:
        self._on_change = listener

    def start(self) -> None:
        """Emit the initial state once, before any navigation."""
        self._emit()

    def advance(self) -> None:
        if self.month == 12:
            self.month = 1
            self.year += 1
        else:
            self.month += 1
        self._emit()

    def retreat(self) -> None:
        if self.month == 1:
            self.month = 12
            self.year -= 1
        else:
            self.month -= 1
        self._emit()

    def _emit(self) -> None:
        if self._on_change:
            self._on_change(self)
