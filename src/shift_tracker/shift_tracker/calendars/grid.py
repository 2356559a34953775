from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional

from ..common.validators import require_month, require_positive
from ..core.constants import DAYS_PER_WEEK, DEFAULT_CALENDAR_WEEKS
from .model import CalendarCell


def leading_days(year: int, month: int, *, first_weekday: int = 0) -> int:
    """Days of the previous month shown before day 1 (0 = Monday-first)."""
    return (date(year, month, 1).weekday() - first_weekday) % DAYS_PER_WEEK


def weeks_needed(year: int, month: int, *, first_weekday: int = 0) -> int:
    """Rows required to show every day of the month (4 to 6)."""
    require_month(month)
    days_in_month = calendar.monthrange(year, month)[1]
    filled = leading_days(year, month, first_weekday=first_weekday) + days_in_month
    return -(-filled // DAYS_PER_WEEK)


def build_month_grid(
    year: int,
    month: int,
    *,
    weeks: Optional[int] = DEFAULT_CALENDAR_WEEKS,
    first_weekday: int = 0,
) -> list[CalendarCell]:
    """Return ``weeks * 7`` consecutive day cells starting on the week of day 1.

    ``weeks=None`` sizes the grid to cover the whole month. With the fixed default of five
    rows, months that spill into a sixth row lose their trailing days.
    """
    require_month(month)
    if weeks is None:
        weeks = weeks_needed(year, month, first_weekday=first_weekday)
    weeks = require_positive(weeks, "weeks")

    first = date(year, month, 1) - timedelta(days=leading_days(year, month, first_weekday=first_weekday))
    cells: list[CalendarCell] = []
    for offset in range(weeks * DAYS_PER_WEEK):
        d = first + timedelta(days=offset)
        cells.append(CalendarCell(date=d, current=(d.year, d.month) == (year, month)))
    return cells
