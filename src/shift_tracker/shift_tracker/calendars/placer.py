from __future__ import annotations

from dataclasses import replace
from datetime import date, tzinfo
from typing import Iterable, Optional, Sequence

from ..common.time_codec import local_date_of
from ..shifts.model import ShiftRecord
from .model import CalendarCell


def place_shifts(
    cells: Sequence[CalendarCell],
    shifts: Iterable[ShiftRecord],
    *,
    tz: Optional[tzinfo] = None,
) -> list[CalendarCell]:
    """Attach each shift to the cell of its local start date.

    Returns new cells; shifts starting outside the grid are left out of this pass.
    """
    by_date: dict[date, list[ShiftRecord]] = {c.date: [] for c in cells}
    for record in shifts:
        bucket = by_date.get(local_date_of(record.start, tz=tz))
        if bucket is not None:
            bucket.append(record)
    return [replace(c, shifts=tuple(by_date[c.date])) for c in cells]
