from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..shifts.model import ShiftRecord


@dataclass(frozen=True)
class CalendarCell:
    """Một ô ngày trong lưới tháng (có thể thuộc tháng trước/sau)."""

    date: date
    current: bool
    shifts: tuple[ShiftRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "day": self.date.day,
            "current": self.current,
            "shifts": [s.to_dict() for s in self.shifts],
        }


@dataclass(frozen=True)
class CalendarView:
    year: int
    month: int
    label: str
    weeks: int
    cells: tuple[CalendarCell, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "label": self.label,
            "weeks": self.weeks,
            "cells": [c.to_dict() for c in self.cells],
        }
