from __future__ import annotations

import pytest

from src.shift_tracker.shift_tracker.shifts.model import ShiftRecord


def test_hours_prefers_supplied_duration():
    record = ShiftRecord(id=1, start="2025-05-15T09:00:00Z", end="2025-05-15T17:00:00Z", duration=7.5)
    assert record.hours == 7.5


def test_hours_derived_from_instants():
    record = ShiftRecord(id=1, start="2025-05-15T09:00:00Z", end="2025-05-15T17:30:00Z")
    assert record.hours == pytest.approx(8.5)


def test_from_dict_and_to_dict():
    record = ShiftRecord.from_dict({"id": "3", "start": "2025-02-01T08:00:00Z", "end": "2025-02-01T16:00:00Z"})

    assert record.id == 3
    assert record.duration is None
    assert record.to_dict() == {
        "id": 3,
        "start": "2025-02-01T08:00:00Z",
        "end": "2025-02-01T16:00:00Z",
        "duration": 8.0,
    }
