from __future__ import annotations

import pytest

from src.shift_tracker.shift_tracker.common.time_codec import compose_utc_instant
from src.shift_tracker.shift_tracker.core.enums import Severity
from src.shift_tracker.shift_tracker.core.exceptions import StoreError, ValidationError
from src.shift_tracker.shift_tracker.shifts.editor import ShiftEditor
from src.shift_tracker.shift_tracker.shifts.model import ShiftRecord
from src.shift_tracker.shift_tracker.shifts.service import ShiftService


class FakeShiftStore:
    def __init__(self, rows=None, *, fail=False):
        self.rows = list(rows or [])
        self.fail = fail
        self.created: list[tuple[str, str]] = []
        self.updated: list[tuple[int, str, str]] = []
        self.deleted: list[int] = []

    def list_all(self):
        return list(self.rows)

    def create(self, *, start, end):
        if self.fail:
            raise StoreError("Failed to save shift")
        self.created.append((start, end))
        rec = ShiftRecord(id=len(self.rows) + 1, start=start, end=end)
        self.rows.append(rec)
        return rec

    def update(self, *, shift_id, start, end):
        if self.fail:
            raise StoreError("Failed to update shift")
        self.updated.append((shift_id, start, end))
        return ShiftRecord(id=shift_id, start=start, end=end)

    def delete(self, *, shift_id):
        if self.fail:
            raise StoreError("Failed to delete shift")
        self.deleted.append(shift_id)


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, title, severity):
        self.messages.append((title, severity))


def _editor(store, tz=None):
    notifier = RecordingNotifier()
    return ShiftEditor(ShiftService(store, notifier), notifier, tz=tz), notifier


def test_save_new_entry_creates_without_id(manila):
    store = FakeShiftStore()
    editor, notifier = _editor(store, tz=manila)

    form = editor.open_new("2025-05-24")
    form.local_date = "2025-05-25"
    form.local_start_time = "10:00"
    form.local_end_time = "18:00"

    assert editor.save() is True
    assert store.created == [("2025-05-25T02:00:00.000Z", "2025-05-25T10:00:00.000Z")]
    assert store.updated == []
    assert editor.is_open is False
    assert notifier.messages == [("Shift saved successfully", Severity.SUCCESS)]


def test_save_in_host_zone_matches_local_wall_clock():
    store = FakeShiftStore()
    editor, _ = _editor(store)

    editor.open_fields(local_date="2025-05-25", local_start_time="10:00", local_end_time="18:00")
    editor.save()

    assert store.created == [
        (compose_utc_instant("2025-05-25", "10:00"), compose_utc_instant("2025-05-25", "18:00"))
    ]


def test_save_existing_shift_updates_with_id(manila):
    record = ShiftRecord(id=5, start="2025-05-15T01:00:00Z", end="2025-05-15T09:00:00Z", duration=8)
    store = FakeShiftStore([record])
    editor, notifier = _editor(store, tz=manila)

    form = editor.open_shift(record)
    assert (form.local_start_time, form.local_end_time) == ("09:00:00", "17:00:00")
    form.local_start_time = "08:00"
    form.local_end_time = "16:00"

    assert editor.save() is True
    assert store.updated == [(5, "2025-05-15T00:00:00.000Z", "2025-05-15T08:00:00.000Z")]
    assert notifier.messages[-1] == ("Shift updated successfully", Severity.SUCCESS)


def test_failed_save_still_closes_editor(manila):
    store = FakeShiftStore(fail=True)
    editor, notifier = _editor(store, tz=manila)
    editor.open_new("2025-05-24")

    assert editor.save() is False
    assert editor.is_open is False
    assert notifier.messages == [("Error: Failed to save shift", Severity.ERROR)]


def test_negative_interval_is_rejected_before_request(manila):
    store = FakeShiftStore()
    editor, notifier = _editor(store, tz=manila)
    form = editor.open_new("2025-05-24")
    form.local_start_time = "18:00"
    form.local_end_time = "10:00"

    assert editor.save() is False
    assert store.created == []
    assert editor.is_open is False
    assert notifier.messages == [("Error: End time must be after start time", Severity.ERROR)]


def test_delete_existing_shift(manila):
    record = ShiftRecord(id=10, start="2025-05-15T09:00:00Z", end="2025-05-15T17:00:00Z")
    store = FakeShiftStore([record])
    editor, notifier = _editor(store, tz=manila)
    editor.open_shift(record)

    assert editor.delete() is True
    assert store.deleted == [10]
    assert editor.is_open is False
    assert notifier.messages == [("Shift deleted successfully", Severity.SUCCESS)]


def test_delete_in_create_mode_only_closes():
    store = FakeShiftStore()
    editor, notifier = _editor(store)
    editor.open_new("2025-05-24")

    assert editor.delete() is False
    assert store.deleted == []
    assert editor.is_open is False
    assert notifier.messages == []


def test_failed_delete_still_closes(manila):
    record = ShiftRecord(id=10, start="2025-05-15T09:00:00Z", end="2025-05-15T17:00:00Z")
    editor, notifier = _editor(FakeShiftStore([record], fail=True), tz=manila)
    editor.open_shift(record)

    assert editor.delete() is False
    assert editor.is_open is False
    assert notifier.messages == [("Error: Failed to delete shift", Severity.ERROR)]


def test_actions_require_open_editor():
    editor, _ = _editor(FakeShiftStore())

    with pytest.raises(ValidationError):
        editor.save()
    with pytest.raises(ValidationError):
        editor.delete()
