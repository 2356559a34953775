from __future__ import annotations

from datetime import date

import pytest

from src.shift_tracker.shift_tracker.common.time_codec import compose_utc_instant, extract_local_time
from src.shift_tracker.shift_tracker.core.exceptions import ValidationError
from src.shift_tracker.shift_tracker.shifts.form import ShiftForm
from src.shift_tracker.shift_tracker.shifts.model import ShiftRecord


def test_new_form_defaults():
    form = ShiftForm.for_new("2025-05-24")

    assert form.local_date == "2025-05-24"
    assert form.local_start_time == "09:00"
    assert form.local_end_time == "17:00"
    assert form.editing_id is None
    assert form.title == "New Attendance"


def test_new_form_accepts_date_objects():
    assert ShiftForm.for_new(date(2025, 5, 3)).local_date == "2025-05-03"


def test_edit_form_derives_local_fields(manila):
    record = ShiftRecord(id=1, start="2025-05-15T10:00:00Z", end="2025-05-15T18:00:00Z", duration=8)

    form = ShiftForm.for_shift(record, tz=manila)

    assert form.editing_id == 1
    assert form.local_date == "2025-05-15"
    assert form.local_start_time == "18:00:00"
    assert form.local_end_time == "02:00:00"
    assert form.title == "Edit attendance 2025-05-15"


def test_edit_form_in_host_zone():
    record = ShiftRecord(id=1, start="2025-05-15T10:00:00Z", end="2025-05-15T18:00:00Z")

    form = ShiftForm.for_shift(record)

    assert form.local_start_time == extract_local_time(record.start, "")
    assert form.local_end_time == extract_local_time(record.end, "")


def test_payload_composes_utc_instants(manila):
    form = ShiftForm.for_new("2025-05-24", tz=manila)
    form.local_date = "2025-05-25"
    form.local_start_time = "10:00"
    form.local_end_time = "18:00"

    payload = form.to_payload()

    assert payload.start == "2025-05-25T02:00:00.000Z"
    assert payload.end == "2025-05-25T10:00:00.000Z"


def test_payload_in_host_zone():
    form = ShiftForm(local_date="2025-05-25", local_start_time="10:00", local_end_time="18:00")

    payload = form.validate()

    assert payload.start == compose_utc_instant("2025-05-25", "10:00")
    assert payload.end == compose_utc_instant("2025-05-25", "18:00")


@pytest.mark.parametrize("start,end", [("18:00", "10:00"), ("09:00", "09:00")])
def test_validate_rejects_empty_or_negative_interval(start, end, manila):
    form = ShiftForm(local_date="2025-05-25", local_start_time=start, local_end_time=end, tz=manila)

    with pytest.raises(ValidationError):
        form.validate()


def test_malformed_time_is_not_swallowed(manila):
    form = ShiftForm(local_date="2025-05-25", local_start_time="", local_end_time="18:00", tz=manila)

    with pytest.raises(ValueError):
        form.to_payload()
