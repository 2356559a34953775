from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any, Optional, Union

from ..common.time_codec import compose_utc_instant, extract_local_date, extract_local_time, parse_instant
from ..core.constants import DEFAULT_END_TIME, DEFAULT_START_TIME
from ..core.exceptions import ValidationError
from .model import ShiftPayload, ShiftRecord


@dataclass
class ShiftForm:
    """Editable local fields of one shift (new entry or existing record).

    ``local_start_time``/``local_end_time`` are "HH:MM" or "HH:MM:SS"; ``editing_id`` is
    only set when an existing record is being modified.
    """

    local_date: str
    local_start_time: str
    local_end_time: str
    editing_id: Optional[int] = None
    tz: Optional[tzinfo] = None

    @classmethod
    def for_new(cls, day: Union[date, str], *, tz: Optional[tzinfo] = None) -> "ShiftForm":
        local_date = day.strftime("%Y-%m-%d") if isinstance(day, date) else str(day)
        return cls(
            local_date=local_date,
            local_start_time=extract_local_time(None, DEFAULT_START_TIME, tz=tz),
            local_end_time=extract_local_time(None, DEFAULT_END_TIME, tz=tz),
            editing_id=None,
            tz=tz,
        )

    @classmethod
    def for_shift(cls, record: ShiftRecord, *, tz: Optional[tzinfo] = None) -> "ShiftForm":
        return cls(
            local_date=extract_local_date(record.start, tz=tz),
            local_start_time=extract_local_time(record.start, DEFAULT_START_TIME, tz=tz),
            local_end_time=extract_local_time(record.end, DEFAULT_END_TIME, tz=tz),
            editing_id=record.id,
            tz=tz,
        )

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def title(self) -> str:
        if not self.is_editing:
            return "New Attendance"
        return f"Edit attendance {self.local_date}"

    def to_payload(self) -> ShiftPayload:
        return ShiftPayload(
            start=compose_utc_instant(self.local_date, self.local_start_time, tz=self.tz),
            end=compose_utc_instant(self.local_date, self.local_end_time, tz=self.tz),
        )

    def validate(self) -> ShiftPayload:
        """Build the payload and reject empty or negative intervals."""
        payload = self.to_payload()
        if parse_instant(payload.end) <= parse_instant(payload.start):
            raise ValidationError("End time must be after start time")
        return payload

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "local_date": self.local_date,
            "local_start_time": self.local_start_time,
            "local_end_time": self.local_end_time,
            "editing_id": self.editing_id,
        }
