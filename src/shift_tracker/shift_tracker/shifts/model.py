from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.time_codec import parse_instant


@dataclass(frozen=True)
class ShiftRecord:
    """Thực thể miền (domain): một ca làm việc đã lưu, mốc thời gian theo UTC."""

    id: Optional[int]
    start: str
    end: str
    duration: Optional[float] = None

    @property
    def hours(self) -> float:
        """Duration in hours, as supplied by the store or derived from start/end."""
        if self.duration is not None:
            return float(self.duration)
        delta = parse_instant(self.end) - parse_instant(self.start)
        return delta.total_seconds() / 3600

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShiftRecord":
        raw_id = data.get("id")
        raw_duration = data.get("duration")
        return cls(
            id=int(raw_id) if raw_id is not None else None,
            start=str(data["start"]),
            end=str(data["end"]),
            duration=float(raw_duration) if raw_duration is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "start": self.start,
            "end": self.end,
            "duration": self.hours,
        }


@dataclass(frozen=True)
class ShiftPayload:
    """Body sent to the store on create/update."""

    start: str
    end: str

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end}
