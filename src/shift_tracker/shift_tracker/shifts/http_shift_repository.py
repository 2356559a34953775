from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.exceptions import StoreError
from ..remote.connection import ApiConnection
from ..remote.http_base import api_call, json_body
from .model import ShiftPayload, ShiftRecord
from .repository import ShiftStore

SHIFT_ROOT = "api/shift"


def _written_record(body: Any, payload: ShiftPayload, shift_id: Optional[int] = None) -> ShiftRecord:
    """Record echoed by the store, or rebuilt from what was sent when the echo is incomplete."""
    if isinstance(body, dict) and body.get("start") and body.get("end"):
        return ShiftRecord.from_dict(body)
    if isinstance(body, dict) and body.get("id") is not None:
        shift_id = int(body["id"])
    return ShiftRecord(id=shift_id, start=payload.start, end=payload.end)


class HttpShiftStore(ShiftStore):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def list_all(self) -> Sequence[ShiftRecord]:
        with api_call(self._conn, "GET", SHIFT_ROOT) as resp:
            rows = json_body(resp) or []
            if not isinstance(rows, list):
                raise StoreError("Unexpected shift list payload", status_code=resp.status_code)
            try:
                return [ShiftRecord.from_dict(r) for r in rows]
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise StoreError("Malformed shift record", status_code=resp.status_code) from e

    def create(self, *, start: str, end: str) -> ShiftRecord:
        payload = ShiftPayload(start=start, end=end)
        with api_call(self._conn, "POST", SHIFT_ROOT, json=payload.to_dict()) as resp:
            return _written_record(json_body(resp), payload)

    def update(self, *, shift_id: int, start: str, end: str) -> ShiftRecord:
        payload = ShiftPayload(start=start, end=end)
        with api_call(self._conn, "PUT", f"{SHIFT_ROOT}/{int(shift_id)}", json=payload.to_dict()) as resp:
            return _written_record(json_body(resp), payload, int(shift_id))

    def delete(self, *, shift_id: int) -> None:
        with api_call(self._conn, "DELETE", f"{SHIFT_ROOT}/{int(shift_id)}"):
            return None
