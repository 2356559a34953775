from __future__ import annotations

from typing import Protocol, Sequence

from .model import ShiftRecord


class ShiftStore(Protocol):
    """Remote shift resource. Every operation raises StoreError on failure."""

    def list_all(self) -> Sequence[ShiftRecord]:
        raise NotImplementedError

    def create(self, *, start: str, end: str) -> ShiftRecord:
        raise NotImplementedError

    def update(self, *, shift_id: int, start: str, end: str) -> ShiftRecord:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> None:
        raise NotImplementedError
