from __future__ import annotations

from typing import Protocol


class TimezoneStore(Protocol):
    """Remote default-timezone preference. Raises StoreError on failure."""

    def get_default(self) -> str:
        raise NotImplementedError

    def set_default(self, name: str) -> str:
        raise NotImplementedError
