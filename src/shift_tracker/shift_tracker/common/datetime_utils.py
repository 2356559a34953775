from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time in ``tz`` (host local zone when None).

    Note: Wrapped so tests can patch/mocked easier.
    """
    if tz is None:
        return datetime.now()
    return datetime.now(tz=tz)


def resolve_tz(name: Optional[str]) -> Optional[tzinfo]:
    """Resolve a configured zone name.

    - None / "" / "local" / "system" -> None (host local rules, DST aware)
    - "UTC" / "Z" / "GMT" -> timezone.utc
    - IANA names, e.g. "Asia/Manila" -> ZoneInfo
    """
    if name is None:
        return None
    s = str(name).strip()
    low = s.lower()
    if not s or low in {"local", "system"}:
        return None
    if low in {"utc", "z", "gmt"}:
        return timezone.utc
    try:
        return ZoneInfo(s)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValidationError(f"Invalid timezone identifier: {s!r}") from ex


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    def __init__(self, tz: Optional[tzinfo] = None):
        self._tz = tz

    def now(self) -> datetime:
        return now_local(self._tz)
