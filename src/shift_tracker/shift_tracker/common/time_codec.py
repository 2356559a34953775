"""Conversions between stored UTC instants and the local fields a person edits.

Every function takes an optional ``tz``. ``None`` means the host's local zone, resolved
through ``datetime.astimezone()`` so daylight-saving rules of the host apply; an explicit
``tzinfo`` (usually a ``ZoneInfo``) makes the result independent of where the code runs.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

from .datetime_utils import parse_iso_date

_BARE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_FRACTION_RE = re.compile(r"(:\d{2})\.(\d+)")


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant into an aware UTC datetime.

    A trailing ``Z`` is accepted. Values without an offset are stored instants and are
    therefore read as UTC.
    """
    s = value.strip()
    if s[-1:] in {"Z", "z"}:
        s = s[:-1] + "+00:00"
    # fromisoformat before 3.11 takes only 3 or 6 fraction digits
    s = _FRACTION_RE.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", s, count=1)
    moment = datetime.fromisoformat(s)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _in_zone(moment: datetime, tz: Optional[tzinfo]) -> datetime:
    return moment.astimezone(tz) if tz is not None else moment.astimezone()


def extract_local_time(instant: Optional[str], fallback: str, *, tz: Optional[tzinfo] = None) -> str:
    """Render ``instant`` as local ``HH:MM:SS``, or return ``fallback`` untouched."""
    if not instant:
        return fallback
    return _in_zone(parse_instant(instant), tz).strftime("%H:%M:%S")


def extract_local_date(value: str, *, tz: Optional[tzinfo] = None) -> str:
    """Render the local calendar date (YYYY-MM-DD) of an instant.

    Bare dates are already local dates and come back unchanged.
    """
    if _BARE_DATE_RE.match(value.strip()):
        return value.strip()
    return local_date_of(value, tz=tz).strftime("%Y-%m-%d")


def local_date_of(instant: str, *, tz: Optional[tzinfo] = None) -> date:
    return _in_zone(parse_instant(instant), tz).date()


def compose_utc_instant(local_date: str, local_time: str, *, tz: Optional[tzinfo] = None) -> str:
    """Read (date, time) as wall-clock time in ``tz`` and return the UTC instant.

    Output has millisecond precision and a trailing ``Z``, e.g. ``2025-05-25T02:00:00.000Z``.
    """
    wall = datetime.combine(parse_iso_date(local_date.strip()), time.fromisoformat(local_time.strip()))
    aware = wall.astimezone() if tz is None else wall.replace(tzinfo=tz)
    utc = aware.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
