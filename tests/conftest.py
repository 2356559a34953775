from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest


class FixedClock:
    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now


@pytest.fixture
def manila():
    # UTC+8 all year (no DST)
    return ZoneInfo("Asia/Manila")


@pytest.fixture
def fixed_now(manila) -> datetime:
    return datetime(2025, 5, 24, 20, 0, 0, tzinfo=manila)


@pytest.fixture
def fixed_clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)
