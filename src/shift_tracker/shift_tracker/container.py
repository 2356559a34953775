from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from .calendars.service import CalendarService
from .common.datetime_utils import Clock, SystemClock, resolve_tz
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_CALENDAR_WEEKS
from .notifications.notifier import FlashNotifier, Notifier
from .remote.connection import ApiConfig, ApiConnection
from .shifts.editor import ShiftEditor
from .shifts.http_shift_repository import HttpShiftStore
from .shifts.repository import ShiftStore
from .shifts.service import ShiftService
from .timezones.http_timezone_repository import HttpTimezoneStore
from .timezones.repository import TimezoneStore
from .timezones.service import TimezoneService


@dataclass(frozen=True)
class Container:
    shifts_store: ShiftStore
    timezones_store: TimezoneStore
    notifier: Notifier
    clock: Clock
    display_tz: Optional[tzinfo]

    calendar_service: CalendarService
    timezone_service: TimezoneService

    def new_shift_service(self) -> ShiftService:
        """Shift collection scoped to one request/render cycle."""
        return ShiftService(self.shifts_store, self.notifier)

    def new_shift_editor(self, service: ShiftService) -> ShiftEditor:
        return ShiftEditor(service, self.notifier, tz=self.display_tz)


def build_container(
    *,
    api_config: dict,
    calendar_weeks: Optional[int] = DEFAULT_CALENDAR_WEEKS,
    display_timezone: Optional[str] = None,
    shifts_store: Optional[ShiftStore] = None,
    timezones_store: Optional[TimezoneStore] = None,
    notifier: Optional[Notifier] = None,
    clock: Optional[Clock] = None,
) -> Container:
    display_tz = resolve_tz(display_timezone)

    if shifts_store is None or timezones_store is None:
        conn = ApiConnection.get_instance(
            ApiConfig(
                base_url=str(api_config["base_url"]),
                timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
            )
        )
        shifts_store = shifts_store or HttpShiftStore(conn)
        timezones_store = timezones_store or HttpTimezoneStore(conn)

    notifier = notifier or FlashNotifier()
    clock = clock or SystemClock(display_tz)

    calendar_service = CalendarService(clock, weeks=calendar_weeks, tz=display_tz)
    timezone_service = TimezoneService(timezones_store, notifier)

    return Container(
        shifts_store=shifts_store,
        timezones_store=timezones_store,
        notifier=notifier,
        clock=clock,
        display_tz=display_tz,
        calendar_service=calendar_service,
        timezone_service=timezone_service,
    )
