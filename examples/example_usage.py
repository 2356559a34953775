"""Example: use the service layer directly (no Flask).

Prints the current month grid with the shifts fetched from the remote store.
Notifications go to stdout instead of Flask flashes.
"""

import importlib

from config import get_settings_module

from src.shift_tracker.shift_tracker.container import build_container
from src.shift_tracker.shift_tracker.core.constants import WEEKDAY_NAMES


class PrintNotifier:
    def notify(self, title, severity):
        print(f"[{severity.value}] {title}")


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        api_config=settings.API_CONFIG,
        calendar_weeks=settings.CALENDAR_WEEKS or None,
        display_timezone=settings.DISPLAY_TIMEZONE,
        notifier=PrintNotifier(),
    )

    service = container.new_shift_service()
    service.refresh()

    board = container.calendar_service.open_board(on_label=print)
    view = board.view(service.shifts)

    print(" ".join(name[:3] for name in WEEKDAY_NAMES))
    for week in range(view.weeks):
        row = view.cells[week * 7:(week + 1) * 7]
        print(" ".join(f"{c.date.day:>3}" + ("*" if c.shifts else " ") if c.current else "  . " for c in row))


if __name__ == "__main__":
    main()
