from __future__ import annotations

from datetime import date

from src.shift_tracker.shift_tracker.calendars.cursor import MonthCursor
from src.shift_tracker.shift_tracker.calendars.service import CalendarBoard, CalendarService
from src.shift_tracker.shift_tracker.shifts.model import ShiftRecord


def test_board_emits_initial_label_and_builds_grid():
    labels = []
    board = CalendarBoard(MonthCursor(2025, 5), on_label=labels.append)

    assert labels == ["May 2025"]
    assert len(board.cells) == 35
    assert board.cells[0].date == date(2025, 4, 28)


def test_navigation_rebuilds_grid_and_emits():
    labels = []
    board = CalendarBoard(MonthCursor(2025, 5), on_label=labels.append)

    board.next_month()
    assert labels == ["May 2025", "June 2025"]
    assert board.cells[0].date == date(2025, 5, 26)

    board.prev_month()
    assert labels[-1] == "May 2025"
    assert board.cells[0].date == date(2025, 4, 28)


def test_view_places_shifts(manila):
    record = ShiftRecord(id=1, start="2025-05-20T10:00:00Z", end="2025-05-20T18:00:00Z", duration=8)
    board = CalendarBoard(MonthCursor(2025, 5), tz=manila)

    view = board.view([record])

    assert view.label == "May 2025"
    assert view.weeks == 5
    placed = [c for c in view.cells if c.shifts]
    assert [c.date for c in placed] == [date(2025, 5, 20)]
    assert view.to_dict()["cells"][placed[0].date.day + 2]["shifts"][0]["duration"] == 8


def test_view_is_recomputed_for_new_collections(manila):
    board = CalendarBoard(MonthCursor(2025, 5), tz=manila)
    first = ShiftRecord(id=1, start="2025-05-02T01:00:00Z", end="2025-05-02T09:00:00Z")

    assert sum(len(c.shifts) for c in board.view([first]).cells) == 1
    assert sum(len(c.shifts) for c in board.view([]).cells) == 0


def test_auto_weeks_board():
    board = CalendarBoard(MonthCursor(2025, 3), weeks=None)
    assert board.weeks == 6
    assert len(board.view().cells) == 42


def test_service_opens_board_at_clock_month(fixed_clock):
    board = CalendarService(fixed_clock).open_board()
    assert (board.cursor.year, board.cursor.month) == (2025, 5)


def test_service_opens_board_at_given_month(fixed_clock):
    labels = []
    board = CalendarService(fixed_clock).open_board(year=2024, month=12, on_label=labels.append)

    assert labels == ["December 2024"]
    board.next_month()
    assert labels[-1] == "January 2025"
