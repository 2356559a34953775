from __future__ import annotations

from flask import session

from ..container import Container
from .service import CalendarBoard

YEAR_KEY = "calendar_year"
MONTH_KEY = "calendar_month"


def load_board(container: Container) -> CalendarBoard:
    """Board for the month kept in the Flask session (seeded from the clock once)."""
    board = container.calendar_service.open_board(year=session.get(YEAR_KEY), month=session.get(MONTH_KEY))
    save_cursor(board)
    return board


def save_cursor(board: CalendarBoard) -> None:
    session[YEAR_KEY] = board.cursor.year
    session[MONTH_KEY] = board.cursor.month
