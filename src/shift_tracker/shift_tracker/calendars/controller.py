from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.constants import WEEKDAY_NAMES
from ..notifications.notifier import drain_flashes
from .service import CalendarBoard
from .session_state import load_board, save_cursor


def register(app: Flask, container: Container) -> None:
    def _render(board: CalendarBoard):
        service = container.new_shift_service()
        service.refresh()
        return jsonify(
            {
                "success": True,
                "days": list(WEEKDAY_NAMES),
                "calendar": board.view(service.shifts).to_dict(),
                "notifications": drain_flashes(),
            }
        )

    @app.route("/api/calendar", methods=["GET"], endpoint="calendar")
    def calendar_view():
        return _render(load_board(container))

    @app.route("/api/calendar/next", methods=["POST"], endpoint="calendar_next")
    def calendar_next():
        board = load_board(container)
        board.next_month()
        save_cursor(board)
        return _render(board)

    @app.route("/api/calendar/prev", methods=["POST"], endpoint="calendar_prev")
    def calendar_prev():
        board = load_board(container)
        board.prev_month()
        save_cursor(board)
        return _render(board)
