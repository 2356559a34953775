from __future__ import annotations

from flask import Flask, jsonify, request

from ..calendars.session_state import load_board
from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.notifier import drain_flashes
from .service import ShiftService


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message, "notifications": drain_flashes()}), status

    def _loaded_service() -> ShiftService:
        service = container.new_shift_service()
        service.refresh()
        return service

    def _result(ok: bool, service: ShiftService):
        board = load_board(container)
        return jsonify(
            {
                "success": ok,
                "shifts": [s.to_dict() for s in service.shifts],
                "calendar": board.view(service.shifts).to_dict(),
                "notifications": drain_flashes(),
            }
        )

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    def shifts_list():
        service = _loaded_service()
        return jsonify(
            {
                "success": True,
                "shifts": [s.to_dict() for s in service.shifts],
                "notifications": drain_flashes(),
            }
        )

    @app.route("/api/shifts/new", methods=["GET"], endpoint="shifts_new")
    def shifts_new():
        day_s = request.args.get("date") or container.clock.now().strftime("%Y-%m-%d")
        try:
            day = parse_iso_date(day_s)
        except ValueError:
            return _fail("Invalid date (YYYY-MM-DD)", 400)

        editor = container.new_shift_editor(container.new_shift_service())
        form = editor.open_new(day)
        return jsonify({"success": True, "form": form.to_dict()})

    @app.route("/api/shifts/<int:shift_id>/edit", methods=["GET"], endpoint="shifts_edit")
    def shifts_edit(shift_id: int):
        service = _loaded_service()
        try:
            record = service.find(shift_id)
        except NotFoundError as e:
            return _fail(str(e), 404)

        form = container.new_shift_editor(service).open_shift(record)
        return jsonify({"success": True, "form": form.to_dict(), "shift": record.to_dict()})

    @app.route("/api/shifts", methods=["POST"], endpoint="shifts_save")
    def shifts_save():
        data = request.get_json(silent=True) or request.form
        if not isinstance(data, dict):
            return _fail("Expected a JSON object", 400)
        raw_id = data.get("editing_id")
        try:
            editing_id = int(raw_id) if raw_id not in (None, "") else None
        except (TypeError, ValueError):
            return _fail("Invalid editing_id", 400)

        service = _loaded_service()
        editor = container.new_shift_editor(service)
        editor.open_fields(
            local_date=str(data.get("local_date") or ""),
            local_start_time=str(data.get("local_start_time") or ""),
            local_end_time=str(data.get("local_end_time") or ""),
            editing_id=editing_id,
        )
        try:
            ok = editor.save()
        except ValueError:
            return _fail("Invalid date or time (YYYY-MM-DD, HH:MM)", 400)
        except ValidationError as e:
            return _fail(str(e), 400)
        return _result(ok, service)

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="shifts_delete")
    def shifts_delete(shift_id: int):
        service = _loaded_service()
        try:
            record = service.find(shift_id)
        except NotFoundError as e:
            return _fail(str(e), 404)

        editor = container.new_shift_editor(service)
        editor.open_shift(record)
        ok = editor.delete()
        return _result(ok, service)
