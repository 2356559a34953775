from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..notifications.notifier import drain_flashes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timezones", methods=["GET"], endpoint="timezone_choices")
    def timezone_choices():
        return jsonify({"success": True, "timezones": container.timezone_service.choices()})

    @app.route("/api/timezone", methods=["GET"], endpoint="timezone_get")
    def timezone_get():
        return jsonify({"success": True, "timezone": container.timezone_service.get_default()})

    @app.route("/api/timezone", methods=["PUT"], endpoint="timezone_save")
    def timezone_save():
        data = request.get_json(silent=True) or request.form
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400
        try:
            saved = container.timezone_service.save(str(data.get("timezone") or ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "timezone": saved, "notifications": drain_flashes()})
