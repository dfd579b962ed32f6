from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="api_get_settings")
    def api_get_settings():
        return jsonify({"success": True, "settings": container.settings_service.get_settings().to_dict()})

    @app.route("/api/settings", methods=["PUT"], endpoint="api_update_settings")
    def api_update_settings():
        data = request.get_json(silent=True) or {}
        try:
            settings = container.settings_service.update_settings(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "settings": settings.to_dict()})

    @app.route("/api/holidays", methods=["GET"], endpoint="api_get_holidays")
    def api_get_holidays():
        return jsonify(
            {"success": True, "holidays": [h.to_dict() for h in container.settings_service.get_holidays()]}
        )

    @app.route("/api/holidays", methods=["PUT"], endpoint="api_set_holidays")
    def api_set_holidays():
        data = request.get_json(silent=True) or {}
        items = data.get("holidays") if isinstance(data, dict) else data
        if not isinstance(items, list):
            return jsonify({"success": False, "message": "Danh sách ngày lễ không hợp lệ"}), 400
        try:
            holidays = container.settings_service.set_holidays(items)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "holidays": [h.to_dict() for h in holidays]})
