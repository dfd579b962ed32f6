from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_instant
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="api_list_shifts")
    def api_list_shifts():
        active = container.shift_service.get_active_shift()
        return jsonify(
            {
                "success": True,
                "shifts": [s.to_dict() for s in container.shift_service.list_shifts()],
                "active_shift_id": active.shift_id if active else None,
            }
        )

    @app.route("/api/shifts", methods=["POST"], endpoint="api_create_shift")
    def api_create_shift():
        data = request.get_json(silent=True) or {}
        try:
            shift = container.shift_service.create_shift(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "shift": shift.to_dict()}), 201

    @app.route("/api/shifts/<shift_id>", methods=["PUT"], endpoint="api_update_shift")
    def api_update_shift(shift_id: str):
        data = request.get_json(silent=True) or {}
        try:
            shift = container.shift_service.update_shift(shift_id, data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "shift": shift.to_dict()})

    @app.route("/api/shifts/<shift_id>", methods=["DELETE"], endpoint="api_delete_shift")
    def api_delete_shift(shift_id: str):
        try:
            container.shift_service.delete_shift(shift_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True})

    @app.route("/api/shifts/<shift_id>/activate", methods=["POST"], endpoint="api_activate_shift")
    def api_activate_shift(shift_id: str):
        try:
            container.shift_service.set_active_shift(shift_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        return jsonify({"success": True, "active_shift_id": shift_id})

    @app.route("/api/shifts/rotate", methods=["POST"], endpoint="api_rotate_shift")
    def api_rotate_shift():
        data = request.get_json(silent=True) or {}
        try:
            now = parse_instant(data["now"]) if data.get("now") else now_local()
            shift = container.shift_service.check_and_rotate(now)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        active = container.shift_service.get_active_shift()
        return jsonify(
            {
                "success": True,
                "rotated": shift is not None,
                "active_shift_id": active.shift_id if active else None,
            }
        )
