from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_instant, parse_iso_date
from ..core.exceptions import NoActiveShiftError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/days/<day>", methods=["GET"], endpoint="api_day_status")
    def api_day_status(day: str):
        try:
            record = container.day_status_service.get_status(parse_iso_date(day))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        if record is None:
            return jsonify({"success": False, "message": "Chưa có trạng thái cho ngày này"}), 404
        return jsonify({"success": True, "status": record.to_dict()})

    @app.route("/api/days/<day>/manual-status", methods=["POST"], endpoint="api_manual_status")
    def api_manual_status(day: str):
        data = request.get_json(silent=True) or {}
        try:
            record = container.day_status_service.set_manual_status(
                parse_iso_date(day),
                data.get("status"),
                shift_id=data.get("shift_id"),
            )
        except NoActiveShiftError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "status": record.to_dict()})

    @app.route("/api/days/<day>/recalculate", methods=["POST"], endpoint="api_recalculate_day")
    def api_recalculate_day(day: str):
        try:
            record = container.day_status_service.recalculate_from_logs(parse_iso_date(day))
        except NoActiveShiftError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "status": record.to_dict()})

    @app.route("/api/days/<day>/attendance-time", methods=["PUT"], endpoint="api_attendance_time")
    def api_attendance_time(day: str):
        data = request.get_json(silent=True) or {}
        try:
            record = container.day_status_service.update_attendance_time(
                parse_iso_date(day),
                parse_instant(data.get("check_in")),
                parse_instant(data.get("check_out")),
            )
        except NoActiveShiftError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            body = {"success": False, "message": str(e)}
            reason = getattr(e, "reason", None)
            if reason is not None:
                body["reason"] = reason.value
            return jsonify(body), 400
        return jsonify({"success": True, "status": record.to_dict()})

    @app.route("/api/days/<day>", methods=["DELETE"], endpoint="api_reset_day")
    def api_reset_day(day: str):
        try:
            container.day_status_service.reset_day(parse_iso_date(day))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True})

    @app.route("/api/day-off/sundays", methods=["POST"], endpoint="api_sundays_day_off")
    def api_sundays_day_off():
        data = request.get_json(silent=True) or {}
        try:
            start = parse_iso_date(data.get("start"))
            end = parse_iso_date(data.get("end"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        marked = container.day_off_service.set_sundays_as_day_off(start, end)
        return jsonify({"success": True, "marked": [d.isoformat() for d in marked]})
