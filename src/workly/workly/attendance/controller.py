from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_instant, parse_iso_date
from ..core.enums import ButtonState
from ..core.exceptions import NoActiveShiftError, RapidPressDetected, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _now_from(data: dict):
        raw = data.get("now")
        return parse_instant(raw) if raw else None

    @app.route("/api/button-state", methods=["GET"], endpoint="api_button_state")
    def api_button_state():
        try:
            state = container.work_service.get_button_state(now=_now_from(request.args))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "state": state.value if state else None})

    @app.route("/api/time-display", methods=["GET"], endpoint="api_time_display")
    def api_time_display():
        try:
            info = container.work_service.get_time_display_info(now=_now_from(request.args))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, **info})

    @app.route("/api/button-press", methods=["POST"], endpoint="api_button_press")
    def api_button_press():
        data = request.get_json(silent=True) or {}
        raw_state = (data.get("state") or "").strip()
        try:
            state = ButtonState(raw_state)
        except ValueError:
            return jsonify({"success": False, "message": f"Trạng thái nút không hợp lệ: {raw_state!r}"}), 400

        try:
            record = container.work_service.handle_button_press(state, now=_now_from(data))
        except RapidPressDetected as e:
            return jsonify({"success": False, "rapid_press": e.signal.to_dict(), "message": str(e)}), 409
        except NoActiveShiftError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "status": record.to_dict() if record else None})

    @app.route("/api/rapid-press/confirm", methods=["POST"], endpoint="api_rapid_press_confirm")
    def api_rapid_press_confirm():
        data = request.get_json(silent=True) or {}
        try:
            check_in = parse_instant(data.get("check_in"))
            check_out = parse_instant(data.get("check_out"))
            work_date = parse_iso_date(data["date"]) if data.get("date") else check_in.date()
            record = container.work_service.confirm_rapid_press(work_date, check_in, check_out)
        except NoActiveShiftError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "status": record.to_dict()})
