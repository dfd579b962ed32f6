from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/report", methods=["GET"], endpoint="api_report")
    def api_report():
        try:
            end = parse_iso_date(request.args["end"]) if request.args.get("end") else now_local().date()
            start = (
                parse_iso_date(request.args["start"])
                if request.args.get("start")
                else end - timedelta(days=DEFAULT_REPORT_DAYS - 1)
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        if start > end:
            return jsonify({"success": False, "message": "Ngày bắt đầu phải trước ngày kết thúc"}), 400

        report = container.report_service.build_report(start=start, end=end)
        return jsonify({"success": True, "rows": report.rows, "summary": report.summary})

    @app.route("/api/report/week", methods=["GET"], endpoint="api_weekly_grid")
    def api_weekly_grid():
        today = now_local().date()
        try:
            week_start = parse_iso_date(request.args["start"]) if request.args.get("start") else today - timedelta(days=today.weekday())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "days": container.report_service.weekly_grid(week_start=week_start, today=today)})
