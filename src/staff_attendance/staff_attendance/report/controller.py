from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds, now_utc, parse_iso_date
from ..common.validators import require_non_empty, require_positive_int
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users/<user_id>/attendance", methods=["GET"], endpoint="attendance_report")
    def attendance_report(user_id: str):
        """Attendance table for a date range, defaulting to the current civil month."""
        now = now_utc()
        try:
            user_id = require_non_empty(user_id, "userId")
            start_default, end_default = month_bounds(now, container.ledger.timezone_name)

            start_s = request.args.get("start")
            end_s = request.args.get("end")
            start = parse_iso_date(start_s) if start_s else start_default
            end = parse_iso_date(end_s) if end_s else end_default

            page = require_positive_int(request.args.get("page", 1), "page")
            limit = require_positive_int(request.args.get("limit", container.page_limit), "limit")

            data = container.report_service.build_attendance_report(
                user_id=user_id,
                start=start,
                end=end,
                now=now,
                page=page,
                limit=limit,
            )
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        return jsonify(
            {
                "data": {
                    "result": data.rows,
                    "meta": {
                        "page": data.page,
                        "totalPage": data.total_pages,
                        "start": start.isoformat(),
                        "end": end.isoformat(),
                        "summary": data.summary,
                        "errors": data.errors,
                    },
                }
            }
        ), 200
