from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int, require_date
from ..core.exceptions import ProcessingError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"message": str(e)}), 400

    @app.errorhandler(ProcessingError)
    def handle_processing_error(e: ProcessingError):
        cause = e.__cause__ or e
        return (
            jsonify(
                {
                    "message": "Failed to process attendance",
                    "error": str(cause),
                    "processedCount": e.processed_count,
                }
            ),
            500,
        )

    @app.route("/api/attendance/process", methods=["POST"], endpoint="process_attendance")
    def process_attendance():
        body = request.get_json(silent=True) or {}
        start = require_date(body.get("startDate"), "startDate")
        end = require_date(body.get("endDate"), "endDate")
        offset = optional_int(
            body.get("timezoneOffsetMinutes"),
            "timezoneOffsetMinutes",
            default=container.default_offset_minutes,
        )

        result = container.attendance_service.process_attendance(start, end, offset)
        return jsonify({"message": "Processing completed", "processedCount": result.processed_count})

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    def attendance_summary():
        start = require_date(request.args.get("startDate"), "startDate")
        end = require_date(request.args.get("endDate"), "endDate")
        employee_code = (request.args.get("employeeCode") or "").strip() or None

        data = container.summary_service.build_summary(start=start, end=end, employee_code=employee_code)
        return jsonify({"rows": data.rows, "summary": data.summary})
