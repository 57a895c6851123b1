from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_int, require_date
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _offset(value) -> int:
        return optional_int(value, "timezoneOffsetMinutes", default=container.default_offset_minutes)

    @app.route("/api/midnight-punches", methods=["GET"], endpoint="midnight_punches")
    def midnight_punches():
        items = container.punch_link_service.list_midnight_punches(
            start=require_date(request.args.get("startDate"), "startDate"),
            end=require_date(request.args.get("endDate"), "endDate"),
            offset_minutes=_offset(request.args.get("timezoneOffsetMinutes")),
            employee_code=(request.args.get("employeeCode") or "").strip() or None,
        )
        return jsonify(
            [
                {
                    "employeeCode": m.employee_code,
                    "employeeName": m.employee_name,
                    "punchDateTime": m.punch_datetime.isoformat() + "Z",
                    "punchDate": m.punch_date.isoformat(),
                    "punchTime": m.punch_time,
                    "suggestedPreviousDate": m.suggested_previous_date.isoformat(),
                    "status": m.status,
                    "note": m.note,
                }
                for m in items
            ]
        )

    @app.route("/api/midnight-links/action", methods=["POST"], endpoint="midnight_link_action")
    def midnight_link_action():
        body = request.get_json(silent=True) or {}
        container.punch_link_service.decide(
            employee_code=body.get("employeeCode"),
            punch_datetime=body.get("punchDateTime"),
            action=body.get("action"),
            offset_minutes=_offset(body.get("timezoneOffsetMinutes")),
            target_base_date=body.get("targetBaseDate") or None,
            note=body.get("note"),
        )
        return jsonify({"message": "Link saved"})

    @app.route("/api/midnight-links/import", methods=["POST"], endpoint="midnight_links_import")
    def midnight_links_import():
        body = request.get_json(silent=True) or {}
        rows = body.get("rows")
        if not isinstance(rows, list):
            raise ValidationError("rows must be a list")
        result = container.punch_link_service.import_rows(rows, offset_minutes=_offset(body.get("timezoneOffsetMinutes")))
        return jsonify({"inserted": result.inserted, "invalid": result.invalid})
