from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/adjustments", methods=["POST"], endpoint="create_adjustment")
    def create_adjustment():
        body = request.get_json(silent=True) or {}
        adjustment_id = container.adjustment_service.create(
            employee_code=body.get("employeeCode"),
            work_date=body.get("date"),
            adjustment_type=body.get("type"),
            from_time=body.get("fromTime"),
            to_time=body.get("toTime"),
            source=body.get("source"),
            note=body.get("note"),
        )
        return jsonify({"id": adjustment_id}), 201
