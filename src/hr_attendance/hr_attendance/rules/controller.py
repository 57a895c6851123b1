from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/rules", methods=["POST"], endpoint="create_rule")
    def create_rule():
        body = request.get_json(silent=True) or {}
        rule_id = container.rule_service.create(
            name=body.get("name"),
            scope=body.get("scope"),
            valid_from=body.get("startDate"),
            valid_to=body.get("endDate"),
            rule_type=body.get("ruleType"),
            priority=body.get("priority", 0),
            params=body.get("params") or {},
        )
        return jsonify({"id": rule_id}), 201

    @app.route("/api/rules/<int:rule_id>", methods=["DELETE"], endpoint="delete_rule")
    def delete_rule(rule_id: int):
        container.rule_service.delete(rule_id=rule_id)
        return "", 204
