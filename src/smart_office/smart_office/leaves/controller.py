from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_enum, require_mapping
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Leave


def register(app: Flask, container: Container) -> None:
    @app.route("/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        employee_id = request.args.get("employeeId") or None
        leaves = container.leaves_repo.list(employee_id=employee_id)
        return jsonify([lv.to_record() for lv in leaves])

    @app.route("/leaves", methods=["POST"], endpoint="apply_leave")
    def apply_leave():
        try:
            payload = require_mapping(request.get_json(silent=True))
            # Status of a new request is always Pending, whatever the client sent.
            record = {k: v for k, v in payload.items() if k not in {"id", "status"}}
            leave = container.leaves_repo.create(Leave.from_record(record))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(leave.to_record()), 201

    @app.route("/leaves/<int:leave_id>/status", methods=["PATCH"], endpoint="update_leave_status")
    def update_leave_status(leave_id: int):
        try:
            payload = require_mapping(request.get_json(silent=True))
            status = parse_enum(LeaveStatus, payload.get("status"), "status")
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        leave = container.leaves_repo.set_status(leave_id, status)
        if leave is None:
            return jsonify({"error": "Not found"}), 404
        return jsonify(leave.to_record())
