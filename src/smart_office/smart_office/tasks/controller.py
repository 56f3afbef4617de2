from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import parse_enum, require_mapping
from ..core.enums import TaskStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .model import Task

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _not_found():
        return jsonify({"error": "Not found"}), 404

    def _bad_request(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.route("/tasks", methods=["GET"], endpoint="list_tasks")
    def list_tasks():
        user_id = request.args.get("userId") or None
        tasks = container.tasks_repo.list(assignee_id=user_id)
        return jsonify([t.to_record() for t in tasks])

    @app.route("/tasks", methods=["POST"], endpoint="create_task")
    def create_task():
        try:
            payload = require_mapping(request.get_json(silent=True))
            record = {k: v for k, v in payload.items() if k != "id"}
            if not record.get("status"):
                record["status"] = TaskStatus.TODO.value
            task = container.tasks_repo.create(Task.from_record(record))
        except ValidationError as e:
            return _bad_request(e)

        logger.info("Task %s created for %s", task.id, task.assigned_to_id)
        return jsonify(task.to_record()), 201

    @app.route("/tasks/<int:task_id>", methods=["PUT"], endpoint="update_task")
    def update_task(task_id: int):
        try:
            payload = require_mapping(request.get_json(silent=True))
            changes = {k: v for k, v in payload.items() if k != "id"}
            task = container.tasks_repo.update_fields(task_id, changes)
        except ValidationError as e:
            return _bad_request(e)

        if task is None:
            return _not_found()
        return jsonify(task.to_record())

    @app.route("/tasks/<int:task_id>/status", methods=["PATCH"], endpoint="update_task_status")
    def update_task_status(task_id: int):
        try:
            payload = require_mapping(request.get_json(silent=True))
            status = parse_enum(TaskStatus, payload.get("status"), "status")
        except ValidationError as e:
            return _bad_request(e)

        task = container.tasks_repo.set_status(task_id, status)
        if task is None:
            return _not_found()
        return jsonify(task.to_record())

    @app.route("/tasks/<int:task_id>", methods=["DELETE"], endpoint="delete_task")
    def delete_task(task_id: int):
        container.tasks_repo.delete(task_id)
        return "", 204
