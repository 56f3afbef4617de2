from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True})

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([e.to_record() for e in container.employees_repo.list_all()])
