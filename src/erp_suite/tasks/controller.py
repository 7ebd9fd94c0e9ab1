from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.task_service

    @app.route("/tasks", methods=["GET"], endpoint="list_tasks")
    @login_required
    def list_tasks():
        tasks = service.list_tasks(status=request.args.get("status"))
        return jsonify({"success": True, "tasks": [t.as_dict() for t in tasks]})

    @app.route("/tasks", methods=["POST"], endpoint="add_task")
    @login_required
    def add_task():
        task_id = service.create_task(json_body())
        return jsonify({"success": True, "task_id": task_id}), 201

    @app.route("/tasks/<task_id>", methods=["PUT"], endpoint="update_task")
    @login_required
    def update_task(task_id: str):
        service.update_task(task_id, json_body())
        return jsonify({"success": True, "message": "Task has been updated"})

    @app.route("/tasks/<task_id>/status", methods=["PATCH"], endpoint="change_task_status")
    @login_required
    def change_task_status(task_id: str):
        service.change_status(task_id, json_body().get("status"))
        return jsonify({"success": True, "message": "Task status updated"})

    @app.route("/tasks/<task_id>", methods=["DELETE"], endpoint="delete_task")
    @login_required
    def delete_task(task_id: str):
        service.delete_task(task_id)
        return jsonify({"success": True, "message": "Task has been deleted"})
