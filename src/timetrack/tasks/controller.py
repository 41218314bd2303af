from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, jsonable, login_required, no_content, query_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", endpoint="list_tasks")
    @login_required
    def list_tasks():
        tasks = container.task_service.list_tasks(project_id=query_id("project_id"))
        return jsonify(jsonable(list(tasks)))

    @app.route("/api/tasks", methods=["POST"], endpoint="create_task")
    @login_required
    def create_task():
        return jsonify(container.task_service.create_task(json_body()).to_dict()), 201

    @app.route("/api/tasks/<int:task_id>", endpoint="get_task")
    @login_required
    def get_task(task_id: int):
        return jsonify(container.task_service.get_task(task_id).to_dict())

    @app.route("/api/tasks/<int:task_id>", methods=["PATCH"], endpoint="update_task")
    @login_required
    def update_task(task_id: int):
        return jsonify(container.task_service.update_task(task_id, json_body()).to_dict())

    @app.route("/api/tasks/<int:task_id>", methods=["DELETE"], endpoint="delete_task")
    @login_required
    def delete_task(task_id: int):
        container.task_service.delete_task(task_id)
        return no_content()
