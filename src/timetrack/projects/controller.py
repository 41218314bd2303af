from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, jsonable, login_required, no_content, query_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", endpoint="list_projects")
    @login_required
    def list_projects():
        summaries = container.dashboard_service.project_summaries()
        client_id = query_id("client_id")
        if client_id is not None:
            summaries = [s for s in summaries if s.project.client_id == client_id]
        return jsonify(jsonable(summaries))

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    @login_required
    def create_project():
        data = json_body()
        project = container.project_service.create_project(
            client_id=data.get("client_id"),
            name=data.get("name", ""),
            notes=data.get("notes"),
        )
        return jsonify(container.dashboard_service.project_summary(project.project_id).to_dict()), 201

    @app.route("/api/projects/<int:project_id>", endpoint="get_project")
    @login_required
    def get_project(project_id: int):
        return jsonify(container.dashboard_service.project_summary(project_id).to_dict())

    @app.route("/api/projects/<int:project_id>/stats", endpoint="project_stats")
    @login_required
    def project_stats(project_id: int):
        summary = container.dashboard_service.project_summary(project_id)
        out = summary.stats.to_dict()
        out.update({"logged_hours": summary.logged_hours, "completion": summary.completion})
        return jsonify(out)

    @app.route("/api/projects/<int:project_id>", methods=["PATCH"], endpoint="update_project")
    @login_required
    def update_project(project_id: int):
        project = container.project_service.update_project(project_id, json_body())
        return jsonify(container.dashboard_service.project_summary(project.project_id).to_dict())

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="delete_project")
    @login_required
    def delete_project(project_id: int):
        container.project_service.delete_project(project_id)
        return no_content()
