from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_user_id, json_body, jsonable, login_required, no_content, query_date, query_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/time-entries", endpoint="list_time_entries")
    @login_required
    def list_time_entries():
        entries = container.time_entry_service.list_entries(
            user_id=query_id("user_id"),
            project_id=query_id("project_id"),
            start=query_date("start"),
            end=query_date("end"),
        )
        return jsonify(jsonable(list(entries)))

    @app.route("/api/time-entries", methods=["POST"], endpoint="create_time_entry")
    @login_required
    def create_time_entry():
        data = json_body()
        # Entries default to the logged-in user
        if data.get("user_id") in (None, ""):
            data["user_id"] = current_user_id()
        return jsonify(container.time_entry_service.create_entry(data).to_dict()), 201

    @app.route("/api/time-entries/<int:entry_id>", endpoint="get_time_entry")
    @login_required
    def get_time_entry(entry_id: int):
        return jsonify(container.time_entry_service.get_entry(entry_id).to_dict())

    @app.route("/api/time-entries/<int:entry_id>", methods=["PATCH"], endpoint="update_time_entry")
    @login_required
    def update_time_entry(entry_id: int):
        return jsonify(container.time_entry_service.update_entry(entry_id, json_body()).to_dict())

    @app.route("/api/time-entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_time_entry")
    @login_required
    def delete_time_entry(entry_id: int):
        container.time_entry_service.delete_entry(entry_id)
        return no_content()
