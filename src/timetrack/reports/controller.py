from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_user_id, login_required, query_date, query_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.dashboard_service.build(filter=request.args.get("filter", "all"))
        return jsonify(data.to_dict())

    @app.route("/api/calendar", endpoint="calendar")
    @login_required
    def calendar():
        user_id = query_id("user_id") or current_user_id()
        view = container.calendar_service.build(
            user_id=user_id,
            view=request.args.get("view", "week"),
            anchor=query_date("date"),
        )
        return jsonify(view.to_dict())
