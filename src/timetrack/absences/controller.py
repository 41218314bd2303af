from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import require_date
from ..common.web import json_body, jsonable, login_required, no_content, query_date, query_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/absences", endpoint="list_absences")
    @login_required
    def list_absences():
        absences = container.absence_service.list_absences(
            user_id=query_id("user_id"),
            start=query_date("start"),
            end=query_date("end"),
        )
        return jsonify(jsonable(list(absences)))

    @app.route("/api/absences", methods=["POST"], endpoint="create_absence")
    @login_required
    def create_absence():
        data = json_body()
        absence = container.absence_service.mark_absent(user_id=data.get("user_id"), day=data.get("date"))
        return jsonify(absence.to_dict()), 201

    @app.route("/api/absences/<int:user_id>/<day>", methods=["DELETE"], endpoint="delete_absence")
    @login_required
    def delete_absence(user_id: int, day: str):
        container.absence_service.clear_absence(user_id=user_id, day=require_date(day, "Date"))
        return no_content()
