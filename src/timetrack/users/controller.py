from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import current_user_id, json_body, jsonable, login_required, no_content
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("remember", True))
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name

        return jsonify(container.user_service.get_user(s_user.user_id).to_dict())

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return no_content()

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify(container.user_service.get_user(current_user_id()).to_dict())

    @app.route("/api/users", endpoint="list_users")
    @login_required
    def list_users():
        return jsonify(jsonable(list(container.user_service.list_users())))

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @login_required
    def create_user():
        data = json_body()
        user = container.user_service.create_user(
            name=data.get("name", ""),
            surname=data.get("surname", ""),
            email=data.get("email", ""),
            password=data.get("password"),
            daily_hours=data.get("daily_hours"),
        )
        return jsonify(user.to_dict()), 201

    @app.route("/api/users/<int:user_id>", endpoint="get_user")
    @login_required
    def get_user(user_id: int):
        return jsonify(container.user_service.get_user(user_id).to_dict())

    @app.route("/api/users/<int:user_id>", methods=["PATCH"], endpoint="update_user")
    @login_required
    def update_user(user_id: int):
        user = container.user_service.update_user(user_id, json_body())
        return jsonify(user.to_dict())

    @app.route("/api/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    @login_required
    def delete_user(user_id: int):
        container.user_service.delete_user(user_id)
        if session.get("user_id") == user_id:
            session.clear()
        return no_content()
