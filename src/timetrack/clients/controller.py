from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import json_body, jsonable, login_required, no_content
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/clients", endpoint="list_clients")
    @login_required
    def list_clients():
        return jsonify(jsonable(list(container.client_service.list_clients())))

    @app.route("/api/clients", methods=["POST"], endpoint="create_client")
    @login_required
    def create_client():
        data = json_body()
        client = container.client_service.create_client(name=data.get("name", ""), vat=data.get("vat", ""))
        return jsonify(client.to_dict()), 201

    @app.route("/api/clients/<int:client_id>", endpoint="get_client")
    @login_required
    def get_client(client_id: int):
        return jsonify(container.client_service.get_client(client_id).to_dict())

    @app.route("/api/clients/<int:client_id>", methods=["PATCH"], endpoint="update_client")
    @login_required
    def update_client(client_id: int):
        return jsonify(container.client_service.update_client(client_id, json_body()).to_dict())

    @app.route("/api/clients/<int:client_id>", methods=["DELETE"], endpoint="delete_client")
    @login_required
    def delete_client(client_id: int):
        container.client_service.delete_client(client_id)
        return no_content()
