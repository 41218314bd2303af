from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, DomainError, ValidationError
from .validators import optional_date, require_id

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Login required")
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def query_id(name: str) -> Optional[int]:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    return require_id(value, name)


def query_date(name: str):
    return optional_date(request.args.get(name), name)


def no_content():
    return "", 204


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.debug("%s at %s: %s", type(e).__name__, request.path, e)
        return error_response(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error at %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return error_response(f"Internal server error: {e}", 500)
        return error_response("Internal server error", 500)


def jsonable(value: Any) -> Any:
    """Serialize a model, or a list of models, through their ``to_dict``."""
    if isinstance(value, (list, tuple)):
        return [jsonable(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value
