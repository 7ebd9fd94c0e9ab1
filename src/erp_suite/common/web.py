"""Shared helpers for the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import Flask, jsonify, request, session

from ..core.exceptions import (
    AIAssistError,
    AuthenticationError,
    AuthorizationError,
    NoDataError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NoDataError, 404),
    (NotFoundError, 404),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (AIAssistError, 502),
)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def int_arg(name: str, default: Any = None) -> int:
    raw = request.args.get(name)
    if raw in (None, ""):
        if default is None:
            raise ValidationError(f"Missing query parameter: {name}")
        return int(default)
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return error_response("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def csv_response(app: Flask, text: str, *, filename: str):
    return app.response_class(
        text.encode("utf-8-sig"),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    for exc_type, status in _STATUS_BY_ERROR:

        def handler(e, status=status):
            return error_response(str(e), status)

        app.register_error_handler(exc_type, handler)

    @app.errorhandler(StoreError)
    def handle_store_error(e):
        logger.error("Database error on %s %s: %s", request.method, request.path, e)
        if app.config.get("DEBUG"):
            return error_response(f"Database error: {e}", 503)
        return error_response("Database is unavailable, please try again", 503)
