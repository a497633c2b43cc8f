from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import ValidationError
from ..core.result import StoreResult


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def store_failure(result: StoreResult):
    return error_response(result.error or "could not save entries", 500)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data
