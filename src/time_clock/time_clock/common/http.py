from __future__ import annotations

from typing import Any, Mapping

from flask import jsonify, request


def request_payload() -> Mapping[str, Any]:
    """Body of the current request: a JSON object, or the submitted form."""

    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def error_response(message: str, status: int):
    return jsonify({"error": message}), status
