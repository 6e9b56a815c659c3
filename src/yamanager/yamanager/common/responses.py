from __future__ import annotations

import traceback

from flask import Flask, jsonify

from ..core.exceptions import DataIntegrityError, MissingFieldError, TransportError, ValidationError


def error_response(status: int, error: str, message: str):
    return jsonify({"error": error, "message": message}), status


def handle_error(app: Flask, e: Exception):
    """Turn an exception raised by a view into a JSON error response."""
    if isinstance(e, MissingFieldError):
        return error_response(400, MissingFieldError.message_key, str(e))
    if isinstance(e, ValidationError):
        return error_response(400, "validation", str(e))
    if isinstance(e, DataIntegrityError):
        return error_response(422, "data_integrity", str(e))
    if isinstance(e, TransportError):
        return error_response(502, "transport", e.message)

    traceback.print_exc()
    if bool(app.config.get("DEBUG", False)):
        return error_response(500, "internal", str(e))
    return error_response(500, "internal", "rest.exception.generic")
