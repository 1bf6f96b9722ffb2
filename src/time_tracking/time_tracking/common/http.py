from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import ConflictError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _request_extra(status: int) -> dict:
    return {"path": request.path, "method": request.method, "status_code": status}


def error_response(status: int, error: str, message: str):
    return jsonify({"status": status, "error": error, "message": message, "path": request.path}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_error_handlers(app: Flask) -> None:
    """Map domain errors to JSON responses (400 / 404 / 409 / 422 / 500)."""

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        logger.warning("Validation failed: %s", e, extra=_request_extra(400))
        return error_response(400, "BAD_REQUEST", str(e))

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        logger.warning("Resource not found: %s", e, extra=_request_extra(404))
        return error_response(404, "NOT_FOUND", str(e))

    @app.errorhandler(ConflictError)
    def _conflict(e: ConflictError):
        logger.warning("Duplicate resource: %s", e, extra=_request_extra(409))
        return error_response(409, "DUPLICATE_RESOURCE", str(e))

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        logger.warning("Invalid operation: %s", e, extra=_request_extra(422))
        return error_response(422, "INVALID_OPERATION", str(e))

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return error_response(e.code or 500, (e.name or "ERROR").upper().replace(" ", "_"), e.description or "")

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unexpected error occurred", extra=_request_extra(500))
        return error_response(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred. Please try again later.")
