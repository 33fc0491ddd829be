from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import StateError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def json_body() -> dict:
    """Request JSON as a dict; a missing or malformed body reads as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(StateError)
    def handle_state(e: StateError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(StoreError)
    def handle_store(e: StoreError):
        logger.error("Store error on %s %s: %s", request.method, request.path, e)
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return jsonify({"error": e.description}), e.code
