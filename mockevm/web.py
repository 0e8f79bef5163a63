"""Flask HTTP layer exposing the candidate lookup as JSON."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from flask import Flask, Response, request

from mockevm.errors import DataUnavailable
from mockevm.lookup import LookupService

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to read candidate data"


def json_response(payload: dict[str, Any], status: int = 200) -> Response:
    """Serialize *payload* with orjson into a Flask response."""
    return Response(orjson.dumps(payload), status=status, mimetype="application/json")


def create_app(service: LookupService) -> Flask:
    """Build the Flask application around a lookup service.

    Args:
        service: The lookup service backing ``/candidates``.

    Returns:
        A configured Flask app.
    """
    app = Flask(__name__)
    app.extensions["mockevm.lookup"] = service

    @app.get("/candidates")
    @app.get("/api/candidates")
    def list_candidates() -> Response:
        search = request.args.get("search", "")
        try:
            result = service.list(search)
        except DataUnavailable as exc:
            logger.error("Error reading candidate data: %s", exc)
            return json_response(
                {"success": False, "error": FAILURE_MESSAGE, "data": [], "total": 0},
                status=500,
            )
        return json_response(result.to_dict())

    @app.get("/healthz")
    def healthz() -> Response:
        return json_response({"status": "ok"})

    return app
