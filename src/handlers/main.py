"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

Routing is by path only; each handler enforces its own method so that
``GET /transfer`` answers 405 rather than 404.
"""

from typing import Callable, Tuple

from utils.error_handling import json_response

from . import health_check, transfer


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event contains the HTTP method and path; we route it to the correct
    handler while keeping shared setup (logging, error handling) centralized.
    """
    http = event.get("requestContext", {}).get("http", {})
    method = http.get("method", "")
    path = (http.get("path") or event.get("rawPath") or "").rstrip("/") or "/"

    route_table: Tuple[Tuple[str, Callable], ...] = (
        ("/health", health_check.lambda_handler),
        ("/transfer", transfer.lambda_handler),
        ("/api/transfer", transfer.lambda_handler),
    )

    for route, handler in route_table:
        if path == route:
            return handler(event, context)

    return json_response(
        404, {"message": "Route not found", "route": f"{method.upper()} {path}"}
    )
