"""
Single entrypoint Lambda behind the HTTP API.

Routes are matched exactly on "<METHOD> <path>"; the status page lives at
the root so anything else is a 404.
"""

from typing import Callable, Dict

from . import health_check, status_page
from utils.error_handling import NotFoundError, to_response


def _route_key(event: Dict) -> str:
    http = event.get("requestContext", {}).get("http", {})
    method = http.get("method", "")
    path = http.get("path") or event.get("rawPath", "")
    if len(path) > 1:
        path = path.rstrip("/")
    return f"{method.upper()} {path}"


def lambda_handler(event, context):
    """Entry point invoked by API Gateway HTTP API."""
    route_key = _route_key(event)

    route_table: Dict[str, Callable] = {
        "GET /": status_page.lambda_handler,
        "GET /health": health_check.lambda_handler,
    }

    handler = route_table.get(route_key)
    if handler is not None:
        return handler(event, context)

    return to_response(NotFoundError("Route not found"), route=route_key)
