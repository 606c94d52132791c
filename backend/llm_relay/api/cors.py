"""Preflight Responses — every OPTIONS on a relay route answers 204 with CORS headers.

Invariants:
    - Runs before CORSMiddleware: browser preflights (Origin +
      Access-Control-Request-Method) and bare OPTIONS get the same 204
    - Allowed methods follow the route: generate → POST, health → GET
    - OPTIONS outside the relay routes passes through untouched
"""

from typing import Callable

from fastapi import Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from llm_relay.config import Settings

ALLOWED_HEADERS = "Content-Type, Authorization"

ROUTE_METHODS = {
    "/api/generate": "POST, OPTIONS",
    "/api/health": "GET, OPTIONS",
}


def preflight_response(
    settings: Settings, methods: str, origin: str = "",
) -> Response:
    origins = settings.cors_origins or ["*"]
    if "*" in origins:
        allow_origin = "*"
    else:
        allow_origin = origin if origin in origins else origins[0]
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": methods,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        },
    )


def methods_for_path(path: str) -> str | None:
    for prefix, methods in ROUTE_METHODS.items():
        if path == prefix or path.startswith(prefix + "/"):
            return methods
    return None


class PreflightCorsMiddleware(BaseHTTPMiddleware):
    """Answer OPTIONS on relay routes with 204 before routing or CORSMiddleware."""

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method != "OPTIONS":
            return await call_next(request)
        methods = methods_for_path(request.url.path.rstrip("/") or "/")
        if methods is None:
            return await call_next(request)
        origin = request.headers.get("origin", "").strip()
        return preflight_response(self.settings, methods, origin)
