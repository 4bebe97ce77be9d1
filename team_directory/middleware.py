# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request ID propagation and Prometheus metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from team_directory.core.logging import current_request_id
from team_directory.metrics import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

REQUEST_ID_HEADER = "X-Request-ID"

# probes and docs are not API traffic
UNTRACKED_PATHS = frozenset({
    "/health", "/health/ready", "/metrics", "/openapi.json", "/docs", "/redoc",
})


def _route_template(request: Request) -> str:
    """``/api/team/{member_id}`` rather than the concrete path, to bound label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Adopt the caller's X-Request-ID (or mint one), expose it to logs, echo it back."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = current_request_id.set(request_id)
        try:
            response = await call_next(request)
        finally:
            current_request_id.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count API requests and errors per route template and time them."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in UNTRACKED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        labels = {"method": request.method, "endpoint": _route_template(request)}
        status = str(response.status_code)
        REQUEST_COUNT.labels(status=status, **labels).inc()
        REQUEST_LATENCY.labels(**labels).observe(elapsed)
        if response.status_code >= 400:
            HTTP_ERRORS.labels(status=status, **labels).inc()
        return response
