"""
Metrics middleware for the quiz service.

Records request count and latency for every HTTP request, labelled by the
matched route template rather than the raw path so that ids in URLs do
not explode label cardinality.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """Route template of the request ("/api/questions/{question_id}")."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or UNMATCHED_ENDPOINT


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Tracks Prometheus metrics for all HTTP requests."""

    def __init__(self, app, track_func: Callable):
        """
        Args:
            app: ASGI application
            track_func: Called as track_func(method, endpoint, status_code, duration)
        """
        super().__init__(app)
        self.track_func = track_func

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._track(request, 500, start_time)
            raise

        self._track(request, response.status_code, start_time)
        return response

    def _track(self, request: Request, status_code: int, start_time: float) -> None:
        self.track_func(
            method=request.method,
            endpoint=endpoint_label(request),
            status_code=status_code,
            duration=time.perf_counter() - start_time,
        )
