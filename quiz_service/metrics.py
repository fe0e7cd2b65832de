"""
Prometheus metrics for the quiz service.

Tracks request performance, domain error codes and authentication outcomes.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "quiz_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "quiz_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Error taxonomy metrics
quiz_errors_total = Counter(
    "quiz_errors_total", "Errors returned to callers", ["kind", "code"]
)

# Authentication metrics
auth_signup_total = Counter("quiz_auth_signup_total", "Total user signups", ["status"])

auth_signin_total = Counter("quiz_auth_signin_total", "Total user sign-ins", ["status"])


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_error(kind: str, code: str):
    """Track an error mapped to a client response."""
    quiz_errors_total.labels(kind=kind, code=code).inc()


def track_signup(success: bool):
    """Track signup metrics."""
    status = "success" if success else "failure"
    auth_signup_total.labels(status=status).inc()


def track_signin(success: bool):
    """Track sign-in metrics."""
    status = "success" if success else "failure"
    auth_signin_total.labels(status=status).inc()


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
