"""Prometheus metrics for the statistics service.

Request count, latency and error responses are recorded per route template by
``record_request_metrics``. The /stats handler and the error handlers add the
size of each summarized input and the kind of each rejected one.
"""
from __future__ import annotations

import time
from typing import Awaitable, Callable

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

REQUESTS = Counter(
    name="basicstats_request_total",
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

REQUEST_SECONDS = Histogram(
    name="basicstats_request_duration_seconds",
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

ERROR_RESPONSES = Counter(
    name="basicstats_request_errors_total",
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# Inputs rejected by the engine, labeled by exception class (EmptyInputError, ...)
STATS_ERRORS = Counter(
    name="basicstats_stats_errors_total",
    documentation="Inputs the statistics engine refused to summarize",
    labelnames=["error"],
)

# Bucket edges follow the buffer's doubling from its default 20 slots
SUMMARIZED_VALUES = Histogram(
    name="basicstats_summarized_values",
    documentation="Number of values per summarized input",
    buckets=(1, 20, 40, 80, 160, 320, 640, 1280, 2560, 10_240, 102_400),
)


def _route_path(request: Request) -> str:
    # Template ("/stats") when routing matched, raw path otherwise
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


async def record_request_metrics(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """HTTP middleware: count every request and time it."""
    started_at = time.perf_counter()
    status = 500
    try:
        response = await call_next(request)
        status = response.status_code
        return response
    finally:
        path = _route_path(request)
        REQUESTS.labels(path, request.method, status).inc()
        if status >= 400:
            ERROR_RESPONSES.labels(path, request.method, status).inc()
        REQUEST_SECONDS.labels(path, request.method).observe(time.perf_counter() - started_at)


metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
