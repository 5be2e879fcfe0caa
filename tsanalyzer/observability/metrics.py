"""Prometheus metrics & middleware for the series analyzer service.

Collects per-endpoint request count, error count and latency, and exposes
them on /metrics for Prometheus to scrape.
"""
from __future__ import annotations

import time

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

REQUEST_COUNT_NAME = "series_analyzer_request_total"
REQUEST_LATENCY_NAME = "series_analyzer_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "series_analyzer_request_errors_total"
SERIES_POINTS_NAME = "series_analyzer_points"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Module-level collectors, registered once in the default registry
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# Size of the series submitted to each /series endpoint
SERIES_POINTS = Histogram(
    name=SERIES_POINTS_NAME,
    documentation="Number of data points per analyzed series",
    labelnames=["operation"],
    buckets=(1, 10, 100, 1_000, 10_000, 100_000),
)


def observe_series(operation: str, points: int) -> None:
    SERIES_POINTS.labels(operation).observe(points)


# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Records count, errors and latency for every HTTP request, labelled by the
# route path template, method and status code.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)


# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
metrics_router = APIRouter()


@metrics_router.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
