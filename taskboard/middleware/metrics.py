"""HTTP request metrics."""

import time

from flask import Flask, g, request

from taskboard.telemetry import EXCLUDED_URLS, get_meter


SKIPPED_PATHS = frozenset(EXCLUDED_URLS.split(","))


def _resource(path: str) -> str:
    """API resource a path belongs to: ``/api/tasks/3`` -> ``tasks``."""
    parts = [part for part in path.split("/") if part]
    if len(parts) >= 2 and parts[0] == "api":
        return parts[1]
    return "other"


def register_metrics_middleware(app: Flask) -> None:
    """Count requests and record their latency per route.

    Args:
        app: Flask application instance.
    """
    meter = get_meter(__name__)

    http_requests_total = meter.create_counter(
        name="http_requests_total",
        description="Total HTTP requests",
        unit="1",
    )

    http_request_duration = meter.create_histogram(
        name="http_request_duration_ms",
        description="HTTP request duration in milliseconds",
        unit="ms",
    )

    http_errors_total = meter.create_counter(
        name="http_errors_total",
        description="HTTP responses with a 4xx or 5xx status",
        unit="1",
    )

    @app.before_request
    def start_timer() -> None:
        g.request_start_time = time.perf_counter()

    @app.after_request
    def record_request(response):
        if request.path in SKIPPED_PATHS:
            return response

        start_time = getattr(g, "request_start_time", None)
        duration_ms = (time.perf_counter() - start_time) * 1000 if start_time else 0

        attributes = {
            "method": request.method,
            "route": request.url_rule.rule if request.url_rule else request.path,
            "resource": _resource(request.path),
            "status": str(response.status_code),
        }

        http_requests_total.add(1, attributes)
        http_request_duration.record(duration_ms, attributes)
        if response.status_code >= 400:
            http_errors_total.add(1, attributes)

        return response
