"""Middleware modules."""

from taskboard.middleware.cors import register_cors_middleware
from taskboard.middleware.metrics import register_metrics_middleware


__all__ = ["register_cors_middleware", "register_metrics_middleware"]
