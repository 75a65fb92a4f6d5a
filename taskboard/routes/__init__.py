"""API route blueprints."""

from taskboard.routes.analytics import analytics_bp
from taskboard.routes.boards import boards_bp
from taskboard.routes.health import health_bp
from taskboard.routes.tasks import tasks_bp


__all__ = ["health_bp", "boards_bp", "tasks_bp", "analytics_bp"]
