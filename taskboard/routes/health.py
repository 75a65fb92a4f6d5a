"""Health check and service index endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any

from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from taskboard.extensions import db


logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


@health_bp.route("/", methods=["GET"])
def index():
    """Liveness message for anyone hitting the root URL."""
    return jsonify(
        {
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


@health_bp.route("/health", methods=["GET"])
@health_bp.route("/api/health", methods=["GET"])
def health_check():
    """Health check endpoint for monitoring.

    Returns:
        JSON response with health status of the database.
    """
    health_status: dict[str, Any] = {
        "status": "healthy",
        "components": {
            "database": "healthy",
        },
        "service": {
            "name": current_app.config.get("SERVICE_NAME", "taskboard-api"),
            "version": current_app.config.get("SERVICE_VERSION", "1.0.0"),
        },
    }

    # Check database connection
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check: database unreachable", exc_info=True)
        db.session.rollback()
        health_status["status"] = "unhealthy"
        health_status["components"]["database"] = "unhealthy"

    status_code = 200 if health_status["status"] == "healthy" else 503
    return jsonify(health_status), status_code
