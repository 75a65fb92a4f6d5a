"""Task board service: Flask application factory."""

import logging

from flask import Flask

from taskboard.extensions import db, ma
from taskboard.telemetry import telemetry_enabled


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Telemetry providers must exist before the app is created
    if telemetry_enabled():
        from taskboard.telemetry import instrument_flask_app, setup_telemetry

        setup_telemetry()

    app = Flask(__name__)

    # Per app, so Gunicorn workers forked later are instrumented too
    if telemetry_enabled():
        instrument_flask_app(app)

    # Load configuration
    if config_class is None:
        from taskboard.config import Config

        config_class = Config
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)

    # One store per application, injected into every handler
    from taskboard.store import init_store

    init_store(app, db)

    # Register blueprints
    from taskboard.routes import analytics_bp, boards_bp, health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(boards_bp)
    app.register_blueprint(tasks_bp)
    app.register_blueprint(analytics_bp)

    # Register error handlers
    from taskboard.errors import register_error_handlers

    register_error_handlers(app)

    from taskboard.middleware import register_cors_middleware, register_metrics_middleware

    register_cors_middleware(app)
    if telemetry_enabled():
        register_metrics_middleware(app)

    _configure_logging()

    # Create database tables
    with app.app_context():
        db.create_all()

    return app


def _configure_logging() -> None:
    """Route service logs to the root logger and quiet framework loggers."""
    if telemetry_enabled():
        from taskboard.telemetry import get_otel_log_handler

        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    logging.getLogger("taskboard").setLevel(logging.DEBUG)
    logging.getLogger("taskboard").propagate = True

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
