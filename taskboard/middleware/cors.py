"""CORS for the browser client."""

from flask import Flask
from flask_cors import CORS


def register_cors_middleware(app: Flask) -> None:
    """Allow the configured CLIENT_URL origin to call the API with credentials.

    Args:
        app: Flask application instance.
    """
    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CLIENT_URL"]}},
        supports_credentials=True,
    )
