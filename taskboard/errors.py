"""API exceptions and error handlers with OpenTelemetry trace context."""

import logging

from flask import Flask, jsonify
from marshmallow import ValidationError
from opentelemetry import trace
from opentelemetry.trace import Status as SpanStatus
from opentelemetry.trace import StatusCode
from sqlalchemy.exc import SQLAlchemyError

from taskboard.extensions import db


logger = logging.getLogger(__name__)

# Largest value an integer primary key column holds
MAX_ID = 2**31 - 1


class ApiError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(ApiError):
    """Malformed id, missing required field or unrecognized enum value."""

    status_code = 400
    default_message = "Bad request"


class NotFound(ApiError):
    """No record exists for the given id."""

    status_code = 404
    default_message = "Not found"


class InternalError(ApiError):
    """Store failure; the client only sees a generic message."""

    status_code = 500


def parse_id(raw: str | int | None, what: str = "id") -> int:
    """Parse a record id, which must be a positive integer.

    Args:
        raw: Raw value from the URL or query string.
        what: Name used in the error message.

    Returns:
        The id as an int.

    Raises:
        InvalidArgument: If the value is not a positive integer.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw or "").strip()
        if not text.isdigit():
            raise InvalidArgument(f"Invalid {what}: must be a positive integer")
        value = int(text)
    if value <= 0:
        raise InvalidArgument(f"Invalid {what}: must be a positive integer")
    if value > MAX_ID:
        raise InvalidArgument(f"Invalid {what}: out of range")
    return value


def format_validation_error(err: ValidationError) -> str:
    """Flatten marshmallow error messages into one readable line."""
    messages = err.messages
    if isinstance(messages, dict):
        parts = []
        for field, errors in sorted(messages.items()):
            if isinstance(errors, (list, tuple)):
                errors = " ".join(str(e) for e in errors)
            parts.append(f"{field}: {errors}")
        return "; ".join(parts)
    if isinstance(messages, list):
        return " ".join(str(m) for m in messages)
    return str(messages)


def error_response(message: str, status_code: int) -> tuple:
    """Create error response with trace context.

    Args:
        message: Error message.
        status_code: HTTP status code.

    Returns:
        Tuple of (response, status_code).
    """
    response = {"error": message}

    span = trace.get_current_span()
    span_context = span.get_span_context()
    if span_context.is_valid:
        response["trace_id"] = format(span_context.trace_id, "032x")

    return jsonify(response), status_code


def register_error_handlers(app: Flask) -> None:
    """Register error handlers on Flask app.

    Args:
        app: Flask application instance.
    """

    @app.errorhandler(ApiError)
    def api_error(error: ApiError):
        span = trace.get_current_span()
        if span.is_recording():
            span.set_attribute("error.type", type(error).__name__)
        return error_response(error.message, error.status_code)

    @app.errorhandler(SQLAlchemyError)
    def store_error(error: SQLAlchemyError):
        db.session.rollback()
        span = trace.get_current_span()
        if span.is_recording():
            span.set_status(SpanStatus(StatusCode.ERROR, str(error)))
            span.record_exception(error)
        logger.exception("Store operation failed")
        return error_response(InternalError.default_message, 500)

    @app.errorhandler(400)
    def bad_request(error):
        return error_response("Bad request", 400)

    @app.errorhandler(404)
    def not_found(error):
        return error_response("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return error_response("Method not allowed", 405)

    @app.errorhandler(415)
    def unsupported_media_type(error):
        return error_response("Request body must be JSON", 400)

    @app.errorhandler(500)
    def internal_error(error):
        return error_response("Internal server error", 500)
