"""Pytest fixtures for Flask application testing."""

import os

import pytest


# Disable OpenTelemetry for tests
os.environ["OTEL_SDK_DISABLED"] = "true"


@pytest.fixture
def app():
    """Create test application."""
    from taskboard import create_app
    from taskboard.config import TestConfig

    app = create_app(TestConfig)
    app.config["TESTING"] = True

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db(app):
    """Create test database."""
    from taskboard.extensions import db as _db

    with app.app_context():
        _db.create_all()
        yield _db
        _db.drop_all()


@pytest.fixture
def create_board(client, db):
    """Create a board through the API and return its JSON."""

    def _create(name="Sprint 1", **fields):
        response = client.post("/api/boards", json={"name": name, **fields})
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create


@pytest.fixture
def create_task(client, db):
    """Create a task through the API and return its JSON."""

    def _create(board_id, title="Write docs", **fields):
        response = client.post("/api/tasks", json={"board_id": board_id, "title": title, **fields})
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _create
