"""Tests for health, index and cross-cutting HTTP behavior."""


def test_health_check(client, db):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.get_json()
    assert data["status"] == "healthy"
    assert data["components"]["database"] == "healthy"
    assert data["service"]["name"] == "taskboard-api"


def test_health_alias(client, db):
    assert client.get("/health").status_code == 200


def test_index(client, db):
    data = client.get("/").get_json()
    assert data["message"] == "Server is running"
    assert data["timestamp"]


def test_unknown_route_returns_json_error(client, db):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Not found"


def test_method_not_allowed(client, db):
    response = client.patch("/api/boards/1", json={})
    assert response.status_code == 405
    assert "error" in response.get_json()


def test_cors_headers_for_client_origin(app, client, db):
    origin = app.config["CLIENT_URL"]
    response = client.get("/api/boards", headers={"Origin": origin})
    assert response.headers["Access-Control-Allow-Origin"] == origin
    assert response.headers["Access-Control-Allow-Credentials"] == "true"


def test_cors_preflight(app, client, db):
    origin = app.config["CLIENT_URL"]
    response = client.options(
        "/api/tasks",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == origin
    assert "POST" in response.headers["Access-Control-Allow-Methods"]


def test_no_cors_headers_outside_api(app, client, db):
    response = client.get("/", headers={"Origin": app.config["CLIENT_URL"]})
    assert "Access-Control-Allow-Origin" not in response.headers


def test_no_cors_headers_for_other_origins(client, db):
    response = client.get("/api/boards", headers={"Origin": "http://evil.example"})
    assert "Access-Control-Allow-Origin" not in response.headers


def test_metrics_resource_label():
    from taskboard.middleware.metrics import _resource

    assert _resource("/api/tasks/3") == "tasks"
    assert _resource("/api/boards") == "boards"
    assert _resource("/") == "other"
