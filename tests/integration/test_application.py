"""Integration tests for application-level routes and middleware."""

import pytest
from fastapi.testclient import TestClient

from src.storefront.api.http.app_data import ApplicationDependencies


def test_root(client: TestClient):
    response = client.get("/")

    assert response.json() == {"status": "ok", "message": "API is running"}


def test_health(client: TestClient):
    assert client.get("/health").json() == {"status": "healthy"}


def test_readiness(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["database"]["type"] == "sqlite"


def test_readiness_reports_database_outage(
    client: TestClient,
    app_dependencies: ApplicationDependencies,
    monkeypatch: pytest.MonkeyPatch,
):
    monkeypatch.setattr(app_dependencies.database_service, "health_check", lambda: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_unknown_route_uses_error_shape(client: TestClient):
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_request_id_is_propagated(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_security_headers(client: TestClient):
    response = client.get("/")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
