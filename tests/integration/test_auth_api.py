"""Integration tests for the authentication endpoints."""

import asyncio
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.core.services import AuthTokenService
from src.storefront.entities.user import AdminIdentity
from tests.fixtures.core import TEST_ADMIN_PASSWORD, TEST_JWT_SECRET

pytestmark = pytest.mark.usefixtures("admin_user")


def test_login_success(client: TestClient, token_service: AuthTokenService):
    response = client.post("/auth/login", json={"username": "web", "password": TEST_ADMIN_PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["user"]["username"] == "web"
    assert body["user"]["role"] == "admin"
    assert token_service.verify(body["token"]).username == "web"


def test_login_wrong_password(client: TestClient):
    response = client.post("/auth/login", json={"username": "web", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_unknown_user(client: TestClient):
    response = client.post("/auth/login", json={"username": "root", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


@pytest.mark.parametrize("body", [{}, {"username": "web"}, {"password": "x"}])
def test_login_missing_fields(client: TestClient, body):
    response = client.post("/auth/login", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Username and password are required"}


def test_api_prefixed_login(client: TestClient):
    response = client.post("/api/auth/login", json={"username": "web", "password": TEST_ADMIN_PASSWORD})

    assert response.status_code == 200


def test_verify_without_token(client: TestClient):
    response = client.get("/auth/verify")

    assert response.status_code == 200
    assert response.json() == {"valid": False, "error": "No token provided"}


def test_verify_with_garbage(client: TestClient):
    response = client.get("/auth/verify", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 200
    assert response.json()["valid"] is False


def test_verify_with_expired_token(client: TestClient):
    expired = AuthTokenService(TEST_JWT_SECRET, expires_in_seconds=-120, clock_skew=0).issue(
        AdminIdentity(id=1, username="web")
    )

    response = client.get("/auth/verify", headers={"Authorization": f"Bearer {expired}"})

    assert response.json() == {"valid": False, "error": "Invalid or expired token"}


def test_verify_with_valid_token(client: TestClient, auth_headers: dict[str, str]):
    response = client.get("/auth/verify", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is True
    assert body["user"]["username"] == "web"


async def test_login_keeps_event_loop_responsive(app_dependencies: ApplicationDependencies):
    """Password hashing runs off the loop, so other tasks keep getting scheduled."""
    from src.storefront.api.http.app import app

    app.state.app_dependencies = app_dependencies
    longest_gap = 0.0
    finished = asyncio.Event()

    async def ticker() -> None:
        nonlocal longest_gap
        last = time.perf_counter()
        while not finished.is_set():
            await asyncio.sleep(0.001)
            now = time.perf_counter()
            longest_gap = max(longest_gap, now - last)
            last = now

    task = asyncio.create_task(ticker())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/auth/login", json={"username": "web", "password": TEST_ADMIN_PASSWORD}
        )
    finished.set()
    await task

    assert response.status_code == 200
    assert longest_gap < 0.05
