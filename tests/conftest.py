"""Shared fixtures: an application backed by a throwaway SQLite database."""

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

DEFAULT_PASSWORD = "pw1"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}",
        SECRET_KEY="test-secret",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
        SENTRY_DSN="",
        BOOTSTRAP_ADMIN_EMAIL="",
        BOOTSTRAP_ADMIN_PASSWORD="",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def register(client, username, email=None, password=DEFAULT_PASSWORD, **extra):
    """Register a user and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={
            "username": username,
            "email": email or f"{username}@x.com",
            "password": password,
            **extra,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(client):
    """The first registrant on an empty install, promoted to admin."""
    body = register(client, "root", "root@x.com")
    assert body["user"]["role"] == "admin"
    return body


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin["token"])
