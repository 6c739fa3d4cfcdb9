"""
Name: Authentication API Tests

Responsibilities:
  - Registration creates user + profile and rejects duplicates
  - Login accepts username or email and rejects wrong passwords
  - Self-service password reset and /auth/me
"""

import pytest

from tests.conftest import auth_headers, register

pytestmark = pytest.mark.unit


def test_register_returns_token_and_user(client, admin):
    body = register(client, "alice", "alice@x.com", phone="+91-9876543210")

    assert body["token"]
    assert body["user"]["username"] == "alice"
    assert body["user"]["email"] == "alice@x.com"
    assert body["user"]["role"] == "user"
    assert body["user"]["is_public"] is True
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]


def test_register_creates_profile_named_after_username(client, admin):
    body = register(client, "alice")

    response = client.get("/api/profile/me", headers=auth_headers(body["token"]))

    assert response.status_code == 200
    assert response.json()["name"] == "alice"


@pytest.mark.parametrize(
    "second",
    [
        {"username": "alice", "email": "other@x.com"},
        {"username": "other", "email": "alice@x.com"},
        {"username": "alice", "email": "alice@x.com"},
    ],
)
def test_register_conflict_on_username_or_email(client, second):
    register(client, "alice", "alice@x.com")

    response = client.post("/api/auth/register", json={**second, "password": "pw2"})

    assert response.status_code == 400
    assert response.json()["code"] == "CONFLICT"


@pytest.mark.parametrize("missing", ["username", "email", "password"])
def test_register_missing_field(client, missing):
    payload = {"username": "alice", "email": "alice@x.com", "password": "pw1"}
    payload.pop(missing)

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert missing in response.json()["detail"]


def test_register_rejects_empty_password(client):
    response = client.post(
        "/api/auth/register", json={"username": "alice", "email": "alice@x.com", "password": ""}
    )
    assert response.status_code == 400


@pytest.mark.parametrize("identifier", ["alice", "alice@x.com"])
def test_login_with_username_or_email(client, identifier):
    registered = register(client, "alice", "alice@x.com", password="pw1")

    response = client.post("/api/auth/login", json={"identifier": identifier, "password": "pw1"})

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["id"] == registered["user"]["id"]


@pytest.mark.parametrize("identifier", ["alice", "alice@x.com"])
def test_login_wrong_password(client, identifier):
    register(client, "alice", "alice@x.com", password="pw1")

    response = client.post("/api/auth/login", json={"identifier": identifier, "password": "pw2"})

    assert response.status_code == 401
    assert response.json()["code"] == "INVALID_CREDENTIALS"


def test_login_unknown_user(client):
    response = client.post("/api/auth/login", json={"identifier": "ghost", "password": "pw1"})
    assert response.status_code == 401


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"identifier": "alice"})
    assert response.status_code == 400


def test_self_reset_password(client):
    body = register(client, "alice", password="pw1")

    response = client.post(
        "/api/auth/reset-password",
        json={"newPassword": "pw-new"},
        headers=auth_headers(body["token"]),
    )
    assert response.status_code == 200

    old = client.post("/api/auth/login", json={"identifier": "alice", "password": "pw1"})
    new = client.post("/api/auth/login", json={"identifier": "alice", "password": "pw-new"})
    assert old.status_code == 401
    assert new.status_code == 200


def test_self_reset_password_requires_token(client):
    response = client.post("/api/auth/reset-password", json={"newPassword": "pw-new"})
    assert response.status_code == 401


def test_me_returns_live_user(client, admin):
    body = register(client, "alice")

    response = client.get("/api/auth/me", headers=auth_headers(body["token"]))

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert response.json()["role"] == "user"


def test_forgot_password(client):
    register(client, "alice", "alice@x.com")

    known = client.post("/api/auth/forgot-password", json={"email": "alice@x.com"})
    unknown = client.post("/api/auth/forgot-password", json={"email": "ghost@x.com"})

    assert known.status_code == 200
    assert unknown.status_code == 404


@pytest.mark.parametrize("identifier", ["carol@Example.COM", "carol@example.com", "carol"])
def test_login_with_mixed_case_email_as_registered(client, identifier):
    registered = register(client, "carol", "carol@Example.COM", password="pw1")

    response = client.post("/api/auth/login", json={"identifier": identifier, "password": "pw1"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered["user"]["id"]


def test_register_conflict_on_email_differing_only_in_domain_case(client):
    register(client, "carol", "carol@Example.COM")

    response = client.post(
        "/api/auth/register",
        json={"username": "other", "email": "carol@example.com", "password": "pw1"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "CONFLICT"
