"""
Name: Profile API Tests

Responsibilities:
  - A user reads and writes only their own profile
  - PUT is a full replacement: omitted fields are cleared
  - Visibility flag is only changed when supplied
"""

import pytest

from tests.conftest import auth_headers, register

pytestmark = pytest.mark.unit

FULL_PROFILE = {
    "name": "Alice A.",
    "photo_url": "/uploads/photo-1.png",
    "contact_details": "alice@x.com / 98765",
    "location": "Pune",
    "skills": "Python, SQL",
    "experience": "3 years at Acme",
    "education": "B.Tech",
    "resume_url": "/uploads/resume-1.pdf",
    "portfolio_url": "https://alice.dev",
    "linkedin_url": "https://linkedin.com/in/alice",
    "github_url": "https://github.com/alice",
}


def test_get_profile_joins_account_fields(client, admin):
    alice = register(client, "alice", "alice@x.com")

    profile = client.get("/api/profile/me", headers=auth_headers(alice["token"])).json()

    assert profile["username"] == "alice"
    assert profile["email"] == "alice@x.com"
    assert profile["role"] == "user"
    assert profile["is_public"] is True
    assert profile["user_id"] == alice["user"]["id"]
    assert profile["skills"] is None


def test_put_profile_overwrites_every_field(client, admin):
    alice = register(client, "alice")
    headers = auth_headers(alice["token"])

    response = client.put("/api/profile/me", json={**FULL_PROFILE, "is_public": False}, headers=headers)
    assert response.status_code == 200

    profile = client.get("/api/profile/me", headers=headers).json()
    for field, value in FULL_PROFILE.items():
        assert profile[field] == value
    assert profile["is_public"] is False


def test_put_profile_clears_omitted_fields(client, admin):
    alice = register(client, "alice")
    headers = auth_headers(alice["token"])
    client.put("/api/profile/me", json={**FULL_PROFILE, "is_public": False}, headers=headers)

    client.put("/api/profile/me", json={"name": "Alice", "skills": "Go"}, headers=headers)

    profile = client.get("/api/profile/me", headers=headers).json()
    assert profile["name"] == "Alice"
    assert profile["skills"] == "Go"
    assert profile["github_url"] is None
    assert profile["resume_url"] is None
    assert profile["education"] is None
    # is_public was omitted and therefore untouched
    assert profile["is_public"] is False


def test_put_profile_without_name_falls_back_to_username(client, admin):
    alice = register(client, "alice")
    headers = auth_headers(alice["token"])

    client.put("/api/profile/me", json={"skills": "Go"}, headers=headers)

    assert client.get("/api/profile/me", headers=headers).json()["name"] == "alice"


def test_profiles_are_scoped_to_caller(client, admin):
    alice = register(client, "alice")
    bob = register(client, "bob")

    client.put("/api/profile/me", json={"name": "Bob", "skills": "Rust"}, headers=auth_headers(bob["token"]))

    alice_profile = client.get("/api/profile/me", headers=auth_headers(alice["token"])).json()
    assert alice_profile["name"] == "alice"
    assert alice_profile["skills"] is None
