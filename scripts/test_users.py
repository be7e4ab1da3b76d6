"""
Tests for registration and caller identification.

Usage: pytest scripts/test_users.py
"""

from backend.config import settings


def test_register_grants_signup_credits(client):
    response = client.post("/users", json={"email": "Ada@Example.com"})

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "ada@example.com"
    assert body["credits"] == settings.signup_credits
    assert body["subscription_status"] is None

    me = client.get("/users/me", headers={"X-User-ID": body["id"]})
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


def test_duplicate_email_is_rejected(client):
    client.post("/users", json={"email": "ada@example.com"})

    response = client.post("/users", json={"email": "ADA@example.com"})

    assert response.status_code == 400
    assert response.json() == {"detail": "A user with this email already exists", "code": "bad_request"}


def test_me_requires_a_known_user(client):
    response = client.get("/users/me", headers={"X-User-ID": "unknown"})

    assert response.status_code == 401
    assert response.json()["code"] == "auth_required"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
