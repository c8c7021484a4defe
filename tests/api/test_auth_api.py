"""Tests for login, logout and the current-user endpoint."""

import pytest


@pytest.fixture(autouse=True)
async def registered(app_instance):
    await app_instance.create_user("root", "sekret", "Superuser")


class TestLogin:
    """Tests for POST /auth/login."""

    async def test_valid_credentials_return_token(self, client):
        response = await client.post("/api/v1/auth/login", json={"username": "root", "password": "sekret"})
        assert response.status_code == 200
        token = response.json()["token"]
        assert token
        assert response.cookies.get("auth_token") == token

    async def test_wrong_password(self, client):
        response = await client.post("/api/v1/auth/login", json={"username": "root", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    async def test_unknown_user(self, client):
        response = await client.post("/api/v1/auth/login", json={"username": "ghost", "password": "sekret"})
        assert response.status_code == 401

    async def test_overlong_password_is_401(self, client):
        response = await client.post("/api/v1/auth/login", json={"username": "root", "password": "x" * 80})
        assert response.status_code == 401
        assert response.json()["type"] == "authentication_error"

    async def test_cookie_authenticates(self, client):
        await client.post("/api/v1/auth/login", json={"username": "root", "password": "sekret"})
        response = await client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["username"] == "root"


class TestLogout:
    """Tests for POST /auth/logout."""

    async def test_token_invalid_after_logout(self, client, app_instance):
        token = await app_instance.login("root", "sekret")
        headers = {"Authorization": f"Bearer {token}"}

        assert (await client.post("/api/v1/auth/logout", headers=headers)).status_code == 204
        assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 401

    async def test_requires_authentication(self, client):
        response = await client.post("/api/v1/auth/logout")
        assert response.status_code == 401


class TestCurrentUser:
    """Tests for GET /auth/me."""

    async def test_returns_profile(self, client, app_instance):
        token = await app_instance.login("root", "sekret")
        response = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        body = response.json()
        assert body["username"] == "root"
        assert body["name"] == "Superuser"
        assert body["blogs"] == []

    async def test_invalid_token(self, client):
        response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401


async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "healthy"}
