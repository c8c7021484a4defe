"""Tests for user registration and listing."""

import pytest

USERS_URL = "/api/v1/users"


async def usernames(client):
    response = await client.get(USERS_URL)
    return [user["username"] for user in response.json()]


class TestCreateUser:
    """When there is initially one user in the database."""

    @pytest.fixture(autouse=True)
    async def setup(self, app_instance):
        await app_instance.create_user("root", "sekret")

    async def test_fresh_username_succeeds(self, client):
        new_user = {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"}

        response = await client.post(USERS_URL, json=new_user)

        assert response.status_code == 201
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert body["username"] == "mluukkai"
        assert "password_hash" not in body
        assert "password" not in body
        assert await usernames(client) == ["root", "mluukkai"]

    @pytest.mark.parametrize(
        ("new_user", "message", "error_type"),
        [
            (
                {"username": "root", "name": "Superuser", "password": "salainen"},
                "username must be unique",
                "username_taken",
            ),
            (
                {"username": "ab", "name": "Testing User Name Length", "password": "passwordtest"},
                "username must be 3 characters or more",
                "username_too_short",
            ),
            (
                {"username": "testusername", "name": "Testing Password Length", "password": "ab"},
                "password must be 3 characters or more",
                "password_too_short",
            ),
            (
                {"name": "Testing Missing username", "password": "testpassword"},
                "password or username missing",
                "missing_credentials",
            ),
            (
                {"username": "Test Username", "name": "Testing Missing password"},
                "password or username missing",
                "missing_credentials",
            ),
            (
                {"username": "longpw", "name": "Testing Password Hash Limit", "password": "x" * 80},
                "password must be at most 72 bytes",
                "password_too_long",
            ),
        ],
    )
    async def test_invalid_registration_fails(self, client, new_user, message, error_type):
        response = await client.post(USERS_URL, json=new_user)

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/json")
        assert message in response.json()["message"]
        assert response.json()["type"] == error_type
        assert await usernames(client) == ["root"]


class TestListUsers:
    """User listing with owned blogs."""

    async def test_lists_owned_blogs(self, client, initial_blogs):
        users = (await client.get(USERS_URL)).json()

        assert len(users) == 1
        root = users[0]
        assert root["name"] == "Superuser"
        assert "password_hash" not in root
        assert [b["title"] for b in root["blogs"]] == [b.title for b in initial_blogs]
        assert set(root["blogs"][0]) == {"id", "title", "author", "url"}

    async def test_user_without_blogs(self, client, other_token):
        users = (await client.get(USERS_URL)).json()
        assert users[0]["blogs"] == []
