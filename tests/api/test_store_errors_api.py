"""Tests for requests made while the database cannot be reached."""

import pytest
from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

BLOGS_URL = "/api/v1/blogs"


@pytest.fixture
def services(app_instance):
    return app_instance._core.services


class TestStoreUnavailable:
    """pymongo connection failures during a request are answered with 503."""

    async def test_server_selection_timeout_is_503(self, client, services, monkeypatch):
        async def unreachable():
            raise ServerSelectionTimeoutError("No servers found yet")

        monkeypatch.setattr(services.blog, "get_all_blogs", unreachable)

        response = await client.get(BLOGS_URL)

        assert response.status_code == 503
        assert response.json() == {"message": "Database is unavailable", "type": "store_unavailable"}

    async def test_lost_connection_on_write_is_503(self, client, services, monkeypatch):
        async def connection_lost(*args, **kwargs):
            raise AutoReconnect("connection closed")

        monkeypatch.setattr(services.blog, "create_blog", connection_lost)

        response = await client.post(BLOGS_URL, json={"title": "T", "url": "u"})

        assert response.status_code == 503
        assert response.json()["type"] == "store_unavailable"
