"""Shared pytest fixtures."""

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from bloglist.app import App
from bloglist.config import Config
from bloglist.core.core import Core
from bloglist.core.modules.blog.models import Blog
from bloglist.core.modules.user.models import User
from bloglist.web.server import create_fastapi_app

INITIAL_BLOGS = [
    {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
]


@pytest.fixture
def config():
    """Configuration pointing at a throwaway database name."""
    return Config(database_url="mongodb://localhost:27017/bloglist_test", host="127.0.0.1", port=3003, debug=True)


@pytest.fixture
async def core(config):
    """Core with all services started against an isolated in-memory MongoDB."""
    core = Core(config, AsyncMongoMockClient())
    async with core.lifespan():
        yield core


@pytest.fixture
async def app_instance(config):
    """App facade backed by its own in-memory MongoDB."""
    app = App(config, AsyncMongoMockClient())
    async with app.lifespan():
        yield app


@pytest.fixture
async def client(app_instance, config):
    """HTTP client talking to the FastAPI app in-process."""
    fastapi_app = create_fastapi_app(app_instance, config)
    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def root_token(app_instance):
    """Register user 'root' and return a session token for it."""
    await app_instance.create_user("root", "sekret", "Superuser")
    return await app_instance.login("root", "sekret")


@pytest.fixture
async def other_token(app_instance):
    """Register a second user who owns nothing."""
    await app_instance.create_user("mluukkai", "salainen", "Matti Luukkainen")
    return await app_instance.login("mluukkai", "salainen")


@pytest.fixture
async def initial_blogs(app_instance, root_token):
    """Seed blogs owned by 'root'."""
    return [await app_instance.create_blog(root_token, **blog) for blog in INITIAL_BLOGS]


@pytest.fixture
def mock_user():
    """Create a mock user for testing."""
    return User(
        id=ObjectId("5a422a851b54a676234d17f7"),
        username="testuser",
        name="Test User",
        password_hash="$2b$12$hashed_password_here",
    )


@pytest.fixture
def make_blog():
    """Build detached Blog records for pure-function tests."""

    def _make_blog(likes: int, title: str | None = None) -> Blog:
        return Blog(title=title or f"blog with {likes} likes", url="http://example.com", likes=likes)

    return _make_blog


@pytest.fixture
def root_headers(root_token):
    """Authorization header for the 'root' user."""
    return {"Authorization": f"Bearer {root_token}"}


@pytest.fixture
def other_headers(other_token):
    """Authorization header for a user who owns no blogs."""
    return {"Authorization": f"Bearer {other_token}"}
