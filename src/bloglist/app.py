from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from pymongo import AsyncMongoClient

from bloglist.config import Config
from bloglist.core.core import Core
from bloglist.core.modules.blog.models import BlogStats, BlogView
from bloglist.core.modules.session.models import AuthToken
from bloglist.core.modules.user.models import UserView
from bloglist.errors import AuthenticationError


class App:
    """Facade for all application operations, validates permissions before delegating to Core.

    Every method returns view models, never stored records.
    """

    def __init__(self, config: Config, mongo_client: AsyncMongoClient[dict[str, Any]] | None = None) -> None:
        self._core = Core(config, mongo_client)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Authentication ===
    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        return await self._core.services.session.is_auth_token_valid(auth_token)

    async def login(self, username: str, password: str) -> AuthToken:
        """Authenticate user and create session."""
        user = await self._core.services.user.verify_password(username, password)
        if user is None:
            raise AuthenticationError("Invalid username or password")
        return await self._core.services.session.create_session(user.id)

    async def logout(self, auth_token: AuthToken) -> None:
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.session.invalidate_session(auth_token)

    # === Users ===
    async def create_user(self, username: str | None, password: str | None, name: str | None = None) -> UserView:
        """Register a new user (public)."""
        user = await self._core.services.user.create_user(username, password, name)
        return UserView.from_domain(user)

    async def get_all_users(self) -> list[UserView]:
        """Get all users with summaries of the blogs they own."""
        users = await self._core.services.user.get_all_users()
        views = []
        for user in users:
            blogs = await self._core.services.blog.get_blogs_by_ids(user.blogs)
            views.append(UserView.from_domain(user, blogs))
        return views

    async def get_current_user(self, auth_token: AuthToken) -> UserView:
        user = await self._core.services.access.ensure_authenticated(auth_token)
        blogs = await self._core.services.blog.get_blogs_by_ids(user.blogs)
        return UserView.from_domain(user, blogs)

    # === Blogs ===
    async def get_all_blogs(self) -> list[BlogView]:
        blogs = await self._core.services.blog.get_all_blogs()
        return [BlogView.from_domain(blog) for blog in blogs]

    async def get_blog(self, blog_id: str) -> BlogView:
        blog = await self._core.services.blog.get_blog(blog_id)
        return BlogView.from_domain(blog)

    async def get_blog_stats(self) -> BlogStats:
        return await self._core.services.blog.get_stats()

    async def create_blog(
        self,
        auth_token: AuthToken | None,
        title: str | None,
        url: str | None,
        author: str | None = None,
        likes: Any = None,
    ) -> BlogView:
        """Create a blog owned by the caller, or without an owner when no token is given."""
        user_id = None
        if auth_token is not None:
            current_user = await self._core.services.access.ensure_authenticated(auth_token)
            user_id = current_user.id
        blog = await self._core.services.blog.create_blog(title, url, author, likes, user_id)
        return BlogView.from_domain(blog)

    async def delete_blog(self, auth_token: AuthToken | None, blog_id: str) -> None:
        """Delete a blog (owner only)."""
        blog = await self._core.services.access.ensure_blog_owner(auth_token, blog_id)
        await self._core.services.blog.delete_blog(blog.id)

    async def update_blog_likes(self, auth_token: AuthToken | None, blog_id: str, likes: int) -> BlogView:
        """Set the like count of a blog (owner only)."""
        blog = await self._core.services.access.ensure_blog_owner(auth_token, blog_id)
        updated = await self._core.services.blog.update_blog_likes(blog.id, likes)
        return BlogView.from_domain(updated)
