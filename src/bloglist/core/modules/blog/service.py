from typing import Any

import structlog
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from bloglist.core.core import Service
from bloglist.core.db import parse_object_id
from bloglist.core.modules.blog.aggregation import favorite_blog, total_likes
from bloglist.core.modules.blog.models import Blog, BlogStats, BlogView
from bloglist.core.modules.blog.validators import MAX_LIKES, normalize_likes, validate_new_blog
from bloglist.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class BlogService(Service):
    """Stores blog entries and keeps each owner's blog list in step."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("blogs")

    async def on_start(self) -> None:
        await self._collection.create_index([("user", 1)])

    async def get_blog(self, blog_id: str | ObjectId) -> Blog:
        """Get blog by ID. Raises MalformedIdError or NotFoundError."""
        object_id = parse_object_id(blog_id)
        doc = await self._collection.find_one({"_id": object_id})
        if doc is None:
            raise NotFoundError(f"Blog '{object_id}' not found")
        return Blog.model_validate(doc)

    async def get_all_blogs(self) -> list[Blog]:
        """All blogs in insertion order."""
        return await Blog.list_cursor(self._collection.find({}, sort=[("_id", 1)]))

    async def get_blogs_by_ids(self, blog_ids: list[ObjectId]) -> list[Blog]:
        if not blog_ids:
            return []
        return await Blog.list_cursor(self._collection.find({"_id": {"$in": blog_ids}}, sort=[("_id", 1)]))

    async def count_blogs(self) -> int:
        return await self._collection.count_documents({})

    async def create_blog(
        self,
        title: str | None,
        url: str | None,
        author: str | None = None,
        likes: Any = None,
        user_id: ObjectId | None = None,
    ) -> Blog:
        """Validate and insert a blog. Missing or non-numeric likes are stored as 0."""
        title, url = validate_new_blog(title, url)
        blog = Blog(title=title, url=url, author=author, likes=normalize_likes(likes), user=user_id)
        await self._collection.insert_one(blog.to_mongo())
        if user_id is not None:
            await self.core.services.user.add_blog(user_id, blog.id)

        logger.info("blog_created", blog_id=str(blog.id), user_id=None if user_id is None else str(user_id))
        return blog

    async def delete_blog(self, blog_id: str | ObjectId) -> None:
        """Delete a blog. Deleting an absent blog raises NotFoundError, so a second delete fails."""
        object_id = parse_object_id(blog_id)
        doc = await self._collection.find_one_and_delete({"_id": object_id})
        if doc is None:
            raise NotFoundError(f"Blog '{object_id}' not found")

        blog = Blog.model_validate(doc)
        if blog.user is not None:
            await self.core.services.user.remove_blog(blog.user, blog.id)
        logger.info("blog_deleted", blog_id=str(object_id))

    async def update_blog_likes(self, blog_id: str | ObjectId, likes: int) -> Blog:
        """Set the like count and bump the revision."""
        object_id = parse_object_id(blog_id)
        if isinstance(likes, bool) or not isinstance(likes, int) or not 0 <= likes <= MAX_LIKES:
            raise ValidationError("likes must be a non-negative integer")

        doc = await self._collection.find_one_and_update(
            {"_id": object_id},
            {"$set": {"likes": likes}, "$inc": {"version": 1}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFoundError(f"Blog '{object_id}' not found")

        logger.info("blog_likes_updated", blog_id=str(object_id), likes=likes)
        return Blog.model_validate(doc)

    async def get_stats(self) -> BlogStats:
        """Compute aggregates over the current collection."""
        blogs = await self.get_all_blogs()
        favorite = favorite_blog(blogs)
        return BlogStats(
            total_likes=total_likes(blogs),
            favorite=None if favorite is None else BlogView.from_domain(favorite),
        )
