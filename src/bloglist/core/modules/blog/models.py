from bson import ObjectId
from pydantic import BaseModel, Field

from bloglist.core.db import MongoModel


class Blog(MongoModel):
    """Blog entry. `user` is the owner, or None when created without authentication."""

    title: str
    url: str
    author: str | None = None
    likes: int = Field(0, ge=0)
    user: ObjectId | None = None


class BlogView(BaseModel):
    """Blog entry (API representation)."""

    id: str = Field(..., description="Blog ID")
    title: str
    author: str | None = None
    url: str
    likes: int = Field(..., ge=0)
    user: str | None = Field(None, description="Owner user ID")

    @classmethod
    def from_domain(cls, blog: Blog) -> "BlogView":
        """Create view model from domain model. The stored record is left untouched."""
        return cls(
            id=str(blog.id),
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            user=None if blog.user is None else str(blog.user),
        )


class BlogStats(BaseModel):
    """Aggregates over the whole blog collection."""

    total_likes: int = Field(..., ge=0)
    favorite: BlogView | None = Field(None, description="Most liked blog, null when there are no blogs")
