from typing import TYPE_CHECKING

from bson import ObjectId
from pydantic import BaseModel, Field

from bloglist.core.db import MongoModel

if TYPE_CHECKING:
    from bloglist.core.modules.blog.models import Blog


class User(MongoModel):
    """User domain model with credentials."""

    username: str
    name: str | None = None
    password_hash: str  # bcrypt hash
    blogs: list[ObjectId] = Field(default_factory=list)  # Mirrors Blog.user, not authoritative


class BlogSummary(BaseModel):
    """Short blog representation embedded in user listings."""

    id: str = Field(..., description="Blog ID")
    title: str
    author: str | None = None
    url: str

    @classmethod
    def from_domain(cls, blog: "Blog") -> "BlogSummary":
        return cls(id=str(blog.id), title=blog.title, author=blog.author, url=blog.url)


class UserView(BaseModel):
    """User account information (API representation)."""

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    name: str | None = Field(None, description="Display name")
    blogs: list[BlogSummary] = Field(default_factory=list, description="Blogs owned by the user")

    @classmethod
    def from_domain(cls, user: User, blogs: list["Blog"] | None = None) -> "UserView":
        """Create view model from domain model, dropping the password hash and revision."""
        summaries = [BlogSummary.from_domain(blog) for blog in blogs or []]
        return cls(id=str(user.id), username=user.username, name=user.name, blogs=summaries)
