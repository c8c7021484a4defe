"""Blog-related API endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from bloglist.core.modules.blog.models import BlogStats, BlogView
from bloglist.core.modules.blog.validators import MAX_LIKES
from bloglist.web.deps import AppDep, AuthTokenDep, OptionalAuthTokenDep
from bloglist.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["blogs"])


class CreateBlogRequest(BaseModel):
    """Request to create a new blog.

    `likes` is taken as-is: absent or non-numeric values are stored as 0.
    """

    title: str | None = Field(None, description="Blog title (required)")
    author: str | None = Field(None, description="Blog author")
    url: str | None = Field(None, description="Blog URL (required)")
    likes: Any = Field(None, description="Initial like count, defaults to 0")


class UpdateBlogRequest(BaseModel):
    """Request to change the like count of a blog. Other fields are ignored."""

    likes: int = Field(..., ge=0, le=MAX_LIKES, strict=True, description="New like count")


@router.get(
    "/blogs",
    summary="List blogs",
    description="Get all blogs in insertion order.",
    operation_id="listBlogs",
    responses={200: {"description": "List of all blogs"}},
)
async def list_blogs(app: AppDep) -> list[BlogView]:
    return await app.get_all_blogs()


@router.get(
    "/blogs/stats",
    summary="Blog statistics",
    description="Total likes across all blogs and the most liked blog (first one wins on ties).",
    operation_id="getBlogStats",
    responses={200: {"description": "Aggregates over all blogs"}},
)
async def get_blog_stats(app: AppDep) -> BlogStats:
    return await app.get_blog_stats()


@router.get(
    "/blogs/{blog_id}",
    summary="Get blog",
    description="Get a specific blog by ID.",
    operation_id="getBlog",
    responses={
        200: {"description": "Blog details"},
        400: {"model": ErrorResponse, "description": "Malformed blog ID"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def get_blog(blog_id: str, app: AppDep) -> BlogView:
    return await app.get_blog(blog_id)


@router.post(
    "/blogs",
    summary="Create blog",
    description="Create a new blog. Authenticated callers become its owner; anonymous blogs have no owner.",
    operation_id="createBlog",
    status_code=201,
    responses={
        201: {"description": "Blog created successfully"},
        400: {"model": ErrorResponse, "description": "Missing title or url"},
        401: {"model": ErrorResponse, "description": "Invalid token"},
    },
)
async def create_blog(request: CreateBlogRequest, app: AppDep, auth_token: OptionalAuthTokenDep) -> BlogView:
    return await app.create_blog(auth_token, request.title, request.url, request.author, request.likes)


@router.put(
    "/blogs/{blog_id}",
    summary="Update blog likes",
    description="Set the like count of a blog. Only the owner can update it.",
    operation_id="updateBlogLikes",
    responses={
        200: {"description": "Updated blog"},
        400: {"model": ErrorResponse, "description": "Malformed blog ID"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not the owner of this blog"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def update_blog_likes(blog_id: str, request: UpdateBlogRequest, app: AppDep, auth_token: AuthTokenDep) -> BlogView:
    return await app.update_blog_likes(auth_token, blog_id, request.likes)


@router.delete(
    "/blogs/{blog_id}",
    summary="Delete blog",
    description="Delete a blog. Only the owner can delete it.",
    operation_id="deleteBlog",
    status_code=204,
    responses={
        204: {"description": "Blog deleted successfully"},
        400: {"model": ErrorResponse, "description": "Malformed blog ID"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Not the owner of this blog"},
        404: {"model": ErrorResponse, "description": "Blog not found"},
    },
)
async def delete_blog(blog_id: str, app: AppDep, auth_token: AuthTokenDep) -> None:
    await app.delete_blog(auth_token, blog_id)
