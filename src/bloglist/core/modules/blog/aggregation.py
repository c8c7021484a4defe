"""Aggregates over a sequence of blogs. Pure functions, computed on demand."""

from collections.abc import Iterable

from bloglist.core.modules.blog.models import Blog


def total_likes(blogs: Iterable[Blog]) -> int:
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Iterable[Blog]) -> Blog | None:
    """Return the most liked blog, or None for an empty input.

    Ties go to the first maximal blog in input order.
    """
    favorite: Blog | None = None
    for blog in blogs:
        if favorite is None or blog.likes > favorite.likes:
            favorite = blog
    return favorite
