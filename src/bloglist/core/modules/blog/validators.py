import math
from numbers import Real
from typing import Any

from bloglist.errors import MissingRequiredFieldError, ValidationError

MAX_LIKES = 2**63 - 1  # largest int BSON can store


def validate_new_blog(title: str | None, url: str | None) -> tuple[str, str]:
    """Both title and url must be present and non-empty. No length limits."""
    if not title or not url:
        raise MissingRequiredFieldError
    return title, url


def normalize_likes(value: Any) -> int:
    """Turn raw likes input into a stored like count.

    Absent or non-numeric values (booleans included) become 0. Numbers must be
    non-negative whole values that fit a stored 64-bit integer.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return 0
    if not math.isfinite(value) or value < 0 or value > MAX_LIKES or value != int(value):
        raise ValidationError("likes must be a non-negative integer")
    return int(value)
