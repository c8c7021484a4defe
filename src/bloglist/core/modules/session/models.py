"""Session management models."""

from datetime import datetime
from typing import NewType

from bson import ObjectId
from pydantic import Field

from bloglist.core.db import MongoModel
from bloglist.utils import now

AuthToken = NewType("AuthToken", str)

SESSION_TTL_SECONDS = 30 * 24 * 60 * 60


class Session(MongoModel):
    """Login session, the opaque credential behind an auth token.

    Indexed on auth_token - unique, user_id, created_at (TTL 30 days).
    """

    user_id: ObjectId
    auth_token: str
    created_at: datetime = Field(default_factory=now)
