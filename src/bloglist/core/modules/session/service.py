import secrets
from typing import Any

import structlog
from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from bloglist.core.core import Service
from bloglist.core.modules.session.models import SESSION_TTL_SECONDS, AuthToken, Session
from bloglist.core.modules.user.models import User
from bloglist.errors import AuthenticationError, NotFoundError

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues auth tokens and resolves them back to users."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("sessions")

    async def on_start(self) -> None:
        await self._collection.create_index([("auth_token", 1)], unique=True)
        await self._collection.create_index([("user_id", 1)])
        await self._collection.create_index([("created_at", 1)], expireAfterSeconds=SESSION_TTL_SECONDS)

    async def create_session(self, user_id: ObjectId) -> AuthToken:
        auth_token = AuthToken(secrets.token_urlsafe(32))
        await self._collection.insert_one(Session(user_id=user_id, auth_token=auth_token).to_mongo())
        logger.debug("session_created", user_id=str(user_id))
        return auth_token

    async def get_authenticated_user(self, auth_token: AuthToken) -> User:
        """Resolve a token to its user. Raises AuthenticationError for unknown tokens or deleted users."""
        session = await self._collection.find_one({"auth_token": auth_token})
        if session is None:
            raise AuthenticationError("Invalid or expired session")

        try:
            return await self.core.services.user.get_user(session["user_id"])
        except NotFoundError:
            raise AuthenticationError("Invalid or expired session") from None

    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        try:
            await self.get_authenticated_user(auth_token)
        except AuthenticationError:
            return False
        return True

    async def invalidate_session(self, auth_token: AuthToken) -> None:
        await self._collection.delete_one({"auth_token": auth_token})
