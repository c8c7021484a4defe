from typing import Any

import bcrypt
import structlog
from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from bloglist.core.core import Service
from bloglist.core.modules.user.models import User
from bloglist.core.modules.user.validators import password_fits_hash, validate_registration
from bloglist.errors import NotFoundError, UsernameTakenError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Manages registered users. Every lookup reads the current store state."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")

    async def get_user(self, user_id: ObjectId) -> User:
        doc = await self._collection.find_one({"_id": user_id})
        if doc is None:
            raise NotFoundError(f"User '{user_id}' not found")
        return User.model_validate(doc)

    async def get_user_by_username(self, username: str) -> User:
        user = await self.find_user_by_username(username)
        if user is None:
            raise NotFoundError(f"User '{username}' not found")
        return user

    async def find_user_by_username(self, username: str) -> User | None:
        doc = await self._collection.find_one({"username": username})
        return None if doc is None else User.model_validate(doc)

    async def has_username(self, username: str) -> bool:
        return await self._collection.find_one({"username": username}) is not None

    async def get_all_users(self) -> list[User]:
        return await User.list_cursor(self._collection.find({}, sort=[("_id", 1)]))

    async def count_users(self) -> int:
        return await self._collection.count_documents({})

    async def create_user(self, username: str | None, password: str | None, name: str | None = None) -> User:
        """Validate input, hash the password and insert the user."""
        username, password = validate_registration(username, password)
        if await self.has_username(username):
            raise UsernameTakenError

        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
        user = User(username=username, name=name, password_hash=password_hash)
        try:
            await self._collection.insert_one(user.to_mongo())
        except DuplicateKeyError:
            # Lost a race with a concurrent registration; the unique index has the final word
            raise UsernameTakenError from None

        logger.info("user_created", user_id=str(user.id), username=username)
        return user

    async def verify_password(self, username: str, password: str) -> User | None:
        """Return the user if the password matches its stored hash."""
        user = await self.find_user_by_username(username)
        if user is None or not password_fits_hash(password):
            return None
        if not bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8")):
            return None
        return user

    async def add_blog(self, user_id: ObjectId, blog_id: ObjectId) -> None:
        await self._collection.update_one({"_id": user_id}, {"$push": {"blogs": blog_id}, "$inc": {"version": 1}})

    async def remove_blog(self, user_id: ObjectId, blog_id: ObjectId) -> None:
        await self._collection.update_one({"_id": user_id}, {"$pull": {"blogs": blog_id}, "$inc": {"version": 1}})

    async def on_start(self) -> None:
        await self._collection.create_index([("username", 1)], unique=True)
        logger.debug("user_service_started", user_count=await self.count_users())
