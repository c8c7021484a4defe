from typing import Any, Self

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo.asynchronous.cursor import AsyncCursor

from bloglist.errors import MalformedIdError


def parse_object_id(value: str | ObjectId) -> ObjectId:
    """Convert a public id string to an ObjectId. Raises MalformedIdError if it is not 24 hex chars."""
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        raise MalformedIdError(value)
    return ObjectId(value)


class MongoModel(BaseModel):
    """Stored document. `version` is an internal revision counter, bumped on every update."""

    id: ObjectId = Field(alias="_id", default_factory=ObjectId)
    version: int = 0

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_mongo(self) -> dict[str, Any]:
        """Convert the model to a dictionary for MongoDB storage with _id field."""
        data = self.model_dump()
        data["_id"] = data.pop("id")
        return data

    @classmethod
    async def list_cursor(cls, cursor: AsyncCursor[dict[str, Any]]) -> list[Self]:
        """Iterate over an AsyncCursor and return a list of model instances."""
        return [cls.model_validate(item) async for item in cursor]
