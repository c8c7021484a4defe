from fastapi import APIRouter
from pydantic import BaseModel, Field

from bloglist.core.modules.user.models import UserView
from bloglist.web.deps import AppDep
from bloglist.web.openapi import ErrorResponse

router = APIRouter(tags=["users"])


class CreateUserRequest(BaseModel):
    """Registration request. Presence and length are checked by the service so errors carry a specific type."""

    username: str | None = Field(None, description="Unique username, at least 3 characters")
    name: str | None = Field(None, description="Display name")
    password: str | None = Field(None, description="Password, at least 3 characters")


@router.get(
    "/users",
    summary="List all users",
    description="Get all users with summaries of the blogs each of them owns.",
    operation_id="listUsers",
    responses={
        200: {"description": "List of all users"},
    },
)
async def list_users(app: AppDep) -> list[UserView]:
    return await app.get_all_users()


@router.post(
    "/users",
    summary="Register user",
    description="Create a new user account.",
    operation_id="createUser",
    responses={
        201: {"description": "User created successfully"},
        400: {"model": ErrorResponse, "description": "Missing credentials, too short, or username taken"},
    },
    status_code=201,
)
async def create_user(create_data: CreateUserRequest, app: AppDep) -> UserView:
    return await app.create_user(create_data.username, create_data.password, create_data.name)
