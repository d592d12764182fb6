"""User routes: registration and listing with each user's blogs."""

from typing import Annotated

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserRepoDep
from bloglist.monitoring import get_logger
from bloglist.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["👤 Users"])

logger = get_logger(__name__)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. The password is stored only as a hash.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad Request",
            "content": {
                "application/json": {
                    "example": {"detail": "Validation failed", "errors": []},
                },
            },
        },
        409: {
            "description": "Conflict",
            "content": {
                "application/json": {
                    "example": {"detail": "expected `username` to be unique"},
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(
    user_create: Annotated[
        UserCreate,
        Body(
            examples=[
                {"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
            ],
        ),
    ],
    repo: UserRepoDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    user_create : UserCreate
        Registration data.
    repo : UserRepository
        User repository dependency.

    Returns
    -------
    UserResponse
        Created user, with an empty blog list.

    Raises
    ------
    DuplicateEntryError
        If the username is already taken.
    """
    user = await repo.create(user_create)
    logger.info(f"User {user.username} registered")
    return UserResponse(id=user.id, username=user.username, name=user.name, blogs=[])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="List every user with the blogs they own, oldest first.",
    operation_id="users_list",
)
async def get_users(repo: UserRepoDep) -> list[UserResponse]:
    """List users with their blogs expanded."""
    users = await repo.get_all()
    return [UserResponse.model_validate(user) for user in users]
