"""User schemas for registration and listings."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from bloglist.configs import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH


class UserCreate(BaseModel):
    """User registration body."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=200,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        description="Password",
        examples=["salainen"],
    )

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < MIN_USERNAME_LENGTH:
            mssg = f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            raise ValueError(mssg)
        return stripped

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: SecretStr) -> SecretStr:
        if len(value.get_secret_value()) < MIN_PASSWORD_LENGTH:
            mssg = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            raise ValueError(mssg)
        return value


class UserBlog(BaseModel):
    """Blog fields expanded into user listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int


class UserResponse(BaseModel):
    """Public user representation (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlog] = Field(default_factory=list)
