"""User database model using SQLModel."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, Relationship, SQLModel, String

from bloglist.configs import MAX_USERNAME_LENGTH

if TYPE_CHECKING:
    from bloglist.models.blog import BlogDB


class UserDB(SQLModel, table=True):
    """
    User database model.

    `blogs` is the user's owned blog list in creation order. It is derived
    from `blogs.user_id`, so appending a blog is the same write that stores it.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    # Required fields
    username: str = Field(
        sa_column=Column(String(MAX_USERNAME_LENGTH), unique=True, nullable=False, index=True),
        description="Username (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Hashed password",
    )

    # Optional profile fields
    name: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Display name",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )

    blogs: list["BlogDB"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"order_by": "BlogDB.created_at", "lazy": "selectin"},
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
            },
        },
    )
