"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import CheckConstraint, DateTime, Index, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, Relationship, SQLModel, String

from bloglist.configs import MAX_TITLE_LENGTH, MAX_URL_LENGTH

if TYPE_CHECKING:
    from bloglist.models.user import UserDB


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Each row is one blog entry. `user_id` records the owning user, stamped
    once at creation from the verified credential and never rewritten by
    the update endpoint.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
        Index("ix_blogs_user_created", "user_id", "created_at"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User (seeded blogs may have no owner)
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    url: str = Field(
        sa_column=Column(String(MAX_URL_LENGTH), nullable=False),
        description="Blog URL",
    )

    # Optional fields
    author: str | None = Field(
        default=None,
        sa_column=Column(String(200)),
        description="Name of the blog's author",
    )
    likes: int = Field(
        default=0,
        nullable=False,
        description="Like count",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    user: Optional["UserDB"] = Relationship(back_populates="blogs")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
            },
        },
    )
