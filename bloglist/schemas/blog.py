"""
Blog schemas for the Bloglist application.

Request bodies are deliberately lenient about `title` and `url` so the
authorization policy, not the schema layer, owns the "required and
non-empty" rule and its 400 response.
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.configs import MAX_TITLE_LENGTH, MAX_URL_LENGTH


class BlogCreate(BaseModel):
    """Blog creation body (owner comes from the bearer credential)."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default=None,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title (required, non-empty)",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        description="Name of the blog's author",
        examples=["Michael Chan"],
    )
    url: str | None = Field(
        default=None,
        max_length=MAX_URL_LENGTH,
        description="Blog URL (required, non-empty)",
        examples=["https://reactpatterns.com/"],
    )
    likes: int | None = Field(
        default=None,
        ge=0,
        description="Like count, defaults to 0",
        examples=[7],
    )

    @field_validator("likes", mode="before")
    @classmethod
    def falsy_likes_to_none(cls, value: Any) -> Any:
        """Treat any falsy likes value (`""`, `false`, `0`) as not supplied."""
        return value or None


class BlogUpdate(BaseModel):
    """Blog update body. Fields left out of the body are not touched."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    author: str | None = None
    url: str | None = Field(default=None, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)


class NewBlog(BaseModel):
    """A blog body that passed the creation rules, ready to persist."""

    model_config = ConfigDict(frozen=True)

    title: str
    author: str | None = None
    url: str
    likes: int = 0


class BlogResponse(BaseModel):
    """Blog as returned by create, fetch and update; `user` is the owner id."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: UUID | None = Field(default=None, validation_alias="user_id")


class BlogOwner(BaseModel):
    """Owner fields expanded into blog listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogListResponse(BaseModel):
    """Blog as returned by the listing, with the owner expanded."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int
    user: BlogOwner | None = None
