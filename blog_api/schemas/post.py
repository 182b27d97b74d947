"""
Post schemas.

Request payload models for creating and partially updating posts, the
response model that renders a stored post, and the list query container.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    StringConstraints,
    field_validator,
)

from blog_api.models.post import PostDB

NonEmptyStr = Annotated[StrictStr, StringConstraints(min_length=1)]


class PostCreate(BaseModel):
    """Payload for creating a post. Every field is required."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr = Field(..., description="Post title", examples=["Hello world"])
    body: NonEmptyStr = Field(
        ...,
        description="Rich text body (HTML, sanitized before storage)",
        examples=["<p>First <b>post</b></p>"],
    )
    tags: list[NonEmptyStr] = Field(
        ...,
        description="Tag labels, may be empty",
        examples=[["intro", "news"]],
    )


class PostUpdate(BaseModel):
    """Partial payload for updating a post. Only supplied fields change."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr | None = Field(default=None, description="Post title")
    body: NonEmptyStr | None = Field(default=None, description="Rich text body")
    tags: list[NonEmptyStr] | None = Field(default=None, description="Tag labels")

    @field_validator("title", "body", "tags", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        """Omitting a field leaves it untouched; sending null is an error."""
        if value is None:
            mssg = "Field may be omitted but not null"
            raise ValueError(mssg)
        return value


class AuthorResponse(BaseModel):
    """Author reference embedded in a post."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str


class PostResponse(BaseModel):
    """Post as returned to clients."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Hello world",
                "body": "<p>First <b>post</b></p>",
                "tags": ["intro", "news"],
                "user": {"_id": "123e4567-e89b-12d3-a456-426614174000", "username": "velopert"},
                "publishedDate": "2025-01-01T09:30:00+00:00",
            },
        },
    )

    id: UUID = Field(alias="_id")
    title: str
    body: str
    tags: list[str]
    user: AuthorResponse
    published_date: datetime = Field(alias="publishedDate")

    @classmethod
    def from_db(cls, post: PostDB) -> "PostResponse":
        """Build the response model from a stored post."""
        return cls(
            id=post.id,
            title=post.title,
            body=post.body,
            tags=list(post.tags),
            user=AuthorResponse(id=post.author_id, username=post.author_username),
            published_date=post.published_date,
        )


@dataclass(frozen=True)
class PostListQuery:
    """
    Query container for post listing.

    Parameters
    ----------
    page : int
        1-based page number.
    tag : str | None
        Only posts carrying this tag.
    username : str | None
        Only posts written by this user.
    """

    page: int = 1
    tag: str | None = None
    username: str | None = None
