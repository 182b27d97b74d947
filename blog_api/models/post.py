"""Post database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

# JSONB on PostgreSQL, plain JSON elsewhere
TagsType = JSON().with_variant(JSONB(), "postgresql")


class PostDB(SQLModel, table=True):
    """
    Post database model.

    One row per blog article. The author columns are copied from the
    authenticated caller at creation time and never touched again.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (
        Index("ix_posts_published_id", "published_date", "id"),
        Index("ix_posts_tags_gin", "tags", postgresql_using="gin"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Post ID",
    )

    title: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post title",
    )
    body: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Sanitized HTML body",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(TagsType, nullable=False),
        description="Ordered tag labels",
    )

    # Author reference
    author_id: str = Field(
        sa_column=Column(String(64), nullable=False, index=True),
        description="Identity of the user who created the post",
    )
    author_username: str = Field(
        sa_column=Column(String(50), nullable=False, index=True),
        description="Username of the author at creation time",
    )

    published_date: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Hello world",
                "body": "<p>First <b>post</b></p>",
                "tags": ["intro", "news"],
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "author_username": "velopert",
            },
        },
    )
