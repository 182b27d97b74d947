"""Post repository for database operations."""

from logging import getLogger
from typing import Any
from uuid import UUID

from sqlalchemy import delete, desc, func, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from blog_api.configs import file_logger
from blog_api.errors.database import DatabaseConnectionError
from blog_api.models.post import PostDB

logger = file_logger(getLogger(__name__))


def parse_post_id(raw: str) -> UUID | None:
    """
    Parse a path segment into a post id.

    Args:
        raw: Identifier as received in the URL

    Returns:
        UUID | None: Parsed id, or None when the value is not a well-formed key
    """
    try:
        return UUID(raw)
    except (TypeError, ValueError, AttributeError):
        return None


def apply_filters[T: Select](
    statement: T,
    tag: str | None = None,
    username: str | None = None,
) -> T:
    """
    Restrict a statement to posts matching the list filters.

    Args:
        statement: Select statement over ``PostDB``
        tag: Only posts whose tags contain this label
        username: Only posts by this author

    Returns:
        The filtered statement
    """
    if username:
        # pyrefly: ignore [bad-argument-type]
        statement = statement.where(PostDB.author_username == username)
    if tag:
        # pyrefly: ignore [missing-attribute]
        statement = statement.where(PostDB.tags.cast(JSONB).contains([tag]))
    return statement


class PostRepository:
    """
    Repository for Post database operations.

    Writes are committed before returning. Every SQLAlchemy failure,
    including one at commit, is re-raised as ``DatabaseConnectionError``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, post_id: UUID) -> PostDB | None:
        """
        Get post by ID.

        Args:
            post_id: Post UUID

        Returns:
            PostDB | None: Post if found, None otherwise
        """
        try:
            result = await self.session.execute(
                # pyrefly: ignore [bad-argument-type]
                select(PostDB).where(PostDB.id == post_id),
            )
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to load post: {e}") from e
        return result.scalar_one_or_none()

    async def get_page(
        self,
        *,
        skip: int,
        limit: int,
        tag: str | None = None,
        username: str | None = None,
    ) -> list[PostDB]:
        """
        Get one page of posts, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            tag: Optional tag filter
            username: Optional author filter

        Returns:
            list[PostDB]: Posts on the page
        """
        query = apply_filters(select(PostDB), tag=tag, username=username)
        query = (
            # pyrefly: ignore [bad-argument-type]
            query.order_by(desc(PostDB.published_date), desc(PostDB.id))
            .offset(skip)
            .limit(limit)
        )

        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to list posts: {e}") from e
        return list(result.scalars().all())

    async def count(self, *, tag: str | None = None, username: str | None = None) -> int:
        """
        Count posts matching the filters.

        Returns:
            int: Number of matching posts
        """
        statement = apply_filters(
            select(func.count()).select_from(PostDB),
            tag=tag,
            username=username,
        )
        try:
            result = await self.session.execute(statement)
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(detail=f"Failed to count posts: {e}") from e
        count = result.scalar()
        return count if count is not None else 0

    async def create(self, post: PostDB) -> PostDB:
        """
        Persist a new post.

        Args:
            post: Post to insert

        Returns:
            PostDB: Stored post, refreshed from the database
        """
        return await self._add_and_refresh(post)

    async def update(self, post_id: UUID, changes: dict[str, Any]) -> PostDB | None:
        """
        Apply a partial update.

        Args:
            post_id: Post UUID
            changes: Column values to overwrite

        Returns:
            PostDB | None: Updated post if found, None otherwise
        """
        db_post = await self.get_by_id(post_id)
        if not db_post:
            return None

        for key, value in changes.items():
            setattr(db_post, key, value)

        return await self._add_and_refresh(db_post)

    async def delete(self, post_id: UUID) -> bool:
        """
        Delete post by ID.

        Args:
            post_id: Post UUID

        Returns:
            bool: True if a row was deleted, False if none matched
        """
        try:
            result = await self.session.execute(
                # pyrefly: ignore [bad-argument-type]
                delete(PostDB).where(PostDB.id == post_id),
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to delete post: {e}") from e
        return bool(result.rowcount)

    async def _add_and_refresh(self, record: PostDB) -> PostDB:
        """
        Add a record, commit, and refresh it from the database.

        Raises:
            DatabaseConnectionError: If the write fails
        """
        try:
            self.session.add(record)
            await self.session.commit()
            await self.session.refresh(record)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(detail=f"Failed to save post: {e}") from e
        return record
