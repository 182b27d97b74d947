"""Protocol definition for post storage backends."""

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from blog_api.models.post import PostDB


@runtime_checkable
class PostStore(Protocol):
    """
    Protocol for post storage implementations.

    ``PostRepository`` implements it on an SQLAlchemy session; tests plug in
    an in-memory store. Implementations raise ``DatabaseError`` subclasses
    when the backend fails.
    """

    async def get_by_id(self, post_id: UUID) -> PostDB | None:
        """Return the post with this id, or None."""
        ...

    async def get_page(
        self,
        *,
        skip: int,
        limit: int,
        tag: str | None = None,
        username: str | None = None,
    ) -> list[PostDB]:
        """Return matching posts newest-first, skipping ``skip`` and capped at ``limit``."""
        ...

    async def count(self, *, tag: str | None = None, username: str | None = None) -> int:
        """Count matching posts."""
        ...

    async def create(self, post: PostDB) -> PostDB:
        """Persist a new post and return it as stored."""
        ...

    async def update(self, post_id: UUID, changes: dict[str, Any]) -> PostDB | None:
        """Apply ``changes`` to the post; None when no post matches."""
        ...

    async def delete(self, post_id: UUID) -> bool:
        """Delete the post; False when nothing matched."""
        ...
