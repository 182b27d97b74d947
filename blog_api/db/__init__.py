"""Database engine and session helpers."""

from blog_api.db.database import (
    async_session_maker,
    close_db,
    engine,
    get_session,
    init_db,
)

__all__ = [
    "async_session_maker",
    "close_db",
    "engine",
    "get_session",
    "init_db",
]
