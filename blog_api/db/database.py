"""Database engine and session management."""

from collections.abc import AsyncGenerator
from logging import getLogger

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_api.configs import file_logger, settings

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000

engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_size=settings.POOL_SIZE,
    max_overflow=settings.MAX_OVERFLOW,
    pool_timeout=settings.POOL_TIMEOUT,
    pool_recycle=settings.POOL_RECYCLE,
    pool_pre_ping=True,
    connect_args={
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {
            "statement_timeout": str(STATEMENT_TIMEOUT_MS),
            "lock_timeout": str(STATEMENT_TIMEOUT_MS),
        },
    },
)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Nothing is committed here; ``PostRepository`` commits its own writes.
    Anything left uncommitted is rolled back when the session closes.

    Yields:
        AsyncSession: Database session for the request
    """
    async with async_session_maker() as session:
        yield session


async def init_db() -> None:
    """
    Create the posts table if it does not exist.

    Note:
        Schema changes are expected to go through migrations; this only
        bootstraps an empty database.
    """
    async with engine.begin() as conn:
        from blog_api.models import PostDB  # noqa: F401, PLC0415

        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
    logger.info("Database connections closed")
