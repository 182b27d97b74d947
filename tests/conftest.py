# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before blog_api is imported anywhere
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.context import RequestContext
from blog_api.dependencies import get_post_store
from blog_api.main import app
from blog_api.managers.token_manager import create_access_token
from blog_api.models import PostDB
from blog_api.schemas.auth import AuthenticatedUser
from tests.fakes import InMemoryPostStore


@pytest.fixture
def store() -> InMemoryPostStore:
    """Create an empty in-memory post store."""
    return InMemoryPostStore()


@pytest.fixture
def author() -> AuthenticatedUser:
    """The user who owns the sample posts."""
    return AuthenticatedUser(id=str(uuid4()), username="velopert")


@pytest.fixture
def other_user() -> AuthenticatedUser:
    """A user who owns nothing."""
    return AuthenticatedUser(id=str(uuid4()), username="intruder")


@pytest.fixture
def make_post(
    store: InMemoryPostStore,
    author: AuthenticatedUser,
) -> Callable[..., PostDB]:
    """Factory adding posts to the store; later calls produce newer posts."""
    base = datetime(2025, 1, 1, tzinfo=UTC)
    counter = {"n": 0}

    def factory(**overrides: Any) -> PostDB:
        counter["n"] += 1
        fields: dict[str, Any] = {
            "title": f"Post {counter['n']}",
            "body": f"<p>Body of post {counter['n']}</p>",
            "tags": ["general"],
            "author_id": author.id,
            "author_username": author.username,
            "published_date": base + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        post = PostDB(**fields)
        store.posts[post.id] = post
        return post

    return factory


@pytest.fixture
def author_context(author: AuthenticatedUser) -> RequestContext:
    """Request context for the author."""
    return RequestContext(user=author)


@pytest.fixture
def auth_headers(author: AuthenticatedUser) -> dict[str, str]:
    """Bearer headers for the author."""
    token = create_access_token(user_id=author.id, username=author.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user: AuthenticatedUser) -> dict[str, str]:
    """Bearer headers for a user who is not the author."""
    token = create_access_token(user_id=other_user.id, username=other_user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(store: InMemoryPostStore) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the post store replaced by ``store``."""
    app.dependency_overrides[get_post_store] = lambda: store
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
