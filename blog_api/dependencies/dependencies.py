# blog_api/dependencies/dependencies.py

"""
Dependency chain for the post routes.

``get_request_context`` creates the per-request ``RequestContext``; FastAPI
caches dependencies for the lifetime of a request, so every dependency
below receives the same instance. ``load_post`` and ``check_own_post`` are
the existence and ownership checks.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, Path
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED

from blog_api.context import RequestContext
from blog_api.db import get_session
from blog_api.managers.token_manager import decode_access_token
from blog_api.repositories import PostRepository, PostStore
from blog_api.schemas.auth import AuthenticatedUser
from blog_api.services import HtmlSanitizer, PostService, Sanitizer

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
) -> AuthenticatedUser:
    """
    Resolve the caller from the bearer token.

    Parameters
    ----------
    token : str
        Bearer token.

    Returns
    -------
    AuthenticatedUser
        Identity and username carried by the token.
    """
    token_data = decode_access_token(token)
    if not token_data:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return AuthenticatedUser(id=token_data.user_id, username=token_data.username)


def get_request_context() -> RequestContext:
    """Create the request's context object."""
    return RequestContext()


ContextDep = Annotated[RequestContext, Depends(get_request_context)]


def get_post_store(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PostStore:
    """Resolve the post store bound to the request's session."""
    return PostRepository(session)


@lru_cache
def get_sanitizer() -> Sanitizer:
    """Return the shared allow-list sanitizer."""
    return HtmlSanitizer()


def get_post_service(
    store: Annotated[PostStore, Depends(get_post_store)],
    sanitizer: Annotated[Sanitizer, Depends(get_sanitizer)],
) -> PostService:
    """Resolve the post service."""
    return PostService(store, sanitizer=sanitizer)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]


async def get_auth_context(
    user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    context: ContextDep,
) -> RequestContext:
    """Attach the authenticated caller to the request context."""
    context.user = user
    return context


async def load_post(
    post_id: Annotated[str, Path(description="Post ID")],
    context: ContextDep,
    service: PostServiceDep,
) -> RequestContext:
    """Existence check: load the post named in the path into the context."""
    await service.load_post(post_id, context)
    return context


async def check_own_post(
    context: Annotated[RequestContext, Depends(load_post)],
    _auth: Annotated[RequestContext, Depends(get_auth_context)],
    service: PostServiceDep,
) -> RequestContext:
    """Ownership check: only the author may continue."""
    service.check_own_post(context)
    return context


AuthContextDep = Annotated[RequestContext, Depends(get_auth_context)]
PostContextDep = Annotated[RequestContext, Depends(load_post)]
OwnPostContextDep = Annotated[RequestContext, Depends(check_own_post)]
