"""
Request-scoped context for the post handlers.

A ``RequestContext`` is created once per request by a FastAPI dependency
and handed by reference to every step of the chain: authentication fills
``user``, the existence check fills ``post``, and the ownership check and
route handlers read them.
"""

from dataclasses import dataclass

from blog_api.models.post import PostDB
from blog_api.schemas.auth import AuthenticatedUser


@dataclass
class RequestContext:
    """Per-request authorization state."""

    user: AuthenticatedUser | None = None
    post: PostDB | None = None


__all__ = ["RequestContext"]
