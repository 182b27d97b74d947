from blog_api.schemas.auth import AuthenticatedUser, TokenData
from blog_api.schemas.post import (
    AuthorResponse,
    PostCreate,
    PostListQuery,
    PostResponse,
    PostUpdate,
)

__all__ = [
    "AuthenticatedUser",
    "AuthorResponse",
    "PostCreate",
    "PostListQuery",
    "PostResponse",
    "PostUpdate",
    "TokenData",
]
