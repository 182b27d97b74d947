"""Repository layer for database operations."""

from blog_api.repositories.post import PostRepository, apply_filters, parse_post_id
from blog_api.repositories.protocols import PostStore

__all__ = ["PostRepository", "PostStore", "apply_filters", "parse_post_id"]
