"""Database models for the application."""

from blog_api.models.post import PostDB

__all__ = ["PostDB"]
