from blog_api.errors.base import BaseAppError, create_exception_handler
from blog_api.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    database_exception_handler,
)
from blog_api.errors.posts import (
    BadRequestError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    PostError,
    posts_exception_handler,
)
from blog_api.errors.validation import format_errors, validation_exception_handler

__all__ = [
    "BadRequestError",
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "ForbiddenError",
    "InternalError",
    "NotFoundError",
    "PostError",
    "create_exception_handler",
    "database_exception_handler",
    "format_errors",
    "posts_exception_handler",
    "validation_exception_handler",
]
