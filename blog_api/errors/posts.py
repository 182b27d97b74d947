"""Errors raised by the post handlers and their authorization checks."""

from logging import getLogger
from typing import Any

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_api.configs import file_logger
from blog_api.configs.settings import DEFAULT_ERROR_MESSAGE
from blog_api.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class PostError(BaseAppError):
    """Base exception for post operations."""


class BadRequestError(PostError):
    """Malformed id, failed payload validation or invalid page."""

    def __init__(
        self,
        detail: str = "Bad Request",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)
        if errors is not None:
            self.errors = errors


class NotFoundError(PostError):
    """No post matches the requested id."""

    def __init__(self, detail: str = "Post not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ForbiddenError(PostError):
    """The caller does not own the post."""

    def __init__(self, detail: str = "You can only modify your own posts") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


class InternalError(PostError):
    """
    Unexpected store failure.

    The original exception is chained as ``__cause__`` for diagnostics and is
    never rendered into the response body.
    """

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


posts_exception_handler = create_exception_handler(logger)
