"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blog_api.configs import file_logger
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


def format_errors(errors: list[Any], *, skip_location: bool = True) -> list[dict[str, Any]]:
    """
    Flatten pydantic error dicts into a JSON-friendly list.

    Args:
        errors: Raw error dicts from pydantic or FastAPI.
        skip_location: Drop the leading location segment ('body', 'query', ...).

    Returns:
        list[dict[str, Any]]: One entry per error with field, message and type.
    """
    formatted_errors = []
    for error in errors:
        loc = error.get("loc", [])
        if skip_location:
            loc = loc[1:]
        formatted_error: dict[str, Any] = {
            "field": ".".join(str(part) for part in loc),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "input" in error:
            formatted_error["input"] = error["input"]
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render request validation errors as 400 responses.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)
    formatted_errors = format_errors(list(exec_error.errors()))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
