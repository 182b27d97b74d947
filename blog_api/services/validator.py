"""Payload validation backed by pydantic models."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from blog_api.errors.posts import BadRequestError
from blog_api.errors.validation import format_errors


@runtime_checkable
class Validator[ModelT: BaseModel](Protocol):
    """Protocol for request payload validators."""

    def validate(self, payload: object) -> ModelT:
        """Return the validated payload or raise ``BadRequestError``."""
        ...


class SchemaValidator[ModelT: BaseModel]:
    """
    Validate payloads against a pydantic model.

    Examples
    --------
    >>> SchemaValidator(PostCreate).validate({"title": "t", "body": "b", "tags": []})
    PostCreate(title='t', body='b', tags=[])
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def validate(self, payload: object) -> ModelT:
        try:
            return self.model.model_validate(payload)
        except ValidationError as e:
            raise BadRequestError(
                detail="Validation failed",
                errors=format_errors(list(e.errors(include_url=False)), skip_location=False),
            ) from e
