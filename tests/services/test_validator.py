# tests/services/test_validator.py
"""Tests for payload validation."""

import pytest

from blog_api.errors import BadRequestError
from blog_api.schemas import PostCreate, PostUpdate
from blog_api.services.validator import SchemaValidator, Validator


def error_fields(exc: BadRequestError) -> set[str]:
    return {error["field"] for error in exc.errors}


class TestCreateValidation:
    """Tests for create payloads."""

    def test_valid_payload(self) -> None:
        """A complete payload validates into the model."""
        result = SchemaValidator(PostCreate).validate(
            {"title": "Hello", "body": "<p>hi</p>", "tags": ["a", "b"]},
        )
        assert result == PostCreate(title="Hello", body="<p>hi</p>", tags=["a", "b"])

    def test_empty_tags_allowed(self) -> None:
        """Tags may be an empty list."""
        result = SchemaValidator(PostCreate).validate({"title": "t", "body": "b", "tags": []})
        assert result.tags == []

    @pytest.mark.parametrize("missing", ["title", "body", "tags"])
    def test_missing_field_rejected(self, missing: str) -> None:
        """Every field is required."""
        payload = {"title": "t", "body": "b", "tags": []}
        del payload[missing]

        with pytest.raises(BadRequestError) as exc_info:
            SchemaValidator(PostCreate).validate(payload)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Validation failed"
        assert missing in error_fields(exc_info.value)

    def test_wrong_types_rejected(self) -> None:
        """Numbers are not coerced into strings."""
        with pytest.raises(BadRequestError) as exc_info:
            SchemaValidator(PostCreate).validate({"title": 1, "body": "b", "tags": [2]})

        assert error_fields(exc_info.value) == {"title", "tags.0"}

    def test_empty_title_rejected(self) -> None:
        """Empty strings are not valid titles."""
        with pytest.raises(BadRequestError):
            SchemaValidator(PostCreate).validate({"title": "", "body": "b", "tags": []})

    def test_unknown_field_rejected(self) -> None:
        """Fields outside the payload shape are rejected."""
        with pytest.raises(BadRequestError) as exc_info:
            SchemaValidator(PostCreate).validate(
                {"title": "t", "body": "b", "tags": [], "user": "someone"},
            )

        assert "user" in error_fields(exc_info.value)

    def test_non_object_rejected(self) -> None:
        """A JSON array is not a payload."""
        with pytest.raises(BadRequestError):
            SchemaValidator(PostCreate).validate(["title"])


class TestUpdateValidation:
    """Tests for partial update payloads."""

    def test_partial_payload(self) -> None:
        """Only supplied fields are marked as set."""
        result = SchemaValidator(PostUpdate).validate({"tags": ["x"]})
        assert result.model_dump(exclude_unset=True) == {"tags": ["x"]}

    def test_empty_payload(self) -> None:
        """An empty payload is valid and changes nothing."""
        result = SchemaValidator(PostUpdate).validate({})
        assert result.model_dump(exclude_unset=True) == {}

    def test_null_rejected(self) -> None:
        """Fields can be omitted but not nulled."""
        with pytest.raises(BadRequestError) as exc_info:
            SchemaValidator(PostUpdate).validate({"title": None})

        assert "title" in error_fields(exc_info.value)

    def test_type_mismatch_rejected(self) -> None:
        """Tags must be a list of strings."""
        with pytest.raises(BadRequestError):
            SchemaValidator(PostUpdate).validate({"tags": "x"})


def test_schema_validator_satisfies_protocol() -> None:
    """SchemaValidator can be plugged wherever a Validator is expected."""
    assert isinstance(SchemaValidator(PostCreate), Validator)
