"""Unit tests for error to HTTP status translation."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from worldnews.adapter.error import StorageError
from worldnews.domain.error import (
    AccountDeactivatedError,
    BusinessRuleViolationError,
    ImageTooLargeError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from worldnews.interface.error import to_http_exception
from worldnews.util.jwt import JWTError
from tests.conftest import make_post


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidCredentialsError(), 401),
        (AccountDeactivatedError("u1"), 403),
        (NotAuthorizedError("post", "p1", "u1"), 403),
        (NotFoundError("Post", "p1"), 404),
        (BusinessRuleViolationError("taken"), 409),
        (ValidationError("bad"), 400),
        (ImageTooLargeError(10, 5), 400),
        (JWTError("Invalid token"), 401),
    ],
)
def test_known_errors_keep_their_message(error, status_code):
    exc = to_http_exception(error, "do things")

    assert exc.status_code == status_code
    assert exc.detail == str(error)


def test_model_validation_error_is_bad_request():
    with pytest.raises(PydanticValidationError) as exc_info:
        make_post(uuid4(), title="")

    exc = to_http_exception(exc_info.value, "update post")

    assert exc.status_code == 400
    assert "at least 1 character" in exc.detail


def test_storage_failure_hides_details():
    exc = to_http_exception(StorageError("disk full at /var/media"), "create post")

    assert exc.status_code == 502
    assert exc.detail == "Failed to create post"


def test_unknown_error_is_internal():
    exc = to_http_exception(RuntimeError("boom"), "load feed")

    assert exc.status_code == 500
    assert exc.detail == "Failed to load feed"
