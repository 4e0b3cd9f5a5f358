"""Interface layer errors.

Domain and adapter errors are translated into HTTP errors here so routes
only list the cases they expect.
"""

import logging

import pydantic
from fastapi import HTTPException, status

from worldnews.adapter.error import StorageError
from worldnews.domain.error import (
    AccountDeactivatedError,
    BusinessRuleViolationError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from worldnews.util.jwt import JWTError

logger = logging.getLogger(__name__)

# Most specific first: subclasses must precede their bases
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AccountDeactivatedError, status.HTTP_403_FORBIDDEN),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DomainError, status.HTTP_400_BAD_REQUEST),
    (pydantic.ValidationError, status.HTTP_400_BAD_REQUEST),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (StorageError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(error: Exception) -> int | None:
    """HTTP status for a known error, or None."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return None


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised while performing ``action``.

    Unknown errors become a 500 with a generic message.
    """
    code = status_for(error)
    if code is None:
        logger.exception(f"Unexpected error while trying to {action}")
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        )

    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Upstream failure while trying to {action}: {error}")
        return HTTPException(status_code=code, detail=f"Failed to {action}")

    logger.info(f"Rejected request to {action}: {error}")
    if isinstance(error, pydantic.ValidationError):
        detail = "; ".join(err["msg"] for err in error.errors())
    else:
        detail = str(error)
    return HTTPException(status_code=code, detail=detail)
