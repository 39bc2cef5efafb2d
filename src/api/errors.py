"""Mapping from domain errors to HTTP responses."""

import logging

from fastapi import HTTPException, status

from domain.model.errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    InternalError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Pick the HTTP status for a domain error.

    InternalError and unknown DomainError subclasses become a 500 with a
    generic detail so store internals never leak to clients.
    """
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
            return HTTPException(status_code=status_code, detail=str(error), headers=headers)

    if not isinstance(error, InternalError):
        logger.error("Unmapped domain error", extra={"errorType": type(error).__name__})
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
