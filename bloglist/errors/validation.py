"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.configs.settings import (
    CONTENT_MISSING_ERROR,
    DUPLICATE_USERNAME_ERROR,
    MALFORMED_USER_ERROR,
    UNKNOWN_USER_ERROR,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.utils.helpers import file_logger, host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Custom validation error class."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


class ContentMissingError(ValidationError):
    """A blog payload lacks a title or an author."""

    def __init__(self, detail: str = CONTENT_MISSING_ERROR) -> None:
        super().__init__(detail)


class UnknownUserError(ValidationError):
    """A blog payload references a user that does not exist."""

    def __init__(self, detail: str = UNKNOWN_USER_ERROR) -> None:
        super().__init__(detail)


class MalformedUserError(ValidationError):
    """A user payload violates the username or password length policy."""

    def __init__(self, detail: str = MALFORMED_USER_ERROR) -> None:
        super().__init__(detail)


class DuplicateUsernameError(ValidationError):
    """A user payload reuses an existing username."""

    def __init__(self, detail: str = DUPLICATE_USERNAME_ERROR) -> None:
        super().__init__(detail)


app_validation_exception_handler = create_exception_handler(logger)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with cleaner response format.

    Request bodies that do not fit their schema are client errors like any
    other validation failure, so they are answered with 400.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    # Format errors for cleaner response
    formatted_errors = []
    for error in exec_error.errors():
        formatted_error = {
            "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in error:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in error["ctx"].items()
            }
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "errors": formatted_errors,
        },
    )
