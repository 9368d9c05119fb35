# =============================================================================
# app/exceptions.py - Custom Exceptions & Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every failure the API reports belongs to one ErrorKind, and each kind maps
# to exactly one HTTP status code. Handlers in app/main.py translate
# exceptions to JSON bodies of the form {"error": ..., "code": ...}.
# =============================================================================

import logging
from enum import Enum
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


class ErrorKind(str, Enum):
    """Closed set of client-visible error kinds."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL_ERROR: 500,
}


class AgeCalculatorException(Exception):
    """
    Base exception for the Age Calculator API.

    All custom exceptions inherit from this class. `details` is logged but
    never sent to the client.
    """

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {
            "error": self.message,
            "code": self.kind.value,
        }


class ValidationError(AgeCalculatorException):
    """A required field is missing, empty or malformed."""
    kind = ErrorKind.VALIDATION_ERROR


class NotFoundError(AgeCalculatorException):
    """The requested resource does not exist."""
    kind = ErrorKind.NOT_FOUND


class InternalError(AgeCalculatorException):
    """An unexpected fault. The message sent to the client is always generic."""
    kind = ErrorKind.INTERNAL_ERROR

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__(INTERNAL_ERROR_MESSAGE, details=details)


# =============================================================================
# Person Exceptions
# =============================================================================

class PersonNotFoundError(NotFoundError):
    """Raised when a person ID doesn't exist."""

    def __init__(self, person_id: str):
        super().__init__(
            message="Person not found",
            details={"person_id": person_id},
        )
        self.person_id = person_id


# =============================================================================
# Exception Handlers
# =============================================================================

def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    """Build the JSON error body for an error kind."""
    return JSONResponse(
        status_code=kind.status_code,
        content={"error": message, "code": kind.value},
    )


async def age_calculator_exception_handler(
    request: Request,
    exc: AgeCalculatorException
) -> JSONResponse:
    """Convert AgeCalculatorException to JSON response."""
    if exc.kind is ErrorKind.INTERNAL_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.details}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code}: "
            f"{exc.message} {exc.details}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Malformed JSON or an unparseable birthDate is a client error (400), like
    a missing field.
    """
    fields = [
        ".".join(
            part for part in error.get("loc", ())
            if isinstance(part, str) and part != "body"
        )
        for error in exc.errors()
    ]
    fields = [field for field in fields if field]
    message = "Invalid request body"
    if fields:
        message = f"Invalid value for: {', '.join(sorted(set(fields)))}"

    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return error_response(ErrorKind.VALIDATION_ERROR, message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle routing errors raised by Starlette.

    Unknown paths and unsupported methods on known paths are both reported
    as a missing route.
    """
    if exc.status_code in (404, 405):
        logger.warning(f"404 Not Found: {request.method} {request.url.path}")
        return error_response(ErrorKind.NOT_FOUND, ROUTE_NOT_FOUND_MESSAGE)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions. Details are logged, never returned."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(ErrorKind.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)
