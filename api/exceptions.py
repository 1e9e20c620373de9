"""Exception handlers for the file manager FastAPI application.

This module converts the domain faults from models/errors.py, and any
unexpected error, into JSON responses of the form
{"error": <message>, "type": <fault kind>}.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from models.errors import (
    EntryAlreadyExistsError,
    EntryNotFoundError,
    InvalidArgumentError,
    PayloadTooLargeError,
)

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    error_type: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build the JSON body shared by every fault response."""
    content: dict[str, Any] = {"error": message, "type": error_type}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def entry_not_found_handler(request: Request, exc: EntryNotFoundError):
    """Handle EntryNotFoundError with a 404."""
    return error_response(status.HTTP_404_NOT_FOUND, exc.message, "not_found")


async def entry_already_exists_handler(request: Request, exc: EntryAlreadyExistsError):
    """Handle EntryAlreadyExistsError.

    A rename collision is reported as a 400, like a missing parameter.
    """
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message, "already_exists")


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Handle InvalidArgumentError with a 400."""
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message, "invalid_argument")


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Handle query parameters or bodies that fail validation.

    These are reported as a 400 like any other bad argument. The first
    failed check becomes the message and all of them are listed under
    details.
    """
    errors = jsonable_encoder(exc.errors())
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        message,
        "invalid_argument",
        details={"validation_errors": errors},
    )


async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    """Handle PayloadTooLargeError with a 413."""
    return error_response(
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, exc.message, "payload_too_large"
    )


async def os_error_handler(request: Request, exc: OSError):
    """Handle filesystem failures not covered by a specific fault.

    Permission problems, entries in use, directories passed where files
    were expected and similar all end up here as a 500 that surfaces the
    operating system's message.
    """
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
        "internal",
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions.

    This is a catch-all handler for unexpected errors. It logs the full
    traceback and returns the exception message.
    """
    logger.exception("Unhandled exception in %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), "internal")
