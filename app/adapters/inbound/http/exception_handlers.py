"""Application-wide exception handlers rendering the {"error": message} body."""

from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.adapters.inbound.http.schemas import error_response
from app.application.errors import MarketplaceError
from app.application.use_cases.user_messages_id import UserMessagesID
from app.infrastructure.logging.logger import log_request

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def invalid_request_message(exc: RequestValidationError) -> str:
    """
    Describe the first offending field of a request that failed type validation.

    Args:
        exc: Validation error raised by FastAPI

    Returns:
        Field-specific message, or a generic one for malformed JSON
    """
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            break
        names = [
            part
            for part in error.get("loc", ())
            if isinstance(part, str) and part not in _LOCATION_PREFIXES
        ]
        if names:
            return UserMessagesID.invalid_field_format(".".join(names))
    return UserMessagesID.INVALID_REQUEST


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render body and query typing errors as 400 instead of FastAPI's 422."""
    message = invalid_request_message(exc)
    log_request(
        str(uuid4()),
        "validation",
        outcome="rejected",
        path=request.url.path,
        reason=message,
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    """Render application errors raised outside a route's own try block (e.g. dependencies)."""
    return error_response(exc.status_code, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the error handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
