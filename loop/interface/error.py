"""Mapping of errors to HTTP responses.

Every error body has the shape `{"error": <message>}`.
"""

import logfire
import pydantic
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from loop.adapter.error import MediaUploadError
from loop.domain.error import (
    AuthenticationError,
    ConflictError,
    DepthLimitExceededError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from loop.domain.repository import TransactionManager

# First match wins
DOMAIN_STATUS: list[tuple[type[DomainError], int]] = [
    (DepthLimitExceededError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def discard_request_writes(request: Request) -> None:
    """Roll back the request's unit of work instead of committing it.

    No-op outside a dishka request scope.
    """
    container = getattr(request.state, "dishka_container", None)
    if container is None:
        return
    transaction_manager = await container.get(TransactionManager)
    transaction_manager.mark_rollback_only()


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (500 for unknown subclasses)."""
    for error_type, status_code in DOMAIN_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    await discard_request_writes(request)
    status_code = status_for(exc)
    if status_code >= 500:
        logfire.error(
            "Unmapped domain error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(status_code, "Internal server error")

    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=status_code,
        error_type=type(exc).__name__,
    )
    return error_response(status_code, str(exc))


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_model_validation(
    request: Request, exc: pydantic.ValidationError
) -> JSONResponse:
    await discard_request_writes(request)
    errors = exc.errors()
    message = errors[0].get("msg") if errors else "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def handle_media_upload_error(
    request: Request, exc: MediaUploadError
) -> JSONResponse:
    await discard_request_writes(request)
    logfire.error("Media upload failed", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_502_BAD_GATEWAY, "Failed to upload file")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(pydantic.ValidationError, handle_model_validation)
    app.add_exception_handler(MediaUploadError, handle_media_upload_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
