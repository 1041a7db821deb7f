"""Mapping of errors to HTTP responses."""

import sys

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from persona.domain.error import (
    DomainError,
    DuplicateProfileError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)


def domain_error_response(error: DomainError) -> JSONResponse:
    """Build the response for a domain error."""
    match error:
        case ValidationError(message=message, details=details):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "success": False,
                    "error": "Validation Error",
                    "message": message,
                    "details": details,
                },
            )
        case NotFoundError(resource=resource):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "success": False,
                    "error": f"{resource} not found",
                    "message": str(error),
                },
            )
        case DuplicateVoteError() | DuplicateProfileError():
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"success": False, "error": "Conflict", "message": str(error)},
            )
        case _:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"success": False, "error": "Bad Request", "message": str(error)},
            )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    return domain_error_response(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema violations in the same shape as domain validation errors."""
    details: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details[".".join(loc) or "body"] = error.get("msg", "Invalid value")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "Validation Error",
            "message": "; ".join(f"{k}: {v}" for k, v in details.items()),
            "details": details,
        },
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail, "message": exc.detail},
        headers=exc.headers,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        _exc_info=sys.exc_info(),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "Internal Server Error",
            "message": "Something went wrong",
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach error handlers to the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
