"""
Global exception handlers for the quiz API.

Every failure leaving a route is translated here, and only here, into a
``{"error": <status phrase>, "message": ...}`` body:

    - ValidationException → 400
    - DomainException → status by error code
    - RequestValidationError (undecodable body) → 400
    - Starlette HTTPException (unknown route, wrong method) → its own status
    - Exception (catch-all) → 500, never leaks internal details
"""

from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .domain.exceptions import (DomainException, ErrorCode,
                                QuizServiceException, ValidationException)
from .logging_config import get_logger
from .metrics import track_error
from .models import ErrorResponse

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "an unexpected error occurred"

_STATUS_BY_CODE = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTH_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.GENRE_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.USER_EXISTS: status.HTTP_409_CONFLICT,
}


def status_for_code(code: ErrorCode) -> int:
    """HTTP status for a domain error code."""
    return _STATUS_BY_CODE[code]


def status_for_exception(exc: QuizServiceException) -> int:
    if isinstance(exc, ValidationException):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, DomainException):
        return status_for_code(exc.code)
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(status_code: int, message: str) -> dict:
    """Build the error response body for a status code."""
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    return ErrorResponse(error=phrase, message=message).model_dump()


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_quiz_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_quiz_error_handler(app: FastAPI) -> None:
    @app.exception_handler(QuizServiceException)
    async def quiz_error_handler(request: Request, exc: QuizServiceException):
        """Handle validation and domain errors raised by services."""
        status_code = status_for_exception(exc)
        code = exc.code.value if isinstance(exc, DomainException) else exc.field
        logger.warning(f"{exc} on {request.method} {request.url.path}")
        track_error(kind=exc.kind.value, code=code)
        return JSONResponse(status_code=status_code, content=error_body(status_code, exc.message))


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request bodies that cannot be decoded into the expected shape."""
        logger.warning(f"Invalid request on {request.url.path}: {exc.errors()}")
        track_error(kind="validation", code="request")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, "invalid request body"),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        track_error(kind="internal", code=type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE),
        )
