"""
Custom exceptions for the quiz service domain.

Two kinds of failure are distinguished: validation failures on
caller-supplied input, and business-rule failures identified by a fixed
set of error codes. Everything else is an internal error.

These exceptions are independent of infrastructure concerns (HTTP,
database, etc.). Translation to transport status codes happens once, in
``quiz_service.error_handlers``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Variants of the error taxonomy."""

    VALIDATION = "validation"
    DOMAIN = "domain"


class ErrorCode(str, Enum):
    """Business-rule failure codes carried by DomainException."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHORIZED = "UNAUTHORIZED"
    GENRE_EXISTS = "GENRE_EXISTS"
    USER_EXISTS = "USER_EXISTS"
    INVALID_TOKEN = "INVALID_TOKEN"
    AUTH_FAILED = "AUTH_FAILED"

    @property
    def is_conflict(self) -> bool:
        """True for the ``<RESOURCE>_EXISTS`` codes."""
        return self.value.endswith("_EXISTS")


class QuizServiceException(Exception):
    """Base exception for all quiz service errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(QuizServiceException):
    """Raised when caller-supplied input fails a precondition."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        return f"validation error on field '{self.field}': {self.message}"


class DomainException(QuizServiceException):
    """Raised when a business rule is violated."""

    kind = ErrorKind.DOMAIN

    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        return f"domain error [{self.code.value}]: {self.message}"


def is_not_found(exc: BaseException) -> bool:
    """Check whether an exception is a NOT_FOUND domain error."""
    return isinstance(exc, DomainException) and exc.code is ErrorCode.NOT_FOUND
