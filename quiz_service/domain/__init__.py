"""
Domain layer for the quiz service.

Entities, the error taxonomy and access policies. No framework or storage
dependencies.
"""

from .entities import Answer, AuthResult, Choice, Genre, Question, User
from .exceptions import (DomainException, ErrorCode, ErrorKind,
                         QuizServiceException, ValidationException)
from .policies import AccessDecision, authorize, ensure_owner

__all__ = [
    "AccessDecision",
    "Answer",
    "AuthResult",
    "Choice",
    "DomainException",
    "ErrorCode",
    "ErrorKind",
    "Genre",
    "Question",
    "QuizServiceException",
    "User",
    "ValidationException",
    "authorize",
    "ensure_owner",
]
