"""
Shared dependencies for the application.

Provides the service container built at startup and the FastAPI dependency
functions used across routers to reach it and to resolve the caller.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header

from .config import Settings
from .core.security import (extract_user_id_from_token, strip_bearer_prefix,
                            verify_token_signature)
from .domain.exceptions import DomainException, ErrorCode
from .infrastructure.supabase_client import SupabaseClientFactory
from .repositories import (SupabaseAnswerRepository, SupabaseChoiceRepository,
                           SupabaseGenreRepository, SupabaseQuestionRepository,
                           SupabaseUserRepository)
from .services import (AnswerService, AuthService, ChoiceService, GenreService,
                       QuestionService)


@dataclass(frozen=True)
class ServiceContainer:
    """The application services, wired once per process."""

    genres: GenreService
    questions: QuestionService
    choices: ChoiceService
    answers: AnswerService
    auth: AuthService
    # Bearer credentials are signature-checked when set
    jwt_secret: str = ""


@dataclass(frozen=True)
class Caller:
    """The authenticated caller of a request."""

    user_id: str
    token: str


def build_container(settings: Settings) -> ServiceContainer:
    """Wire the Supabase-backed repositories into the services."""
    clients = SupabaseClientFactory(settings)
    return ServiceContainer(
        genres=GenreService(SupabaseGenreRepository(clients)),
        questions=QuestionService(SupabaseQuestionRepository(clients)),
        choices=ChoiceService(SupabaseChoiceRepository(clients)),
        answers=AnswerService(SupabaseAnswerRepository(clients)),
        auth=AuthService(SupabaseUserRepository(clients)),
        jwt_secret=settings.SUPABASE_JWT_SECRET,
    )


# Global container instance (set by main app)
_container: Optional[ServiceContainer] = None


def set_container(container: Optional[ServiceContainer]) -> None:
    """
    Set the global service container.

    Called by main app during startup, and with None on shutdown.
    """
    global _container
    _container = container


def init_container(settings: Settings) -> ServiceContainer:
    container = build_container(settings)
    set_container(container)
    return container


def get_container() -> ServiceContainer:
    """
    Get the service container for dependency injection.

    Used by all routers that need a service.
    """
    if _container is None:
        raise RuntimeError("Service container not initialized")
    return _container


def get_optional_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """Bare credential from the Authorization header, or an empty string."""
    return strip_bearer_prefix(authorization)


def get_bearer_token(token: str = Depends(get_optional_bearer_token)) -> str:
    """
    Bare credential from the Authorization header.

    Raises:
        DomainException: UNAUTHORIZED if no credential was sent
    """
    if not token:
        raise DomainException(ErrorCode.UNAUTHORIZED, "authorization required")
    return token


def get_current_caller(
    token: str = Depends(get_bearer_token),
    container: ServiceContainer = Depends(get_container),
) -> Caller:
    """
    Resolve the caller from the bearer credential.

    Raises:
        DomainException: UNAUTHORIZED if no credential was sent,
            INVALID_TOKEN if it is malformed or fails verification
    """
    if container.jwt_secret:
        verify_token_signature(token, container.jwt_secret)
    return Caller(user_id=extract_user_id_from_token(token), token=token)
