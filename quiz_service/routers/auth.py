"""
Authentication endpoints.

Sign-up, sign-in and sign-out against the identity provider, plus a
connection check reporting whether the provider is configured.
"""

import time

from fastapi import APIRouter, Depends, status

from ..config import Settings, get_settings
from ..dependencies import (ServiceContainer, get_container,
                            get_optional_bearer_token)
from ..models import (AuthResponse, ConnectionTestResponse, MessageResponse,
                      SignInRequest, SignUpRequest)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
def sign_up(body: SignUpRequest, container: ServiceContainer = Depends(get_container)):
    """
    Register a new user with email, password and username.

    Creates the account and returns session tokens for immediate use.
    """
    result = container.auth.sign_up(body.email, body.password, body.username)
    return AuthResponse.from_result(result)


@router.post("/login", response_model=AuthResponse, summary="Sign in")
def sign_in(body: SignInRequest, container: ServiceContainer = Depends(get_container)):
    result = container.auth.sign_in(body.email, body.password)
    return AuthResponse.from_result(result)


@router.post("/logout", response_model=MessageResponse, summary="Sign out")
def sign_out(
    token: str = Depends(get_optional_bearer_token),
    container: ServiceContainer = Depends(get_container),
):
    """Invalidate the session of the bearer credential."""
    container.auth.sign_out(token)
    return MessageResponse(message="Logged out successfully")


@router.get("/test", response_model=ConnectionTestResponse, summary="Connection check")
def test_connection(settings: Settings = Depends(get_settings)):
    if settings.supabase_configured:
        return ConnectionTestResponse(
            status="connected",
            message="Supabase connection is configured",
            timestamp=int(time.time()),
        )
    return ConnectionTestResponse(
        status="not_configured",
        message="Supabase URL or API key is missing",
        timestamp=int(time.time()),
    )
