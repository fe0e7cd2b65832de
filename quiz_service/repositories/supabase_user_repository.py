"""
Supabase Auth implementation of the user repository.

Account creation, password sign-in and sign-out go through the identity
provider's public API with the project API key. The existing-account
lookup needs the admin API and is only available when a service-role key
is configured.
"""

import time
from typing import Any, Dict, Optional

from supabase import AuthApiError

from ..domain.entities import AuthResult, User
from ..domain.exceptions import DomainException, ErrorCode
from ..infrastructure.supabase_client import SupabaseClientFactory
from ..logging_config import get_logger

logger = get_logger(__name__)

# Fallback lifetime when the provider's session carries no expiry
DEFAULT_SESSION_TTL_SECONDS = 24 * 60 * 60

ADMIN_PAGE_SIZE = 1000


def _username_from_metadata(metadata: Optional[Dict[str, Any]]) -> str:
    if not metadata:
        return ""
    username = metadata.get("username")
    return username if isinstance(username, str) else ""


class SupabaseUserRepository:
    """UserRepository backed by Supabase Auth (GoTrue)."""

    def __init__(self, clients: SupabaseClientFactory) -> None:
        self._clients = clients

    def create(self, email: str, password: str, username: str) -> User:
        """
        Register a new account.

        Raises:
            DomainException: USER_EXISTS if the provider reports the email
                as already registered
            AuthApiError: Any other rejection by the provider
        """
        try:
            response = self._clients.for_caller().auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"username": username}},
                }
            )
        except AuthApiError as e:
            message = (e.message or "").lower()
            if "already registered" in message or "already exists" in message:
                raise DomainException(ErrorCode.USER_EXISTS, "user with this email already exists")
            raise

        if not response.user:
            raise RuntimeError("identity provider returned no user for sign up")

        user = response.user
        logger.info(f"User registered: {user.id}")
        return User(id=user.id, email=user.email or email, username=username)

    def authenticate(self, email: str, password: str) -> AuthResult:
        """
        Exchange email and password for session credentials.

        Raises:
            AuthApiError: If the provider rejects the credentials (wrong
                password, unconfirmed email, unknown account)
        """
        response = self._clients.for_caller().auth.sign_in_with_password(
            {"email": email, "password": password}
        )

        if not response.user or not response.session:
            raise RuntimeError("identity provider returned no session for sign in")

        user = response.user
        session = response.session
        expires_at = session.expires_at or int(time.time()) + DEFAULT_SESSION_TTL_SECONDS

        return AuthResult(
            user=User(
                id=user.id,
                email=user.email or email,
                username=_username_from_metadata(user.user_metadata),
            ),
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_at=int(expires_at),
        )

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Look an account up by email through the admin API.

        Returns None when no account matches, or when no service-role key
        is configured.

        The admin listing (``list_users(page, per_page)``) has no email
        filter, so a miss costs one admin call per ``ADMIN_PAGE_SIZE``
        accounts. Sign-up does not depend on it: the provider also rejects
        duplicate emails at creation.
        """
        if not self._clients.has_service_role:
            logger.debug("Service-role key not configured, skipping account lookup")
            return None

        wanted = email.lower()
        admin = self._clients.for_admin().auth.admin
        page = 1
        while True:
            users = admin.list_users(page=page, per_page=ADMIN_PAGE_SIZE)
            for user in users:
                if (user.email or "").lower() == wanted:
                    return User(
                        id=user.id,
                        email=user.email,
                        username=_username_from_metadata(user.user_metadata),
                    )
            if len(users) < ADMIN_PAGE_SIZE:
                return None
            page += 1

    def logout(self, credential: str) -> None:
        """Revoke the session behind an access token."""
        self._clients.for_caller().auth.admin.sign_out(credential)
