"""
Supabase client configuration.

Builds Supabase clients from the immutable application settings. A new
client is created for every call and scoped to that call's credential:
clients never persist or refresh sessions, so no auth state is shared
between requests.
"""

from typing import Optional

from supabase import Client, ClientOptions, create_client

from ..config import Settings
from ..logging_config import get_logger

logger = get_logger(__name__)


class SupabaseNotConfiguredError(RuntimeError):
    """Raised when a client is requested without URL or API key."""


class SupabaseClientFactory:
    """
    Creates Supabase clients for the data store and the identity provider.

    Holds nothing but a reference to the settings, so one instance is
    safe to share across concurrent requests.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

        if not settings.supabase_configured:
            logger.warning("Supabase credentials not fully configured")
            logger.debug(f"SUPABASE_URL: {'set' if settings.SUPABASE_URL else 'not set'}")
            logger.debug(
                f"SUPABASE_ANON_KEY: {'set' if settings.SUPABASE_ANON_KEY else 'not set'}"
            )

    @property
    def is_configured(self) -> bool:
        return self._settings.supabase_configured

    @property
    def has_service_role(self) -> bool:
        return bool(self._settings.SUPABASE_URL and self._settings.SUPABASE_SERVICE_ROLE_KEY)

    def _options(self) -> ClientOptions:
        return ClientOptions(persist_session=False, auto_refresh_token=False)

    def for_caller(self, credential: Optional[str] = None) -> Client:
        """
        Client for data and auth calls made with the project API key.

        Args:
            credential: Caller's bearer credential. When given, PostgREST
                requests carry it so row-level policies see the caller.

        Raises:
            SupabaseNotConfiguredError: If URL or API key is missing
        """
        if not self.is_configured:
            raise SupabaseNotConfiguredError(
                "Supabase not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY"
            )

        client = create_client(
            self._settings.SUPABASE_URL,
            self._settings.SUPABASE_ANON_KEY,
            options=self._options(),
        )
        if credential:
            client.postgrest.auth(credential)
        return client

    def for_admin(self) -> Client:
        """
        Client authenticated with the service-role key.

        Used only for the identity provider's admin user listing; data
        store calls never go through it.

        Raises:
            SupabaseNotConfiguredError: If the service-role key is missing
        """
        if not self.has_service_role:
            raise SupabaseNotConfiguredError(
                "Supabase admin access not configured. Set SUPABASE_SERVICE_ROLE_KEY"
            )

        return create_client(
            self._settings.SUPABASE_URL,
            self._settings.SUPABASE_SERVICE_ROLE_KEY,
            options=self._options(),
        )
