"""Infrastructure adapters for external services."""

from .supabase_client import SupabaseClientFactory, SupabaseNotConfiguredError

__all__ = ["SupabaseClientFactory", "SupabaseNotConfiguredError"]
