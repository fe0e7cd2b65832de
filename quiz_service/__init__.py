"""Quiz Service: quiz content and accounts API backed by Supabase."""

__version__ = "1.0.0"
