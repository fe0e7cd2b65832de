"""
Configuration management for the quiz service.

Loads and validates environment variables for the application.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The instance is immutable: it is built once at startup and handed to
    every collaborator that needs it.
    """

    # Service Configuration
    APP_NAME: str = "Quiz Service"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8088

    # Supabase Configuration
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""

    # Optional local verification of bearer credentials (HS256 project secret)
    SUPABASE_JWT_SECRET: str = ""

    # CORS Configuration (comma-separated string)
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Frontend build served at "/" when the directory exists
    STATIC_DIR: str = "static"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    @property
    def supabase_configured(self) -> bool:
        """Check if the Supabase URL and API key are both present."""
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    def get_cors_origins(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
