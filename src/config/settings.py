"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Upstream credential (GEMINI_API_KEY), held server-side only
    gemini_api_key: SecretStr | None = None

    # Upstream configuration
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    default_model: str = "gemini-2.5-flash-image-preview"  # Used when request omits model
    request_timeout_seconds: float = 120.0  # Image generation is slow

    # Browser origins allowed to call the proxy (empty disables CORS)
    cors_origins: list[str] = []

    @property
    def api_key_configured(self) -> bool:
        """True when a non-empty upstream credential is present."""
        return bool(self.gemini_api_key and self.gemini_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
