"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from socialpass.constants import GITHUB_API_BASE_URL, GITHUB_OAUTH_BASE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_env: Literal["development", "production", "test"] = "development"
    app_name: str = "Socialpass"
    app_version: str = "0.1.0"
    app_url: str = "http://localhost:8080"

    # GitHub OAuth
    github_client_id: str = ""
    github_client_secret: str = ""
    github_oauth_url: str = GITHUB_OAUTH_BASE_URL
    github_api_url: str = GITHUB_API_BASE_URL

    @field_validator("app_url", "github_oauth_url", "github_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended directly."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def github_configured(self) -> bool:
        """Check if GitHub OAuth credentials are present."""
        return bool(self.github_client_id and self.github_client_secret)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
