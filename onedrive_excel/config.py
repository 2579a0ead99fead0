"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Microsoft Graph
    graph_access_token: str
    graph_base_url: str = "https://graph.microsoft.com/v1.0"
    request_timeout: float = 30.0  # seconds

    # Workbook used by the command-line entry point
    workbook_uri: str = ""

    # Application
    log_level: str = "INFO"

    @field_validator("graph_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so relative URIs join cleanly."""
        return v.strip().rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
