"""Application configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Unrelated keys in a project's .env must not break the tool
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys
    figma_personal_access_token: str = ""

    # Figma API
    figma_api_base_url: str = "https://api.figma.com/v1"
    request_timeout: float = 30.0

    # Output directories
    copy_dir_prefix: str = "figma-cli-"
    export_dir_prefix: str = "figma-export-"

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
