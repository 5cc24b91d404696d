"""
Configuration Utility - Environment Variables Management

Centralized configuration loading from .env files using pydantic-settings.
The command line arguments stay the only required inputs; these settings tune
the ambient behavior of a backup run and their defaults match a plain run.

Usage:
    from utils.config import settings

    api_base = settings.APIGEE_API_BASE
    page_size = settings.DEVELOPERS_PAGE_SIZE
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Apigee Management API
    APIGEE_API_BASE: str = Field(default="https://apigee.googleapis.com/v1")
    APIGEE_SCOPES: list[str] = Field(
        default=["https://www.googleapis.com/auth/cloud-platform"]
    )
    API_TIMEOUT: float | None = Field(default=None)
    DEVELOPERS_PAGE_SIZE: int = Field(default=1000, ge=1)

    # Backup output
    BACKUP_DIR_MODE: int = Field(default=0o755)

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")

    # Application Metadata
    APP_NAME: str = Field(default="apigee-app-backup")
    APP_VERSION: str = Field(default="0.1.0")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Singleton Settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
