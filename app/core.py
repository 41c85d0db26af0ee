"""Application configuration and settings management.

This module defines the application settings loaded from environment
variables and provides a helper for accessing cached settings.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Attributes:
        DATABASE_URL: Database connection string.
        OWNER_STATES: State codes accepted for an owner's address.
        OWNER_EMAIL_TLDS: Top-level domains accepted in owner emails.
        LOG_LEVEL: Level for the ``app`` logger namespace.
    """

    DATABASE_URL: str = "sqlite:///./owners.db"
    OWNER_STATES: List[str] = ["PA", "OH", "WV"]
    OWNER_EMAIL_TLDS: List[str] = [
        "com",
        "edu",
        "org",
        "net",
        "gov",
        "mil",
        "biz",
        "info",
    ]
    LOG_LEVEL: str = "INFO"

    class Config:
        """Pydantic configuration for loading environment variables."""

        env_file = ".env"
        extra = "allow"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The settings object is cached to prevent reloading environment
    variables multiple times during application lifetime.
    """

    return Settings()
