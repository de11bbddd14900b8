"""
Configuration management for the auth service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Auth service configuration loaded from environment variables"""

    # Durable storage. Leave unset to run on the in-memory directory.
    DATABASE_URL: Optional[str] = None
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def durable_storage_url(self) -> Optional[str]:
        """The configured database URL, or None when missing or blank."""
        if self.DATABASE_URL is None or not self.DATABASE_URL.strip():
            return None
        return self.DATABASE_URL.strip()


def get_settings() -> Settings:
    return Settings()
