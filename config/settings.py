from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote collection service
    items_api_url: str = "http://localhost:4000"
    items_api_timeout: Optional[float] = None  # Seconds; None waits forever

    # UI
    app_title: str = "Shopster"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
