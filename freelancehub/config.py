"""
Configuration management using Pydantic Settings.
Challenge: One place for storage backend, keys and logging options.
Design: Single source of truth for all environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "FreelanceHub"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Storage: "redis" persists across restarts, "memory" lives as long as the process
    storage_backend: Literal["memory", "redis"] = "redis"
    redis_url: str = "redis://localhost:6379/0"
    # Keys are <prefix>users, <prefix>services, <prefix>bookings, <prefix>current_user
    storage_key_prefix: str = "freelance_"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
