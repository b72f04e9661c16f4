"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "journal_db"
    mongo_timeout_ms: int = 5000

    # Redis (sessions and rate limiting)
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_db: int = 0

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24

    # Rate Limiting
    login_rate_limit_attempts: int = 5
    login_rate_limit_window_seconds: int = 60
    register_rate_limit_attempts: int = 10

    # Stripe (billing endpoints are disabled when unset)
    stripe_secret_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
