"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = "development"
    database_url: str = "sqlite:///./catalog.db"
    log_level: str = "INFO"

    # Signed cookie sessions
    secret_key: str = "change-me-in-production"
    session_cookie: str = "catalog_session"
    session_max_age: int = 60 * 60 * 2

    # Asset version advertised to the Inertia client
    inertia_version: str = "1"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
