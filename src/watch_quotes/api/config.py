"""Configuration for the quote extraction HTTP service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    SERVICE_NAME: str = "watch-quote-extractor"

    # Largest decoded transcript accepted by POST /parse
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Logging
    LOG_JSON: bool = False

    # Phone prefix for local 8-digit numbers; None defers to the package config
    DEFAULT_COUNTRY_CODE: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
