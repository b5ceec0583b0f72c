"""Configuration management for Citework."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Crossref polite pool email (required by the Crossref client)
    # Crossref routes identified requests to the polite pool with better rate limits
    crossref_email: str = ""

    # Google Books (optional - works without a key at lower quotas)
    google_books_api_key: str = ""

    # Endpoints
    crossref_url: str = "https://api.crossref.org/works"
    google_books_url: str = "https://www.googleapis.com/books/v1/volumes"
    open_library_search_url: str = "https://openlibrary.org/search.json"

    # HTTP
    request_timeout: float = 30.0  # Seconds per request

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
