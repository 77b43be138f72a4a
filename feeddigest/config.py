"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Feed sources: FEED_LINKS (JSON list) overrides the feeds file when non-empty
    feeds_file: str = "feeds.txt"
    feed_links: list[str] = []

    # Only posts published within this many days make it into the digest
    days: int = 7

    # Fetching
    request_timeout: float = 30.0
    user_agent: str = "FeedDigest/1.0 (RSS Aggregator)"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
