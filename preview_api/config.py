from functools import lru_cache
from typing import cast

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Link Preview API",
        description="Application name",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the service",
    )

    # Page fetching
    fetch_timeout: float = Field(
        default=5.0,
        gt=0,
        description="Total seconds allowed for fetching a page, body included",
    )
    max_redirects: int = Field(
        default=5,
        ge=0,
        description="Maximum number of redirects followed per fetch",
    )
    max_body_chars: int = Field(
        default=20_000,
        gt=0,
        description="Only this many leading characters of a page are scanned",
    )
    user_agent: str = Field(
        default=BROWSER_USER_AGENT,
        description="User-Agent header sent when fetching pages",
    )
    accept: str = Field(
        default="text/html",
        description="Accept header sent when fetching pages",
    )
    favicon_rels: list[str] = Field(
        default=["icon", "shortcut icon", "apple-touch-icon"],
        description="rel values tried, in priority order, when looking for a favicon",
    )

    # Feedback submission
    feedback_api_url: AnyHttpUrl = Field(
        default=cast(AnyHttpUrl, "https://api.github.com"),
        description="Base URL of the issue tracker API",
    )
    feedback_repo: str = Field(
        default="Querbox/tally-app",
        description="owner/name of the repository receiving feedback issues",
    )
    feedback_token: str = Field(
        default="",
        description="Bearer token used to open feedback issues",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
