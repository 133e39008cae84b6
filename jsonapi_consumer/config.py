"""Runtime settings for talking to an upstream JSON:API service.

Environment variables use the JSONAPI_CONSUMER_ prefix.
Example: JSONAPI_CONSUMER_API_URL=https://api.example.com/v1
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsumerSettings(BaseSettings):
    """Upstream connection and pagination settings.

    Attributes:
        api_url: Base URL of the upstream JSON:API service.
        page_number_param: Query key carrying the page number in upstream links.
        page_size_param: Query key carrying the page size in upstream requests.
        default_page_size: Page size requested when the caller gives none.
        timeout: Request timeout in seconds.
        user_agent: User-Agent sent with every upstream request.
    """

    api_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the upstream JSON:API service",
    )
    page_number_param: str = Field(
        default="page[number]",
        min_length=1,
        description="Query parameter holding the page number",
    )
    page_size_param: str = Field(
        default="page[size]",
        min_length=1,
        description="Query parameter holding the page size",
    )
    default_page_size: int = Field(
        default=25,
        ge=1,
        le=1000,
        description="Page size requested when none is given",
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Upstream request timeout in seconds",
    )
    user_agent: str = Field(
        default="jsonapi-consumer/0.1",
        description="User-Agent header for upstream requests",
    )

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_CONSUMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> ConsumerSettings:
    """Return process-wide settings loaded from the environment."""
    return ConsumerSettings()
