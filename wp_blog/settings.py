from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class BlogSettings(BaseSettings):
    """
    Environment-driven settings for the WordPress content source + page generation.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # ---- Content source ----
    posts_url: str = Field(
        default="https://dev-cs-55-week-11.pantheonsite.io/wp-json/twentytwentyone-child/v1/latest-posts/1",
        alias="WP_POSTS_URL",
    )

    request_timeout_sec: float = Field(default=15.0, alias="WP_REQUEST_TIMEOUT_SEC")
    request_delay_sec: float = Field(default=0.0, alias="WP_REQUEST_DELAY_SEC")

    max_retries: int = Field(default=2, alias="WP_MAX_RETRIES")
    backoff_base_sec: float = Field(default=0.5, alias="WP_BACKOFF_BASE_SEC")
    backoff_max_sec: float = Field(default=5.0, alias="WP_BACKOFF_MAX_SEC")

    user_agent: str = Field(default="wp-blog-generator/0.1", alias="WP_USER_AGENT")

    # ---- Page generation ----
    # Seconds before the hosting platform regenerates a page
    revalidate_sec: int = Field(default=60, alias="WP_REVALIDATE_SEC")

    log_level: str = Field(default="INFO", alias="WP_LOG_LEVEL")


def load_settings() -> BlogSettings:
    return BlogSettings()
