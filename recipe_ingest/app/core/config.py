import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
        alias="SCRAPER_USER_AGENT",
    )
    scraper_accept_language: str = Field("en-US,en;q=0.9", alias="SCRAPER_ACCEPT_LANGUAGE")
    scraper_timeout_seconds: float = Field(10.0, alias="SCRAPER_TIMEOUT_SECONDS")
    tiktok_default_duration_seconds: int = Field(30, alias="TIKTOK_DEFAULT_DURATION_SECONDS")
    youtube_caption_language: str = Field("en", alias="YOUTUBE_CAPTION_LANGUAGE")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
