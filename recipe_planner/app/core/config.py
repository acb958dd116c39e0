import logging
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    scraper_user_agent: str = Field(
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36",
        alias="SCRAPER_USER_AGENT",
    )
    scraper_cookies: str | None = Field(None, alias="SCRAPER_COOKIES")
    scraper_timeout_seconds: float = Field(15.0, alias="SCRAPER_TIMEOUT_SECONDS")
    # Last-resort image scan: skip images declared smaller than this, or whose
    # URL contains one of the blocked markers.
    recipe_image_min_width: int = Field(200, alias="RECIPE_IMAGE_MIN_WIDTH")
    recipe_image_min_height: int = Field(150, alias="RECIPE_IMAGE_MIN_HEIGHT")
    recipe_image_blocked_markers: List[str] = Field(
        ["logo", "icon", "avatar", "button", "social"], alias="RECIPE_IMAGE_BLOCKED_MARKERS"
    )

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
