"""WikiSEO configuration using Pydantic Settings.

This module centralizes every option the metadata pipeline recognizes.
Values can be overridden via environment variables or .env file.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    """Pipeline settings with environment variable support."""

    # ===== Generators =====
    # Optional generators, run in this order after the MetaTag generator
    METADATA_GENERATORS: List[str] = ["OpenGraph", "Twitter"]

    # ===== Site Verification =====
    GOOGLE_SITE_VERIFICATION_KEY: Optional[str] = None
    BING_SITE_VERIFICATION_KEY: Optional[str] = None
    YANDEX_SITE_VERIFICATION_KEY: Optional[str] = None
    PINTEREST_SITE_VERIFICATION_KEY: Optional[str] = None
    ALEXA_SITE_VERIFICATION_KEY: Optional[str] = None
    NORTON_SITE_VERIFICATION_KEY: Optional[str] = None
    FACEBOOK_APP_ID: Optional[str] = None

    # ===== Site Defaults =====
    SITE_NAME: Optional[str] = None
    DEFAULT_IMAGE: Optional[str] = None
    TWITTER_SITE: Optional[str] = None
    TWITTER_CARD_TYPE: str = "summary_large_image"

    # ===== Title Rewrite =====
    DEFAULT_TITLE_MODE: str = "replace"
    DEFAULT_TITLE_SEPARATOR: str = " - "

    # ===== Database =====
    DATABASE_URL: Optional[str] = None
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 3306
    DATABASE_USER: str = "root"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "wiki"

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"

    def get_database_url(self) -> str:
        """Get database URL, built from the individual parts when not set."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()
