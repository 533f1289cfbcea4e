"""
DeepL Client Configuration

This module manages client configuration using Pydantic Settings.
Environment variables (prefixed with DEEPL_) are loaded from the process
environment and an optional .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# V2 is the base url for v2 of the DeepL API.
V2 = "https://api.deepl.com/v2"


class Settings(BaseSettings):
    """Client settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="DEEPL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    auth_key: Optional[str] = None
    base_url: str = Field(default=V2)

    log_level: str = "INFO"

    @validator("base_url")
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints are joined with a leading slash"""
        return v.rstrip("/")

    @validator("log_level")
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def has_auth_key(self) -> bool:
        return bool(self.auth_key)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache for singleton pattern.
    """
    return Settings()
