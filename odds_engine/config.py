"""Configuration management for the odds engine.

Settings are loaded from environment variables (prefix ODDS_) and an optional
.env file using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from odds_engine.conversion.models import OddsNotation


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    - ODDS_DEFAULT_NOTATION: Notation used when no preference is stored (default: decimal)
    - ODDS_PREFERENCES_DIR: Directory of the preference store (default: .cache/odds_engine)
    - ODDS_LOG_MODE: "development" or "production" (default: development)
    """

    default_notation: OddsNotation = Field(
        default=OddsNotation.DECIMAL,
        description="Display notation used when the user has not chosen one",
    )
    preferences_dir: str = Field(
        default=".cache/odds_engine",
        description="Directory backing the persisted display preference",
    )
    log_mode: Literal["development", "production"] = Field(default="development")

    model_config = SettingsConfigDict(
        env_prefix="ODDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton).

    Returns:
        Settings instance with validated configuration

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    return Settings()
