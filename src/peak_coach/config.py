"""Configuration settings for Peak Coach."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/peak_coach/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Settings loaded from PEAK_COACH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PEAK_COACH_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scoring
    target_sleep_hours: float = Field(default=7.5, gt=0, le=24)

    # Advanced coach
    advanced_coach_enabled: bool = False
    openai_api_key: str = ""
    llm_model: str = "gpt-4o-mini"
    advanced_coach_timeout_seconds: float = Field(default=30.0, gt=0)

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
