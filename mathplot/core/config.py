"""
Library configuration.

Centralized configuration management with environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="MATHPLOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Exact arithmetic
    DECIMAL_DIGITS: int = 9  # fractional digits kept when a float becomes a fraction

    # Axes
    MIN_STEP_SIZE: float = 40.0  # minimum pixels between two tick marks
    DEFAULT_RANGE: str = "(-10, 10)"

    # Labels
    FONT_SIZE: int = 17


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
