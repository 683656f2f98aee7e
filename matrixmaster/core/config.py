"""
Application configuration.

Centralized configuration management with environment variables
(prefix ``MATRIXMASTER_``).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="MATRIXMASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Display
    PRECISION: int = Field(default=4, ge=1, le=17)
    LOCALE: str = "en"  # en, ja

    # Symbolic evaluator
    MAX_SYMBOLIC_DIMENSION: int = Field(default=8, ge=1)  # expansion cost is O(n!)
    CHARACTERISTIC_SYMBOL: str = "λ"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
