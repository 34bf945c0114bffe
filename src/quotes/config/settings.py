"""Configuration settings for the quotes tooling."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``QUOTES_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="QUOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_tax_rate: Decimal = Field(
        default=Decimal("18"), description="Tax rate (percent) for new documents"
    )
    currency_symbol: str = Field(default="₹", description="Symbol printed before amounts")
    totals_tolerance: Decimal = Field(
        default=Decimal("0.01"),
        description="Smallest change in totals worth re-emitting",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log output format"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
