"""
Configuration settings for the Northwind LINQ exercises.

Uses Pydantic Settings to load environment variables for logging, the fixture
data location, and the default parameters the query runner passes to the
parameterized queries.
"""
from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Fixture data (None means the dataset bundled with the package)
    fixtures_path: Optional[Path] = Field(None, alias="FIXTURES_PATH")

    # Query runner defaults
    order_count_limit: Decimal = Field(Decimal("5"), alias="ORDER_COUNT_LIMIT")
    turnover_limit: Decimal = Field(Decimal("1000"), alias="TURNOVER_LIMIT")
    price_cheap: Decimal = Field(Decimal("10"), alias="PRICE_CHEAP")
    price_middle: Decimal = Field(Decimal("20"), alias="PRICE_MIDDLE")
    price_expensive: Decimal = Field(Decimal("30"), alias="PRICE_EXPENSIVE")
    preview_rows: int = Field(3, alias="PREVIEW_ROWS", ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
