"""
tcgsearch — Configuration & Defaults

Every default the CLI falls back to lives here. CLI flags override these
values for a single run.

Usage:
    from tcgsearch.config import settings
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """
    Central configuration for tcgsearch.

    Loads from environment variables (or a local .env file) with fallback defaults.
    """

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # -----------------------------------------------------------------------
    # pokemontcg.io Cards API
    # -----------------------------------------------------------------------
    POKEMONTCG_BASE_URL: str = "https://api.pokemontcg.io/v2/cards"  # no trailing slash

    # -----------------------------------------------------------------------
    # Search Defaults
    # -----------------------------------------------------------------------
    DEFAULT_LIMIT: int = 10                 # sent as pageSize
    DEFAULT_QUERY: str = "!rarity:Rare hp:[90 TO *] (types:Grass OR types:Fire)"
    DEFAULT_ORDER_BY: str = "id"

    # -----------------------------------------------------------------------
    # Logging
    # -----------------------------------------------------------------------
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


# Singleton instance
settings = Settings()
