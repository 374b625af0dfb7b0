"""
Runtime settings, read from KANSUJI_* environment variables.

A `.env` file in the working directory is read too, so local overrides
never need to be exported by hand:

    KANSUJI_ALLOW_INCOMPLETE_SEQUENCE=1   # accept "恒" as 0, like older parsers
    KANSUJI_MAX_INPUT_LENGTH=10000        # API request limit (characters)
    KANSUJI_MAX_BATCH_SIZE=100            # API batch limit (items)
    KANSUJI_LOG_LEVEL=INFO

Real environment variables win over `.env` values.  A value that does not
fit its field (e.g. KANSUJI_ALLOW_INCOMPLETE_SEQUENCE=maybe) is rejected
with a pydantic ValidationError rather than read as a default.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ParserSettings(BaseSettings):
    """Knobs for the parser and its HTTP wrapper."""

    model_config = SettingsConfigDict(
        env_prefix="KANSUJI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allow_incomplete_sequence: bool = Field(
        default=False,
        description="Accept a compound word left open at end of input (\"恒\", \"不可\") and drop it",
    )
    max_input_length: int = Field(default=10_000, gt=0, description="API limit per numeral")
    max_batch_size: int = Field(default=100, gt=0, description="API limit per batch")
    log_level: str = Field(default="WARNING", description="DEBUG/INFO/WARNING/ERROR/CRITICAL")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_settings() -> ParserSettings:
    """Build settings from the environment and `.env`.

    Raises:
        pydantic.ValidationError: If any KANSUJI_* value is invalid.
    """
    return ParserSettings()


@lru_cache(maxsize=1)
def get_settings() -> ParserSettings:
    """Process-wide settings, loaded once.  Call `get_settings.cache_clear()` to reload."""
    return load_settings()


def configure_logging(settings: ParserSettings | None = None) -> None:
    """Set up root logging for the entry points (demo script, API server)."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
