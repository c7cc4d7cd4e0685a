"""
Library configuration using Pydantic Settings.

Settings are read from ``OUTCOME_``-prefixed environment variables
and an optional ``.env`` file.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutcomeSettings(BaseSettings):
    """Logging behaviour of the outcome library."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_captured_errors: bool = Field(
        default=False,
        description="Emit a debug record when a guarded call captures an exception",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names the logging module does not know."""
        level = str(v).strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level


@lru_cache
def get_settings() -> OutcomeSettings:
    """
    Get cached library settings.

    Returns:
        Configured OutcomeSettings instance.
    """
    return OutcomeSettings()
