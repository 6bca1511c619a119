"""Mini README: Centralised configuration models and helpers for SpendChart.

Structure:
    * SpendChartSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SPENDCHART_*`` environment variables
    (or a local ``.env`` file), pick the service host and port, and bound the
    number of live page sessions. Settings are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpendChartSettings(BaseSettings):
    """Runtime configuration for the SpendChart service."""

    model_config = SettingsConfigDict(
        env_prefix="SPENDCHART_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    session_limit: int = Field(
        256,
        description=(
            "Maximum number of page sessions kept in memory. The oldest"
            " session is dropped when a new page load exceeds the limit."
        ),
        ge=1,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Reject names the logging module does not know about."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> SpendChartSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SpendChartSettings()
