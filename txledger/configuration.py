"""Mini README: Centralised configuration for the transaction ledger.

Structure:
    * LedgerSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the console and gateway.

Usage:
    Variables use the ``TXLEDGER_`` prefix (for example
    ``TXLEDGER_LOG_LEVEL=DEBUG`` or ``TXLEDGER_SEED_DEMO_DATA=false``) and may
    also be placed in a local ``.env`` file. Validation runs once per process
    because the accessor is cached.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger console and gateway."""

    environment: str = Field(
        "development",
        description="Environment label shown in logs and the console banner.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Load the three demo transactions when a ledger is created.",
    )
    api_prefix: str = Field(
        "/api",
        description=(
            "Optional prefix accepted in front of gateway endpoints."
            " Set to an empty string to only accept bare paths."
        ),
    )

    class Config:
        env_prefix = "TXLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Accept level names in any casing and reject unknown ones."""

        name = str(value).strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return name

    @validator("api_prefix", pre=True)
    def _normalise_prefix(cls, value: object) -> str:
        """Force a single leading slash and drop trailing slashes."""

        prefix = str(value or "").strip().strip("/")
        return f"/{prefix}" if prefix else ""

    @property
    def level_number(self) -> int:
        """Numeric logging level matching ``log_level``."""

        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
