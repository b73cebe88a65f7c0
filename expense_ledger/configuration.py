"""Mini README: Centralised configuration for the expense ledger.

Structure:
    * LedgerSettings - pydantic-settings model describing where the ledger
      file lives and how chatty logging should be.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``EXPENSE_LEDGER_*`` environment variables or a local
    ``.env`` file. The defaults keep ``expenses.txt`` in the working
    directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LedgerSettings(BaseSettings):
    """Runtime configuration for the expense ledger."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    data_directory: Path = Field(
        Path("."),
        description="Directory holding the ledger file.",
    )
    ledger_filename: str = Field(
        "expenses.txt",
        description="Name of the flat text file storing one expense per line.",
        min_length=1,
    )
    log_level: str = Field(
        "WARNING",
        description="Root log level used by the command line interface.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @property
    def ledger_path(self) -> Path:
        """Full path of the ledger file."""

        return self.data_directory / self.ledger_filename

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
