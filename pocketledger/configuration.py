"""Mini README: Centralised configuration for pocketledger.

Structure:
    * BudgetMode - how budget spend counters are maintained.
    * LedgerSettings - Pydantic settings model describing runtime options.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``POCKETLEDGER_*`` environment variables
    (or a local ``.env`` file). The settings are cached so validation runs
    once per process; tests call ``get_settings.cache_clear()`` after
    patching the environment.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BudgetMode(str, Enum):
    """Strategy used to report ``Budget.spent``."""

    INCREMENTAL = "incremental"
    DERIVED = "derived"


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger service."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the tool service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the tool service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logger level applied when the service starts.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Load the demo transactions and budgets into a fresh ledger.",
    )
    strict_categories: bool = Field(
        False,
        description=(
            "Reject transactions whose category is outside the fixed category list."
            " When disabled unknown categories are stored and grouped as-is."
        ),
    )
    budget_mode: BudgetMode = Field(
        BudgetMode.INCREMENTAL,
        description="Keep budget spend as a running counter or derive it from the ledger.",
    )
    budget_warning_percent: float = Field(
        80.0,
        description="Usage percentage above which a budget is reported as a warning.",
        gt=0,
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Upper-case level names and reject ones logging does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
