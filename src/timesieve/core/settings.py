"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod

Sieve options live here too, so the CLI, the HTTP API, and library callers
share one source of defaults.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `TIMESIEVE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    quarter_surface_check : bool
        When true, the quarter sieve also requires the timex surface text to
        read like "third quarter". Maps from `TIMESIEVE_QUARTER_SURFACE_CHECK`.
    sieves : list[str]
        Registered sieve names applied by the pipeline, in order. Maps from
        `TIMESIEVE_SIEVES` (a JSON list).
    trace_dir : str | None
        Directory for blackboard trace files; maps from `TIMESIEVE_TRACE_DIR`.
    """

    environment: EnvName = Field(default="dev", alias="TIMESIEVE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    quarter_surface_check: bool = Field(default=False, alias="TIMESIEVE_QUARTER_SURFACE_CHECK")
    sieves: list[str] = Field(
        default_factory=lambda: ["quarter_reporting"], alias="TIMESIEVE_SIEVES"
    )
    trace_dir: str | None = Field(default=None, alias="TIMESIEVE_TRACE_DIR")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        """Return True if running in the development environment."""
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        """Return True if running in the test environment."""
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("TIMESIEVE_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "timesieve") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
