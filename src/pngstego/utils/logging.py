"""Logging utilities for pngstego."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..exceptions import ConfigurationError

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "PNGSTEGO_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(level: Optional[str] = None) -> int:
    """Map an explicit level, the environment or the default to a logging level."""

    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"unknown log level {name!r}")
    return getattr(logging, name)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the application."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
    )
