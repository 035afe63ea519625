"""Utility helpers for pngstego."""

from .logging import configure_logging, resolve_log_level

__all__ = ["configure_logging", "resolve_log_level"]
