"""Logging setup and formatters for reelkit."""

from reelkit.logging.config import configure_logging
from reelkit.logging.handlers import JSONFormatter, TextFormatter

__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "configure_logging",
]
