"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading environment variables
with type conversion. It accepts an optional env mapping so code that
depends on the environment can be tested without touching os.environ.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


class EnvReader:
    """Environment variable reader with type conversion.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        level = reader.get_str("REELKIT_LOG_LEVEL")

        # Testing usage (inject custom env)
        reader = EnvReader(env={"REELKIT_LOG_LEVEL": "debug"})
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string, treating empty values as unset."""
        value = self._env.get(var)
        if not value:
            return default
        return value

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean ("true", "1", "yes", "on" are true)."""
        value = self._env.get(var)
        if value is None:
            return default
        return value.strip().casefold() in _TRUE_VALUES

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Get a path with tilde expansion."""
        value = self.get_str(var)
        if value is None:
            return default
        return Path(value).expanduser()
