"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (REELKIT_*)
3. Config file (~/.reelkit/config.yaml)
4. Default values

Environment variables:
- REELKIT_CONFIG_PATH: Path to config file (overrides default location)
- REELKIT_LOG_LEVEL: Log level (debug, info, warning, error)
- REELKIT_LOG_FORMAT: Log format (text, json)
- REELKIT_LOG_FILE: Log file path
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from reelkit.config.env import EnvReader
from reelkit.config.models import ReelkitConfig
from reelkit.config.schema import ConfigFileModel
from reelkit.exceptions import ConfigError
from reelkit.validation import format_validation_error

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".reelkit"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict[str, Any], float]] = {}
_config_cache_lock = threading.Lock()


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the config file path.

    Can be overridden by the REELKIT_CONFIG_PATH environment variable.
    """
    reader = env or EnvReader()
    return reader.get_path("REELKIT_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def clear_config_cache() -> None:
    """Clear the config file cache, forcing a reload on next access."""
    with _config_cache_lock:
        _config_cache.clear()


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load the raw configuration mapping from a YAML file.

    Results are cached with mtime-based invalidation.

    Args:
        path: Path to config file. If None, uses the default location.

    Returns:
        Parsed mapping. Empty dict if the file doesn't exist or is empty.

    Raises:
        ConfigError: If the file is unreadable or not a YAML mapping.
    """
    if path is None:
        path = get_default_config_path()

    try:
        mtime = path.stat().st_mtime
    except FileNotFoundError:
        logger.debug("Config file not found, using defaults: %s", path)
        return {}
    except OSError as e:
        raise ConfigError(f"Cannot access config file {path}: {e}") from e

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == mtime:
            return cached[0]

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping: {path}")

    with _config_cache_lock:
        _config_cache[path] = (data, mtime)
    logger.debug("Loaded config file: %s", path)
    return data


def _apply_env_overrides(config: ReelkitConfig, env: EnvReader) -> ReelkitConfig:
    level = env.get_str("REELKIT_LOG_LEVEL")
    fmt = env.get_str("REELKIT_LOG_FORMAT")
    file = env.get_path("REELKIT_LOG_FILE")
    if level is None and fmt is None and file is None:
        return config

    try:
        logging_config = replace(
            config.logging,
            level=level if level is not None else config.logging.level,
            format=fmt if fmt is not None else config.logging.format,
            file=file if file is not None else config.logging.file,
        )
    except ValueError as e:
        raise ConfigError(f"Invalid logging environment variable: {e}") from e
    return replace(config, logging=logging_config)


def build_config(
    data: dict[str, Any],
    env: EnvReader | None = None,
) -> ReelkitConfig:
    """Build the effective configuration from a raw mapping and environment.

    Raises:
        ConfigError: If the mapping fails validation.
    """
    try:
        model = ConfigFileModel.model_validate(data)
    except ValidationError as e:
        raise ConfigError(format_validation_error(e, "Config")) from e
    return _apply_env_overrides(model.to_config(), env or EnvReader())


def get_config(
    config_path: Path | None = None,
    env: EnvReader | None = None,
) -> ReelkitConfig:
    """Get the effective configuration.

    Args:
        config_path: Explicit config file (highest precedence for location).
        env: Environment reader; defaults to os.environ.

    Returns:
        ReelkitConfig with file values and environment overrides applied.

    Raises:
        ConfigError: If the config file is invalid.
    """
    reader = env or EnvReader()
    path = config_path if config_path is not None else get_default_config_path(reader)
    return build_config(load_config_file(path), reader)
