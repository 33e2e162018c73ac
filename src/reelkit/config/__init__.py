"""Configuration management for reelkit.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (REELKIT_*)
3. Config file (~/.reelkit/config.yaml)
4. Default values (lowest priority)
"""

from reelkit.config.env import EnvReader
from reelkit.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from reelkit.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from reelkit.config.models import LoggingConfig, ReelkitConfig

__all__ = [
    # Models
    "LoggingConfig",
    "ReelkitConfig",
    # Loader
    "EnvReader",
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
]
