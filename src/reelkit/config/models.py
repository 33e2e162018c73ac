"""Configuration models for reelkit.

The effective configuration is a set of frozen dataclasses. Config files
are validated by the Pydantic models in reelkit.config.schema and
converted into these.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from reelkit.naming.versions import DEFAULT_SHOT_RULES, ShotRule
from reelkit.timeline.export import ExportOptions
from reelkit.timeline.shots import ShotSettings

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.level.casefold() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"level must be one of {sorted(VALID_LOG_LEVELS)}, got {self.level}"
            )
        if self.format.casefold() not in VALID_LOG_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(VALID_LOG_FORMATS)}, got {self.format}"
            )
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must be >= 0, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(f"backup_count must be >= 0, got {self.backup_count}")


@dataclass(frozen=True)
class ReelkitConfig:
    """Effective reelkit configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shots: ShotSettings = field(default_factory=ShotSettings)
    export: ExportOptions = field(default_factory=ExportOptions)
    shot_rules: tuple[ShotRule, ...] = DEFAULT_SHOT_RULES
