"""Pydantic models for reelkit config files.

Example config.yaml:

    logging:
      level: debug
      format: json
    shots:
      scene: sc02
      pattern: sh####
      start: 10
      increment: 10
    export:
      correct_par: true
      sort_method: reel_name
    shot_rules:
      - name: episode_shot
        pattern: '(?P<scene>EP\\d{2})_(?P<shot>SH\\d{3})'
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from reelkit.config.models import (
    VALID_LOG_FORMATS,
    VALID_LOG_LEVELS,
    LoggingConfig,
    ReelkitConfig,
)
from reelkit.naming.versions import DEFAULT_SHOT_RULES, ShotRule
from reelkit.timeline.export import ExportOptions, SortMethod
from reelkit.timeline.shots import PATTERN_ERROR, SELECTION_ERROR, ShotSettings


class LoggingModel(BaseModel):
    """Pydantic model for the logging section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: str = "info"
    file: Path | None = None
    format: str = "text"
    include_stderr: bool = False
    max_bytes: int = Field(default=10_485_760, ge=0)
    backup_count: int = Field(default=5, ge=0)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and casefold the log level."""
        level = v.casefold()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate and casefold the log format."""
        fmt = v.casefold()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(f"must be one of {sorted(VALID_LOG_FORMATS)}")
        return fmt

    def to_config(self) -> LoggingConfig:
        """Convert to LoggingConfig."""
        return LoggingConfig(
            level=self.level,
            file=self.file.expanduser() if self.file else None,
            format=self.format,
            include_stderr=self.include_stderr,
            max_bytes=self.max_bytes,
            backup_count=self.backup_count,
        )


class ShotsModel(BaseModel):
    """Pydantic model for the shots section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scene: str = "sc01"
    pattern: str = "sh####"
    start: int = 10
    increment: int = 10
    suffix_pattern: str = "_L#"
    video: bool = True
    audio: bool = False
    from_playhead: bool = False

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Validate that the shot pattern has a '#' placeholder."""
        if "#" not in v:
            raise ValueError(PATTERN_ERROR)
        return v

    @model_validator(mode="after")
    def validate_track_selection(self) -> ShotsModel:
        """Validate that at least one track type is processed."""
        if not (self.video or self.audio):
            raise ValueError(SELECTION_ERROR)
        return self

    def to_settings(self) -> ShotSettings:
        """Convert to ShotSettings."""
        return ShotSettings(**self.model_dump())


class ExportModel(BaseModel):
    """Pydantic model for the export section."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    correct_par: bool = False
    half_resolution: bool = False
    keep_source_if_small: bool = False
    include_disabled: bool = False
    sort_method: str = SortMethod.SOURCE_NAME.value

    @field_validator("sort_method")
    @classmethod
    def validate_sort_method(cls, v: str) -> str:
        """Validate the sort method name or label."""
        try:
            return SortMethod.from_label(v).value
        except ValueError:
            valid = ", ".join(m.value for m in SortMethod)
            raise ValueError(f"must be one of: {valid}") from None

    def to_options(self) -> ExportOptions:
        """Convert to ExportOptions."""
        return ExportOptions(
            correct_par=self.correct_par,
            half_resolution=self.half_resolution,
            keep_source_if_small=self.keep_source_if_small,
            include_disabled=self.include_disabled,
            sort_method=SortMethod(self.sort_method),
        )


class ShotRuleModel(BaseModel):
    """Pydantic model for a shot rule entry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    pattern: str = Field(min_length=1)

    @field_validator("pattern")
    @classmethod
    def validate_regex(cls, v: str) -> str:
        """Validate that the pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression: {e}") from None
        return v

    def to_rule(self) -> ShotRule:
        """Convert to ShotRule."""
        return ShotRule.compile(self.name, self.pattern)


class ConfigFileModel(BaseModel):
    """Pydantic model for a complete config file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    logging: LoggingModel = Field(default_factory=LoggingModel)
    shots: ShotsModel = Field(default_factory=ShotsModel)
    export: ExportModel = Field(default_factory=ExportModel)
    shot_rules: list[ShotRuleModel] | None = None

    def to_config(self) -> ReelkitConfig:
        """Convert to ReelkitConfig.

        Configured shot rules replace the defaults; omit the section to
        keep DEFAULT_SHOT_RULES.
        """
        rules = (
            tuple(rule.to_rule() for rule in self.shot_rules)
            if self.shot_rules is not None
            else DEFAULT_SHOT_RULES
        )
        return ReelkitConfig(
            logging=self.logging.to_config(),
            shots=self.shots.to_settings(),
            export=self.export.to_options(),
            shot_rules=rules,
        )
