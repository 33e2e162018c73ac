"""Timeline description loading.

Timeline descriptions are YAML files exported from an editing host (or
written by hand) listing the clips the planners operate on:

    frame_rate: 25
    playhead: "01:00:10:00"
    clips:
      - {name: A001C005, start: 90000, end: 90100, track: 1, type: video}
    media:
      - {name: A001C005.mov, resolution: 1920x1080, timeline_inpoint: 90000}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from reelkit.exceptions import TimelineLoadError
from reelkit.timeline.models import ExportClip, TimelineClip, TrackType
from reelkit.validation import format_validation_error


class TimelineClipModel(BaseModel):
    """Pydantic model for a timeline clip entry."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    track: int = Field(default=1, ge=1)
    track_type: TrackType = Field(default=TrackType.VIDEO, alias="type")
    enabled: bool = True

    @model_validator(mode="after")
    def validate_range(self) -> TimelineClipModel:
        """Validate that the clip does not end before it starts."""
        if self.end < self.start:
            raise ValueError(
                f"end ({self.end}) must not be before start ({self.start})"
            )
        return self

    def to_clip(self) -> TimelineClip:
        """Convert to the planning record."""
        return TimelineClip(
            name=self.name,
            start=self.start,
            end=self.end,
            track=self.track,
            track_type=self.track_type,
            enabled=self.enabled,
        )


class ExportClipModel(BaseModel):
    """Pydantic model for a media entry considered for export."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    resolution: str = "Unknown"
    start_frame: int = 0
    end_frame: int = 0
    timeline_inpoint: int = 0
    par: float = Field(default=1.0, allow_inf_nan=False)
    reel_name: str = ""
    version_name: str | None = None
    enabled: bool = True
    source_timeline: str | None = None

    def to_clip(self) -> ExportClip:
        """Convert to the planning record.

        Non-positive pixel aspect ratios fall back to square pixels.
        """
        return ExportClip(
            name=self.name,
            resolution=self.resolution,
            start_frame=self.start_frame,
            end_frame=self.end_frame,
            timeline_inpoint=self.timeline_inpoint,
            par=self.par if self.par > 0 else 1.0,
            reel_name=self.reel_name,
            version_name=self.version_name,
            enabled=self.enabled,
            source_timeline=self.source_timeline,
        )


class TimelineDocument(BaseModel):
    """Pydantic model for a complete timeline description."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    frame_rate: float = Field(default=25, gt=0, allow_inf_nan=False)
    playhead: str | None = None
    clips: list[TimelineClipModel] = Field(default_factory=list)
    media: list[ExportClipModel] = Field(default_factory=list)

    def timeline_clips(self) -> list[TimelineClip]:
        """Clips for shot planning."""
        return [clip.to_clip() for clip in self.clips]

    def export_clips(self) -> list[ExportClip]:
        """Clips for export planning."""
        return [clip.to_clip() for clip in self.media]


def load_timeline_from_dict(data: dict[str, Any]) -> TimelineDocument:
    """Validate a timeline description dictionary.

    Raises:
        TimelineLoadError: If the description is invalid.
    """
    try:
        return TimelineDocument.model_validate(data)
    except ValidationError as e:
        raise TimelineLoadError(format_validation_error(e, "Timeline")) from e


def load_timeline(path: Path) -> TimelineDocument:
    """Load and validate a timeline description from a YAML file.

    Args:
        path: Path to the YAML description.

    Returns:
        Validated TimelineDocument.

    Raises:
        TimelineLoadError: If the file is missing, unreadable or invalid.
    """
    if not path.exists():
        raise TimelineLoadError(f"Timeline file not found: {path}", path=path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TimelineLoadError(f"Invalid YAML syntax: {e}", path=path) from e
    except OSError as e:
        raise TimelineLoadError(f"Cannot read timeline file: {e}", path=path) from e

    if data is None:
        raise TimelineLoadError("Timeline file is empty", path=path)
    if not isinstance(data, dict):
        raise TimelineLoadError("Timeline file must be a YAML mapping", path=path)

    try:
        return TimelineDocument.model_validate(data)
    except ValidationError as e:
        message = format_validation_error(e, "Timeline")
        raise TimelineLoadError(message, path=path) from e
