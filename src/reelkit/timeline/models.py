"""Clip records used by timeline planning.

These mirror the few properties the planning logic reads from an editing
host's timeline items and media pool items.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TrackType(Enum):
    """Timeline track kind."""

    VIDEO = "video"
    AUDIO = "audio"


@dataclass(frozen=True)
class TimelineClip:
    """A clip placed on a timeline track.

    Attributes:
        name: Current clip name.
        start: First timeline frame.
        end: Timeline frame after the last frame (exclusive).
        track: 1-based track index.
        track_type: Video or audio track.
        enabled: False for clips disabled on the timeline.
    """

    name: str
    start: int
    end: int
    track: int = 1
    track_type: TrackType = TrackType.VIDEO
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.track < 1:
            raise ValueError(f"track must be >= 1, got {self.track}")
        if self.end < self.start:
            raise ValueError(
                f"end ({self.end}) must not be before start ({self.start})"
            )

    @property
    def duration(self) -> int:
        """Length in frames."""
        return self.end - self.start

    @property
    def label(self) -> str:
        """Track label such as 'video track 2'."""
        return f"{self.track_type.value} track {self.track}"


@dataclass(frozen=True)
class ExportClip:
    """A timeline item considered for a resolution export timeline.

    Attributes:
        name: Media pool item name.
        resolution: Source resolution string as reported by the host
            (e.g. "1920x1080" or "Unknown").
        start_frame: Source in-point.
        end_frame: Source out-point.
        timeline_inpoint: Position on the source timeline.
        par: Pixel aspect ratio.
        reel_name: Reel name metadata, empty when unset.
        version_name: Custom version name to carry over, if any.
        enabled: False for clips disabled on the timeline.
        source_timeline: Name of the timeline the clip came from.
    """

    name: str
    resolution: str
    start_frame: int = 0
    end_frame: int = 0
    timeline_inpoint: int = 0
    par: float = 1.0
    reel_name: str = ""
    version_name: str | None = None
    enabled: bool = True
    source_timeline: str | None = None
