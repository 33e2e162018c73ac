"""Shot rename planning.

Every enabled clip on video track 1 defines a shot. Shots are numbered from
a '#' template (``sh####``) starting at ``start`` and growing by
``increment``; the scene name is prepended when set:

    sc01_sh0010, sc01_sh0020, ...

Clips on higher video tracks that overlap a V1 clip are stacked layers of
that shot and receive a layer suffix (``_L#``): V1 gets layer 1, the
layers above get 2, 3, ... in track order. Overlapping audio clips share
the shot name and only get suffixes when there is more than one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from reelkit.naming.patterns import (
    NamingPattern,
    apply_suffix_pattern,
    parse_naming_pattern,
)
from reelkit.naming.timecode import DEFAULT_FRAME_RATE, parse_timecode_to_frame
from reelkit.timeline.models import TimelineClip, TrackType

logger = logging.getLogger(__name__)

PATTERN_ERROR = "Pattern must include at least one '#' symbol to insert numbers."
SELECTION_ERROR = "Select at least one track type to process."


@dataclass(frozen=True)
class ShotSettings:
    """Options for a shot rename run."""

    scene: str = "sc01"
    pattern: str = "sh####"
    start: int = 10
    increment: int = 10
    suffix_pattern: str = "_L#"
    video: bool = True
    audio: bool = False
    from_playhead: bool = False

    def __post_init__(self) -> None:
        """Validate settings."""
        if "#" not in self.pattern:
            raise ValueError(PATTERN_ERROR)
        if not (self.video or self.audio):
            raise ValueError(SELECTION_ERROR)

    @property
    def naming_pattern(self) -> NamingPattern:
        """Parsed shot number template."""
        return parse_naming_pattern(self.pattern).value

    def base_name(self, number: int) -> str:
        """Shot name for a number, with the scene prepended when set."""
        shot_name = self.naming_pattern.render(number)
        return f"{self.scene}_{shot_name}" if self.scene else shot_name


@dataclass(frozen=True)
class ShotRename:
    """One planned rename."""

    clip: TimelineClip
    new_name: str

    @property
    def changed(self) -> bool:
        """True if the new name differs from the clip's current name."""
        return self.clip.name != self.new_name

    def describe(self) -> str:
        """Preview line, e.g. 'sc01_sh0010_L1 (video track 1)'."""
        return f"{self.new_name} ({self.clip.label})"


@dataclass
class ShotPlan:
    """Result of plan_shot_renames."""

    start_index: int = 0
    video: list[ShotRename] = field(default_factory=list)
    audio: list[ShotRename] = field(default_factory=list)

    @property
    def renames(self) -> list[ShotRename]:
        """All planned renames, video first."""
        return [*self.video, *self.audio]


def clips_overlap(first: TimelineClip, second: TimelineClip) -> bool:
    """True if two clips share at least one timeline frame."""
    return first.start < second.end and second.start < first.end


def _track_clips(
    clips: Iterable[TimelineClip],
    track_type: TrackType,
    track: int,
) -> list[TimelineClip]:
    selected = [c for c in clips if c.track_type is track_type and c.track == track]
    return sorted(selected, key=lambda c: c.start)


def _sort_by_track(clips: Iterable[TimelineClip]) -> list[TimelineClip]:
    return sorted(clips, key=lambda c: (c.track, c.start))


def find_start_index(
    clips: Sequence[TimelineClip],
    timecode: str,
    frame_rate: int | float | str | None = DEFAULT_FRAME_RATE,
) -> int:
    """Index of the V1 clip under the playhead.

    Args:
        clips: All timeline clips.
        timecode: Playhead timecode (HH:MM:SS:FF).
        frame_rate: Timeline frame rate.

    Returns:
        0-based index into the V1 clips ordered by start, or 0 when the
        playhead is not over a V1 clip (including unparseable timecode).
    """
    frame = parse_timecode_to_frame(timecode, frame_rate)
    for index, clip in enumerate(_track_clips(clips, TrackType.VIDEO, 1)):
        if clip.start <= frame <= clip.start + clip.duration - 1:
            return index
    return 0


def plan_video_renames(
    clips: Sequence[TimelineClip],
    settings: ShotSettings,
    start_index: int = 0,
) -> list[ShotRename]:
    """Plan names for V1 clips and the video layers stacked on them."""
    v1_clips = _track_clips(clips, TrackType.VIDEO, 1)
    upper_clips = [
        c
        for c in clips
        if c.track_type is TrackType.VIDEO and c.track >= 2 and c.enabled
    ]

    plan: list[ShotRename] = []
    number = settings.start
    for v1_clip in v1_clips[start_index:]:
        if not v1_clip.enabled:
            continue
        base_name = settings.base_name(number)
        stacked = _sort_by_track(c for c in upper_clips if clips_overlap(v1_clip, c))

        if stacked:
            v1_name = base_name + apply_suffix_pattern(settings.suffix_pattern, 1)
        else:
            v1_name = base_name
        plan.append(ShotRename(v1_clip, v1_name))

        for layer, layer_clip in enumerate(stacked, start=2):
            suffix = apply_suffix_pattern(settings.suffix_pattern, layer)
            plan.append(ShotRename(layer_clip, base_name + suffix))

        number += settings.increment
    return plan


def plan_audio_renames(
    clips: Sequence[TimelineClip],
    settings: ShotSettings,
    start_index: int = 0,
) -> list[ShotRename]:
    """Plan names for audio clips overlapping each V1 shot."""
    v1_clips = _track_clips(clips, TrackType.VIDEO, 1)
    audio_clips = [c for c in clips if c.track_type is TrackType.AUDIO and c.enabled]

    plan: list[ShotRename] = []
    number = settings.start
    for v1_clip in v1_clips[start_index:]:
        if not v1_clip.enabled:
            continue
        base_name = settings.base_name(number)
        overlapping = _sort_by_track(
            c for c in audio_clips if clips_overlap(v1_clip, c)
        )

        for index, audio_clip in enumerate(overlapping, start=1):
            if len(overlapping) > 1:
                name = base_name + apply_suffix_pattern(settings.suffix_pattern, index)
            else:
                name = base_name
            plan.append(ShotRename(audio_clip, name))

        number += settings.increment
    return plan


def plan_shot_renames(
    clips: Sequence[TimelineClip],
    settings: ShotSettings,
    playhead: str | None = None,
    frame_rate: int | float | str | None = DEFAULT_FRAME_RATE,
) -> ShotPlan:
    """Plan a complete shot rename run.

    Args:
        clips: All timeline clips.
        settings: Shot naming options.
        playhead: Playhead timecode, used when settings.from_playhead is set.
        frame_rate: Timeline frame rate for the playhead conversion.

    Returns:
        ShotPlan with video and audio renames.
    """
    plan = ShotPlan()
    if settings.from_playhead and playhead:
        plan.start_index = find_start_index(clips, playhead, frame_rate)
        logger.info(
            "Starting from playhead at %s (clip %d)",
            playhead,
            plan.start_index + 1,
            extra={"playhead": playhead, "start_index": plan.start_index},
        )

    if settings.video:
        plan.video = plan_video_renames(clips, settings, plan.start_index)
        logger.debug("Planned %d video renames", len(plan.video))
    if settings.audio:
        plan.audio = plan_audio_renames(clips, settings, plan.start_index)
        logger.debug("Planned %d audio renames", len(plan.audio))
    return plan
