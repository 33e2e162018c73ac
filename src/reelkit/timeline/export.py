"""Resolution grouping for export timelines.

Clips from one or more source timelines are grouped by source resolution
(optionally corrected for non-square pixels) and each group becomes an
export timeline named ``EXPORT_<width>x<height>``, with ``_PAR`` and
``_HALF`` suffixes when those adjustments apply. Dimensions produced by
PAR correction or halving are always even for codec compatibility.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from reelkit.naming.outcome import Matched, Outcome, Unmatched
from reelkit.timeline.models import ExportClip

logger = logging.getLogger(__name__)

RESOLUTION_PATTERN = re.compile(r"(\d+)x(\d+)", re.ASCII)

UNKNOWN_RESOLUTION = "Unknown"

# Halving is skipped below this height when keep_source_if_small is set
MIN_HALF_HEIGHT = 1080

EXPORT_PREFIX = "EXPORT_"


def _even(value: int) -> int:
    return value - 1 if value % 2 else value


def _usable_par(par: float) -> bool:
    return math.isfinite(par) and par > 0


@dataclass(frozen=True)
class Resolution:
    """Frame size in pixels."""

    width: int
    height: int

    @property
    def label(self) -> str:
        """WIDTHxHEIGHT label."""
        return f"{self.width}x{self.height}"

    def __str__(self) -> str:
        return self.label

    def half(self) -> Resolution:
        """Half size, each dimension floored and forced even."""
        return Resolution(_even(self.width // 2), _even(self.height // 2))

    def par_corrected(self, par: float) -> Resolution:
        """Square-pixel equivalent for a pixel aspect ratio.

        Height is divided by the PAR, floored and forced even. Square or
        invalid ratios leave the resolution unchanged.
        """
        if not _usable_par(par) or par == 1.0:
            return self
        return Resolution(self.width, _even(int(self.height // par)))


@dataclass(frozen=True)
class HalfDecision:
    """Outcome of decide_half_resolution."""

    apply: bool
    resolution: Resolution
    reason: str


class SortMethod(Enum):
    """Clip order inside an export timeline."""

    SOURCE_NAME = "source_name"
    SOURCE_INPOINT = "source_inpoint"
    TIMELINE_INPOINT = "timeline_inpoint"
    REEL_NAME = "reel_name"
    NONE = "none"

    @classmethod
    def from_label(cls, label: str) -> SortMethod:
        """Parse a method name or a UI label such as 'Inpoint on Timeline'.

        Raises:
            ValueError: If the label is not a known sort method.
        """
        key = re.sub(r"[\s-]+", "_", label.strip()).casefold()
        if key == "inpoint_on_timeline":
            return cls.TIMELINE_INPOINT
        return cls(key)


@dataclass(frozen=True)
class ExportOptions:
    """Options for plan_export."""

    correct_par: bool = False
    half_resolution: bool = False
    keep_source_if_small: bool = False
    include_disabled: bool = False
    sort_method: SortMethod = SortMethod.SOURCE_NAME


@dataclass
class ExportGroup:
    """One planned export timeline."""

    resolution: Resolution
    target: Resolution
    timeline_name: str
    original_resolution: str
    par: float = 1.0
    par_corrected: bool = False
    half_applied: bool = False
    reason: str = ""
    clips: list[ExportClip] = field(default_factory=list)

    @property
    def version_name_count(self) -> int:
        """Number of clips carrying a version name over."""
        return sum(1 for clip in self.clips if clip.version_name)


def parse_resolution(value: str | None) -> Outcome[Resolution | None]:
    """Parse a WIDTHxHEIGHT resolution string.

    Returns:
        Matched with the Resolution, or Unmatched(None) for empty,
        "Unknown" or malformed values.
    """
    if not value or value == UNKNOWN_RESOLUTION:
        return Unmatched(None)
    match = RESOLUTION_PATTERN.search(value)
    if match is None:
        logger.debug("Failed to match resolution pattern for '%s'", value)
        return Unmatched(None)
    return Matched(Resolution(int(match.group(1)), int(match.group(2))))


def describe_par_correction(resolution: Resolution, par: float) -> str:
    """Human-readable description of a PAR correction."""
    if not _usable_par(par):
        return "Invalid parameters"
    if par == 1.0:
        return "Square pixels (PAR = 1.0)"
    corrected = resolution.par_corrected(par)
    return f"PAR correction: {resolution} (PAR {par:.2f}) -> {corrected}"


def decide_half_resolution(
    resolution: Resolution,
    half_resolution: bool,
    keep_source_if_small: bool = False,
) -> HalfDecision:
    """Decide whether an export timeline is created at half resolution."""
    if not half_resolution:
        return HalfDecision(False, resolution, "Half resolution not requested")

    half = resolution.half()
    if keep_source_if_small and half.height < MIN_HALF_HEIGHT:
        return HalfDecision(
            False,
            resolution,
            f"Half resolution height ({half.height}) would be less than "
            f"{MIN_HALF_HEIGHT}px, keeping source resolution",
        )
    return HalfDecision(
        True, half, f"Applying half resolution: {resolution} -> {half}"
    )


def export_timeline_name(
    resolution: Resolution | str,
    par_corrected: bool = False,
    half: bool = False,
) -> str:
    """Name of the export timeline for a resolution group."""
    name = f"{EXPORT_PREFIX}{resolution}"
    if par_corrected:
        name += "_PAR"
    if half:
        name += "_HALF"
    return name


def group_by_resolution(
    clips: Iterable[ExportClip],
    correct_par: bool = False,
    include_disabled: bool = False,
) -> dict[str, list[ExportClip]]:
    """Group clips by (optionally PAR-corrected) resolution label.

    Clips with unknown or malformed resolutions are skipped. Groups keep
    first-seen order and clips keep input order.
    """
    groups: dict[str, list[ExportClip]] = {}
    for clip in clips:
        if not clip.enabled and not include_disabled:
            logger.debug("Skipping disabled clip: %s", clip.name)
            continue
        parsed = parse_resolution(clip.resolution)
        if not parsed.matched:
            logger.debug(
                "Skipping clip with unknown resolution: %s (%s)",
                clip.name,
                clip.resolution,
            )
            continue
        resolution = parsed.value
        if correct_par:
            resolution = resolution.par_corrected(clip.par)
        groups.setdefault(resolution.label, []).append(clip)
    return groups


def sort_clips(clips: Iterable[ExportClip], method: SortMethod) -> list[ExportClip]:
    """Return clips ordered by a sort method (stable)."""
    clips = list(clips)
    if method is SortMethod.SOURCE_INPOINT:
        return sorted(clips, key=lambda c: c.start_frame)
    if method is SortMethod.SOURCE_NAME:
        return sorted(clips, key=lambda c: (c.name, c.timeline_inpoint))
    if method is SortMethod.TIMELINE_INPOINT:
        return sorted(clips, key=lambda c: c.timeline_inpoint)
    if method is SortMethod.REEL_NAME:
        # Clips with a reel name come first
        return sorted(
            clips,
            key=lambda c: (
                (0, c.reel_name, c.timeline_inpoint)
                if c.reel_name
                else (1, c.name, c.timeline_inpoint)
            ),
        )
    return clips


def plan_export(
    clips: Iterable[ExportClip],
    options: ExportOptions | None = None,
) -> list[ExportGroup]:
    """Plan export timelines, one per resolution group.

    PAR and half-resolution handling is decided from the first clip of
    each group.

    Args:
        clips: Candidate clips from the base timelines.
        options: Grouping, resolution and ordering options.

    Returns:
        ExportGroup list in first-seen resolution order.
    """
    options = options or ExportOptions()
    groups = group_by_resolution(
        clips,
        correct_par=options.correct_par,
        include_disabled=options.include_disabled,
    )

    planned: list[ExportGroup] = []
    for label, group_clips in groups.items():
        sample = group_clips[0]
        resolution = parse_resolution(label).value
        par_corrected = (
            options.correct_par and _usable_par(sample.par) and sample.par != 1.0
        )
        decision = decide_half_resolution(
            resolution, options.half_resolution, options.keep_source_if_small
        )
        group = ExportGroup(
            resolution=resolution,
            target=decision.resolution,
            timeline_name=export_timeline_name(label, par_corrected, decision.apply),
            original_resolution=sample.resolution,
            par=sample.par,
            par_corrected=par_corrected,
            half_applied=decision.apply,
            reason=decision.reason,
            clips=sort_clips(group_clips, options.sort_method),
        )
        logger.info(
            "Planned %s: %d clips at %s",
            group.timeline_name,
            len(group.clips),
            group.target,
            extra={"timeline": group.timeline_name, "clip_count": len(group.clips)},
        )
        planned.append(group)
    return planned
