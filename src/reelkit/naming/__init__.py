"""Filename and metadata pattern engine.

This package provides pure, host-independent string processing used by the
clip renaming workflows:
- outcome: Matched/Unmatched results for every pattern operation
- reel: camera reel and clip code extraction
- frames: frame-range annotation and extension stripping
- patterns: '#' placeholder numbering templates
- timecode: HH:MM:SS:FF parsing
- versions: version marker and shot token detection
"""

from reelkit.naming.frames import (
    match_frame_range,
    strip_extension,
    strip_frame_range_and_extension,
)
from reelkit.naming.outcome import Matched, Outcome, Unmatched
from reelkit.naming.patterns import (
    NamingPattern,
    apply_suffix_pattern,
    format_number,
    parse_naming_pattern,
    render_numbered_name,
)
from reelkit.naming.reel import (
    REEL_CLIP_RULES,
    ReelClipId,
    ReelRule,
    extract_reel_clip,
    match_reel_clip,
    parse_reel_clip_id,
)
from reelkit.naming.timecode import (
    Timecode,
    nominal_frame_rate,
    parse_timecode,
    parse_timecode_to_frame,
)
from reelkit.naming.versions import (
    DEFAULT_SHOT_RULES,
    ShotMatch,
    ShotRule,
    VersionedAssetName,
    choose_version_name,
    detect_shot,
    detect_version_number,
    parse_versioned_asset,
)

__all__ = [
    # outcome
    "Matched",
    "Outcome",
    "Unmatched",
    # reel
    "REEL_CLIP_RULES",
    "ReelClipId",
    "ReelRule",
    "extract_reel_clip",
    "match_reel_clip",
    "parse_reel_clip_id",
    # frames
    "match_frame_range",
    "strip_extension",
    "strip_frame_range_and_extension",
    # patterns
    "NamingPattern",
    "apply_suffix_pattern",
    "format_number",
    "parse_naming_pattern",
    "render_numbered_name",
    # timecode
    "Timecode",
    "nominal_frame_rate",
    "parse_timecode",
    "parse_timecode_to_frame",
    # versions
    "DEFAULT_SHOT_RULES",
    "ShotMatch",
    "ShotRule",
    "VersionedAssetName",
    "choose_version_name",
    "detect_shot",
    "detect_version_number",
    "parse_versioned_asset",
]
