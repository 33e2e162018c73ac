"""Timeline planning over plain clip records.

This package holds the host-independent parts of the timeline workflows:
- models: clip records for shot renaming and resolution export
- shots: shot rename plans, stacked layers and playhead lookup
- export: resolution grouping, sorting and export timeline naming
- loader: YAML timeline descriptions
"""

from reelkit.timeline.export import (
    ExportGroup,
    ExportOptions,
    HalfDecision,
    Resolution,
    SortMethod,
    decide_half_resolution,
    export_timeline_name,
    group_by_resolution,
    parse_resolution,
    plan_export,
    sort_clips,
)
from reelkit.timeline.models import ExportClip, TimelineClip, TrackType
from reelkit.timeline.shots import (
    ShotPlan,
    ShotRename,
    ShotSettings,
    clips_overlap,
    find_start_index,
    plan_audio_renames,
    plan_shot_renames,
    plan_video_renames,
)

__all__ = [
    # models
    "ExportClip",
    "TimelineClip",
    "TrackType",
    # shots
    "ShotPlan",
    "ShotRename",
    "ShotSettings",
    "clips_overlap",
    "find_start_index",
    "plan_audio_renames",
    "plan_shot_renames",
    "plan_video_renames",
    # export
    "ExportGroup",
    "ExportOptions",
    "HalfDecision",
    "Resolution",
    "SortMethod",
    "decide_half_resolution",
    "export_timeline_name",
    "group_by_resolution",
    "parse_resolution",
    "plan_export",
    "sort_clips",
]
