"""Timeline planning commands: shots, export."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from reelkit.cli.exit_codes import ExitCode
from reelkit.cli.output import error_exit, print_json
from reelkit.exceptions import TimelineLoadError
from reelkit.timeline.export import SortMethod, plan_export
from reelkit.timeline.loader import TimelineDocument, load_timeline
from reelkit.timeline.shots import plan_shot_renames


def _load_document(path: Path, json_flag: bool) -> TimelineDocument:
    if not path.exists():
        error_exit(f"File not found: {path}", ExitCode.TARGET_NOT_FOUND, json_flag)
    try:
        return load_timeline(path)
    except TimelineLoadError as e:
        error_exit(str(e), ExitCode.PARSE_ERROR, json_flag)


def _overrides(**options: object) -> dict[str, object]:
    return {key: value for key, value in options.items() if value is not None}


@click.command("shots")
@click.argument("timeline_file", type=click.Path(path_type=Path))
@click.option("--scene", default=None, help="Scene name (empty string for none).")
@click.option("--pattern", default=None, help="Shot pattern, e.g. sh####.")
@click.option("--start", type=int, default=None, help="First shot number.")
@click.option("--increment", type=int, default=None, help="Shot number step.")
@click.option(
    "--suffix", "suffix_pattern", default=None, help="Layer suffix, e.g. _L#."
)
@click.option("--video/--no-video", default=None, help="Rename video tracks.")
@click.option("--audio/--no-audio", default=None, help="Rename audio tracks.")
@click.option(
    "--from-playhead/--from-start",
    "from_playhead",
    default=None,
    help="Start at the clip under the playhead.",
)
@click.option("--playhead", default=None, help="Playhead timecode override.")
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
@click.pass_context
def shots_command(
    ctx: click.Context,
    timeline_file: Path,
    scene: str | None,
    pattern: str | None,
    start: int | None,
    increment: int | None,
    suffix_pattern: str | None,
    video: bool | None,
    audio: bool | None,
    from_playhead: bool | None,
    playhead: str | None,
    json_flag: bool,
) -> None:
    """Preview shot names for the clips in TIMELINE_FILE."""
    document = _load_document(timeline_file, json_flag)

    try:
        settings = replace(
            ctx.obj["config"].shots,
            **_overrides(
                scene=scene,
                pattern=pattern,
                start=start,
                increment=increment,
                suffix_pattern=suffix_pattern,
                video=video,
                audio=audio,
                from_playhead=from_playhead,
            ),
        )
    except ValueError as e:
        error_exit(str(e), ExitCode.INVALID_PATTERN, json_flag)

    plan = plan_shot_renames(
        document.timeline_clips(),
        settings,
        playhead=playhead or document.playhead,
        frame_rate=document.frame_rate,
    )

    if json_flag:
        print_json(
            {
                "start_index": plan.start_index,
                "renames": [
                    {
                        "clip": rename.clip.name,
                        "track_type": rename.clip.track_type.value,
                        "track": rename.clip.track,
                        "new_name": rename.new_name,
                    }
                    for rename in plan.renames
                ],
            }
        )
        return

    if settings.from_playhead and plan.start_index:
        click.echo(f"Starting from clip {plan.start_index + 1}")
        click.echo("")
    for rename in plan.renames:
        click.echo(rename.describe())
    click.echo(f"{len(plan.renames)} clips to rename")


@click.command("export")
@click.argument("timeline_file", type=click.Path(path_type=Path))
@click.option(
    "--correct-par/--no-correct-par",
    default=None,
    help="Correct non-square pixels.",
)
@click.option("--half/--full", "half_resolution", default=None, help="Half resolution.")
@click.option(
    "--keep-source-if-small/--always-half",
    "keep_source_if_small",
    default=None,
    help="Keep source resolution when half height would be under 1080.",
)
@click.option(
    "--include-disabled/--skip-disabled",
    "include_disabled",
    default=None,
    help="Include disabled clips.",
)
@click.option(
    "--sort",
    "sort_method",
    type=click.Choice([m.value for m in SortMethod]),
    default=None,
    help="Clip order inside each export timeline.",
)
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
@click.pass_context
def export_command(
    ctx: click.Context,
    timeline_file: Path,
    correct_par: bool | None,
    half_resolution: bool | None,
    keep_source_if_small: bool | None,
    include_disabled: bool | None,
    sort_method: str | None,
    json_flag: bool,
) -> None:
    """Plan resolution-grouped export timelines for the media in TIMELINE_FILE."""
    document = _load_document(timeline_file, json_flag)

    options = replace(
        ctx.obj["config"].export,
        **_overrides(
            correct_par=correct_par,
            half_resolution=half_resolution,
            keep_source_if_small=keep_source_if_small,
            include_disabled=include_disabled,
            sort_method=SortMethod(sort_method) if sort_method else None,
        ),
    )
    groups = plan_export(document.export_clips(), options)

    if json_flag:
        print_json(
            [
                {
                    "timeline_name": group.timeline_name,
                    "resolution": group.resolution.label,
                    "target": group.target.label,
                    "par_corrected": group.par_corrected,
                    "half": group.half_applied,
                    "clips": [clip.name for clip in group.clips],
                    "version_names": group.version_name_count,
                }
                for group in groups
            ]
        )
        return

    if not groups:
        click.echo("No valid clips found to process.")
        return
    for group in groups:
        click.echo(f"{group.timeline_name}: {len(group.clips)} clips at {group.target}")
        click.echo(f"  {group.reason}")
        for clip in group.clips:
            version = f" [Version: {clip.version_name}]" if clip.version_name else ""
            click.echo(f"  - {clip.name}{version}")
