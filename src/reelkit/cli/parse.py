"""Parsing commands: timecode, version."""

from __future__ import annotations

from typing import Any

import click

from reelkit.cli.output import print_json, warning_output
from reelkit.naming import (
    detect_shot,
    detect_version_number,
    parse_timecode,
    parse_timecode_to_frame,
    parse_versioned_asset,
)
from reelkit.naming.timecode import DEFAULT_FRAME_RATE, nominal_frame_rate


@click.command("timecode")
@click.argument("timecode")
@click.option(
    "--fps",
    default=str(DEFAULT_FRAME_RATE),
    show_default=True,
    help="Timeline frame rate (fractional rates use the nominal rate).",
)
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
def timecode_command(timecode: str, fps: str, json_flag: bool) -> None:
    """Convert an HH:MM:SS:FF TIMECODE to a frame number.

    Unrecognized timecode converts to frame 0.
    """
    frame = parse_timecode_to_frame(timecode, fps)
    recognized = parse_timecode(timecode).matched
    rate = nominal_frame_rate(fps)

    if not recognized:
        warning_output(f"Unrecognized timecode: {timecode}", json_flag)
    if rate is None:
        warning_output(f"Invalid frame rate: {fps}", json_flag)

    if json_flag:
        print_json(
            {
                "timecode": timecode,
                "frame_rate": rate,
                "frame": frame,
                "matched": recognized and rate is not None,
            }
        )
        return
    click.echo(str(frame))


def _describe_path(path: str, rules) -> dict[str, Any]:
    entry: dict[str, Any] = {"path": path}
    asset = parse_versioned_asset(path, rules)
    if asset.matched:
        name = asset.value
        entry.update(
            base_name=name.base_name,
            version=name.version_number,
            next_version=name.next_version().render(),
        )
    else:
        version = detect_version_number(path)
        entry["version"] = version.value if version.matched else None

    shot = detect_shot(path, rules)
    if shot.matched:
        entry.update(shot.value.as_dict())
        entry["rule"] = shot.rule
    return entry


@click.command("version")
@click.argument("paths", nargs=-1, required=True)
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
@click.pass_context
def version_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    json_flag: bool,
) -> None:
    """Detect version numbers and scene/shot/take in asset PATHS."""
    rules = ctx.obj["config"].shot_rules
    entries = [_describe_path(path, rules) for path in paths]

    if json_flag:
        print_json(entries)
        return
    for entry in entries:
        fields = [
            f"{key}={entry[key]}"
            for key in ("base_name", "version", "scene", "shot", "take", "next_version")
            if entry.get(key) is not None
        ]
        click.echo(f"{entry['path']}: {', '.join(fields) if fields else 'no match'}")
