"""Name transform commands: reel, strip, number."""

from __future__ import annotations

import logging

import click

from reelkit.cli.exit_codes import ExitCode
from reelkit.cli.output import error_exit, print_json
from reelkit.naming import (
    match_frame_range,
    match_reel_clip,
    parse_naming_pattern,
)
from reelkit.timeline.shots import PATTERN_ERROR

logger = logging.getLogger(__name__)


def read_names(names: tuple[str, ...]) -> list[str]:
    """Resolve name arguments, reading stdin lines for '-' or no names."""
    if not names or names == ("-",):
        stdin = click.get_text_stream("stdin")
        return [line.rstrip("\r\n") for line in stdin if line.strip()]
    return list(names)


def _emit_outcomes(names: list[str], transform, json_flag: bool) -> None:
    results = []
    for name in names:
        outcome = transform(name)
        logger.debug(
            "%s -> %s",
            name,
            outcome.value,
            extra={
                "old_name": name,
                "new_name": outcome.value,
                "rule": outcome.rule,
                "matched": outcome.matched,
            },
        )
        results.append(
            {
                "name": name,
                "result": outcome.value,
                "matched": outcome.matched,
                "rule": outcome.rule,
            }
        )

    if json_flag:
        print_json(results)
        return
    for entry in results:
        suffix = "" if entry["matched"] else " (no match)"
        click.echo(f"{entry['name']} -> {entry['result']}{suffix}")


@click.command("reel")
@click.argument("names", nargs=-1)
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
def reel_command(names: tuple[str, ...], json_flag: bool) -> None:
    """Extract reel/clip codes (A001C005) from clip names.

    Names are read from stdin, one per line, when none are given or NAMES
    is '-'.
    """
    _emit_outcomes(read_names(names), match_reel_clip, json_flag)


@click.command("strip")
@click.argument("names", nargs=-1)
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
def strip_command(names: tuple[str, ...], json_flag: bool) -> None:
    """Remove frame ranges ([1001-1130]) and extensions from clip names."""
    _emit_outcomes(read_names(names), match_frame_range, json_flag)


@click.command("number")
@click.argument("pattern")
@click.argument("numbers", nargs=-1, type=int, required=True)
@click.option("--scene", default="", help="Scene name to prepend (e.g. sc01).")
@click.option("--json", "json_flag", is_flag=True, help="Output as JSON.")
def number_command(
    pattern: str,
    numbers: tuple[int, ...],
    scene: str,
    json_flag: bool,
) -> None:
    """Render numbered names from a '#' PATTERN such as sh####."""
    parsed = parse_naming_pattern(pattern)
    if not parsed.matched:
        error_exit(PATTERN_ERROR, ExitCode.INVALID_PATTERN, json_flag)

    rendered = []
    for number in numbers:
        name = parsed.value.render(number)
        rendered.append(f"{scene}_{name}" if scene else name)

    if json_flag:
        print_json([{"number": n, "name": r} for n, r in zip(numbers, rendered)])
        return
    for name in rendered:
        click.echo(name)
