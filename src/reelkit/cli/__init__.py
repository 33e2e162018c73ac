"""CLI module for reelkit."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from reelkit.cli.exit_codes import ExitCode
from reelkit.cli.output import error_exit
from reelkit.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _load_config(config_path: Path | None):
    """Load the effective configuration, exiting on config errors."""
    from reelkit.config import get_config

    try:
        return get_config(config_path=config_path)
    except ConfigError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)


def _configure_logging(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the loaded config and CLI options."""
    from reelkit.config import configure_logging_from_cli

    config = ctx.obj["config"]
    try:
        configure_logging_from_cli(
            config.logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except ValueError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)


@click.group()
@click.version_option(package_name="reelkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Config file (default: ~/.reelkit/config.yaml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """reelkit - Clip naming and timeline planning for editorial batch work."""
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = _load_config(config_path)
    _configure_logging(ctx, log_level, log_file, log_json)
    logger.debug("reelkit starting: config=%s", config_path or "default")


# Defer import to avoid circular dependency
def _register_commands():
    from reelkit.cli.names import number_command, reel_command, strip_command
    from reelkit.cli.parse import timecode_command, version_command
    from reelkit.cli.timeline import export_command, shots_command

    main.add_command(reel_command)
    main.add_command(strip_command)
    main.add_command(number_command)
    main.add_command(timecode_command)
    main.add_command(version_command)
    main.add_command(shots_command)
    main.add_command(export_command)


_register_commands()
