"""Timecode parsing.

Only strict non-drop-frame ``HH:MM:SS:FF`` timecode is recognized. The
frame rate is used as a nominal integer multiplier: fractional rates are
rounded (23.976 -> 24, 29.97 -> 30), which is how non-drop-frame timecode
counts frames. Drop-frame timecode (``;`` separator) is not corrected and
does not parse.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from reelkit.naming.outcome import Matched, Outcome, Unmatched

TIMECODE_PATTERN = re.compile(r"^(\d{2}):(\d{2}):(\d{2}):(\d{2})\Z", re.ASCII)

DEFAULT_FRAME_RATE = 25


@dataclass(frozen=True)
class Timecode:
    """Parsed HH:MM:SS:FF timecode."""

    hours: int
    minutes: int
    seconds: int
    frames: int

    def to_frame(self, frame_rate: int) -> int:
        """Absolute frame number at a nominal integer frame rate."""
        total_seconds = self.hours * 3600 + self.minutes * 60 + self.seconds
        return total_seconds * frame_rate + self.frames

    def __str__(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}:{self.frames:02d}"
        )


def nominal_frame_rate(frame_rate: int | float | str | None) -> int | None:
    """Convert a frame rate setting to its nominal integer rate.

    Args:
        frame_rate: Rate as a number or numeric string (host settings are
            often strings such as "23.976").

    Returns:
        Positive integer rate, or None if the value is not usable
        (non-numeric, non-finite or non-positive).
    """
    if frame_rate is None or isinstance(frame_rate, bool):
        return None
    try:
        value = float(frame_rate)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    nominal = int(round(value))
    return nominal if nominal > 0 else None


def parse_timecode(timecode: str) -> Outcome[Timecode | None]:
    """Parse a strict HH:MM:SS:FF timecode string.

    Returns:
        Matched with the Timecode, or Unmatched(None).
    """
    if not isinstance(timecode, str):
        return Unmatched(None)
    match = TIMECODE_PATTERN.match(timecode.strip())
    if match is None:
        return Unmatched(None)
    hours, minutes, seconds, frames = (int(group) for group in match.groups())
    return Matched(Timecode(hours, minutes, seconds, frames))


def parse_timecode_to_frame(
    timecode: str,
    frame_rate: int | float | str | None = DEFAULT_FRAME_RATE,
) -> int:
    """Convert a timecode to an absolute frame number.

    Computes ``(H*3600 + M*60 + S) * fps + F``.

    Args:
        timecode: Timecode string, e.g. "01:00:10:05".
        frame_rate: Frame rate (nominal integer multiplier).

    Returns:
        Frame number, or 0 if the timecode or frame rate is not parseable.

    Example:
        >>> parse_timecode_to_frame("01:00:10:05", 25)
        90255
    """
    rate = nominal_frame_rate(frame_rate)
    if rate is None:
        return 0
    parsed = parse_timecode(timecode)
    if not parsed.matched:
        return 0
    return parsed.value.to_frame(rate)
