"""Frame-range annotation and extension stripping.

Image sequences are imported with their frame range in the clip name,
e.g. ``clip_name_[1001-1130].exr``. The range is cosmetic and removed
together with the file extension.
"""

from __future__ import annotations

import re

from reelkit.naming.outcome import Matched, Outcome, Unmatched

# _[1001-1130] or .[1001-1130], anywhere in the name
FRAME_RANGE_PATTERN = re.compile(r"[._]\[\d+-\d+\]", re.ASCII)

# Separators left dangling in front of the extension
TRAILING_SEPARATOR_PATTERN = re.compile(r"[._]+(\.[A-Za-z0-9]+)\Z")

EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+\Z")


def strip_extension(name: str) -> str:
    """Remove a trailing ``.ext`` (alphanumeric) from a name."""
    return EXTENSION_PATTERN.sub("", name, count=1)


def strip_frame_range_and_extension(name: str) -> str:
    """Remove frame-range annotations, dangling separators and the extension.

    The range must be removed first: it usually sits directly before the
    extension.

    Args:
        name: Raw clip name.

    Returns:
        Cleaned name. Names without a range still lose their extension.

    Example:
        >>> strip_frame_range_and_extension("clip_name_[1001-1130].exr")
        'clip_name'
    """
    cleaned = FRAME_RANGE_PATTERN.sub("", name)
    cleaned = TRAILING_SEPARATOR_PATTERN.sub(r"\1", cleaned)
    return strip_extension(cleaned)


def match_frame_range(name: str) -> Outcome[str]:
    """Outcome form of strip_frame_range_and_extension.

    Returns:
        Matched with the cleaned name when anything was removed, otherwise
        Unmatched carrying the input.
    """
    cleaned = strip_frame_range_and_extension(name)
    if cleaned == name:
        return Unmatched(name)
    rule = "frame_range" if FRAME_RANGE_PATTERN.search(name) else "extension"
    return Matched(cleaned, rule=rule)
