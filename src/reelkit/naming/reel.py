"""Camera reel and clip code extraction.

Camera originals carry a reel code (letter A-D plus a 3-digit magazine
number) and a clip code ('C' plus 3 digits) somewhere in their file name:

    A001_10060927_C005.mov              -> A001C005
    A_0001C006_250116_101243_p1DTJ.mov  -> A001C006
    A001C003.mov                        -> A001C003

Rules are evaluated in table order and the first match wins. Four-digit reel
numbers keep their last three digits only.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from reelkit.naming.outcome import Matched, Outcome, Unmatched

# Extension is everything after the last dot, provided text precedes it
_EXTENSION_PATTERN = re.compile(r"^(.+)\..+\Z", re.DOTALL)

_CANONICAL_PATTERN = re.compile(r"^([ABCD])(\d{3})C(\d{3})\Z", re.ASCII)


@dataclass(frozen=True)
class ReelClipId:
    """Structured reel/clip identifier.

    Rendering always uses 3-digit reel and clip numbers.
    """

    reel_letter: str
    reel_number: int
    clip_number: int

    def __str__(self) -> str:
        return f"{self.reel_letter}{self.reel_number:03d}C{self.clip_number:03d}"

    @property
    def reel(self) -> str:
        """Reel code, e.g. 'A001'."""
        return f"{self.reel_letter}{self.reel_number:03d}"

    @property
    def clip(self) -> str:
        """Clip code, e.g. 'C005'."""
        return f"C{self.clip_number:03d}"


@dataclass(frozen=True)
class ReelRule:
    """One entry of the reel/clip rule table."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], str]

    def apply(self, name: str) -> str | None:
        """Return the formatted reel/clip code, or None if the rule misses."""
        match = self.pattern.search(name)
        if match is None:
            return None
        return self.build(match)


def _join_reel_and_clip(match: re.Match[str]) -> str:
    return match.group(1) + match.group(2)


def _truncate_four_digit_reel(match: re.Match[str]) -> str:
    # A_0001C006 -> A001C006: the leading digit is dropped, not rounded
    return match.group(1) + match.group(2)[-3:] + match.group(3)


REEL_CLIP_RULES: tuple[ReelRule, ...] = (
    # A001_10060927_C005: reel, anything, clip
    ReelRule(
        "underscore_separated",
        re.compile(r"([ABCD]\d{3})_.*(C\d{3})", re.ASCII | re.DOTALL),
        _join_reel_and_clip,
    ),
    # A_0001C006: letter, 4-digit reel, clip
    ReelRule(
        "four_digit_reel",
        re.compile(r"([ABCD])_(\d{4})(C\d{3})", re.ASCII),
        _truncate_four_digit_reel,
    ),
    # A001C003: already canonical
    ReelRule(
        "canonical",
        re.compile(r"([ABCD]\d{3})(C\d{3})", re.ASCII),
        _join_reel_and_clip,
    ),
)


def _drop_extension(name: str) -> str:
    match = _EXTENSION_PATTERN.match(name)
    return match.group(1) if match else name


def match_reel_clip(
    name: str,
    rules: tuple[ReelRule, ...] = REEL_CLIP_RULES,
) -> Outcome[str]:
    """Extract the reel/clip code from a clip or file name.

    Args:
        name: Raw clip or file name.
        rules: Ordered rule table; the first rule that matches wins.

    Returns:
        Matched with the reel/clip code and the rule name, or Unmatched
        carrying the name with its extension removed.
    """
    stem = _drop_extension(name)
    for rule in rules:
        code = rule.apply(stem)
        if code is not None:
            return Matched(code, rule=rule.name)
    return Unmatched(stem)


def extract_reel_clip(name: str) -> str:
    """Return the reel/clip code of a name, or the name without extension.

    Matched codes are stable under repeated calls. Unmatched names lose only
    their last extension per call, so a multi-dot name like "archive.tar.gz"
    becomes "archive.tar" and then "archive" when transformed twice.

    Example:
        >>> extract_reel_clip("A001_10060927_C005.mov")
        'A001C005'
        >>> extract_reel_clip("randomfile.txt")
        'randomfile'
    """
    return match_reel_clip(name).value


def parse_reel_clip_id(name: str) -> ReelClipId | None:
    """Parse a name into a structured ReelClipId.

    Returns:
        ReelClipId, or None when no reel/clip rule matches.
    """
    outcome = match_reel_clip(name)
    if not outcome.matched:
        return None
    match = _CANONICAL_PATTERN.match(outcome.value)
    if match is None:
        return None
    return ReelClipId(
        reel_letter=match.group(1),
        reel_number=int(match.group(2)),
        clip_number=int(match.group(3)),
    )
