"""Numbering templates with '#' placeholders.

A template such as ``sh####`` describes a literal prefix followed by a
zero-padded number whose width is the length of the '#' run:

    sh####  + 10 -> sh0010
    _L#     + 2  -> _L2

Numbers wider than the padding are rendered in full, never truncated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from reelkit.naming.outcome import Matched, Outcome, Unmatched

PLACEHOLDER_RUN = re.compile(r"#+")

_TEMPLATE_PATTERN = re.compile(
    r"^(?P<prefix>.*?)(?P<run>#+)(?P<suffix>.*)\Z", re.DOTALL
)


def format_number(number: int, width: int) -> str:
    """Zero-pad a number to at least ``width`` digits."""
    return f"{number:0{width}d}"


@dataclass(frozen=True)
class NamingPattern:
    """Parsed numbering template.

    Attributes:
        literal_prefix: Text before the placeholder run.
        number_width: Number of '#' characters in the run (>= 1).
        literal_suffix: Text after the placeholder run.
    """

    literal_prefix: str
    number_width: int
    literal_suffix: str = ""

    def __post_init__(self) -> None:
        if self.number_width < 1:
            raise ValueError(f"number_width must be >= 1, got {self.number_width}")

    @property
    def template(self) -> str:
        """The template string this pattern was parsed from."""
        return self.literal_prefix + "#" * self.number_width + self.literal_suffix

    def render(self, number: int) -> str:
        """Render the pattern for a number."""
        return (
            self.literal_prefix
            + format_number(number, self.number_width)
            + self.literal_suffix
        )


def parse_naming_pattern(template: str) -> Outcome[NamingPattern | None]:
    """Parse a '#' template into a NamingPattern.

    Only the first '#' run is the placeholder; anything after it is kept as
    a literal suffix.

    Args:
        template: Template string, e.g. "sh####".

    Returns:
        Matched with the NamingPattern, or Unmatched(None) if the template
        contains no '#'.
    """
    match = _TEMPLATE_PATTERN.match(template)
    if match is None:
        return Unmatched(None)
    return Matched(
        NamingPattern(
            literal_prefix=match.group("prefix"),
            number_width=len(match.group("run")),
            literal_suffix=match.group("suffix"),
        )
    )


def render_numbered_name(pattern: NamingPattern | str, number: int) -> str:
    """Render a numbered name from a pattern.

    Args:
        pattern: NamingPattern, or a template string to parse.
        number: Number to substitute.

    Returns:
        Rendered name. A template string without '#' is returned unchanged.

    Example:
        >>> render_numbered_name(NamingPattern("sh", 4), 10)
        'sh0010'
    """
    if isinstance(pattern, str):
        parsed = parse_naming_pattern(pattern)
        if not parsed.matched:
            return pattern
        pattern = parsed.value
    return pattern.render(number)


def apply_suffix_pattern(pattern: str, layer_index: int) -> str:
    """Render a stacked-layer suffix such as ``_L#``.

    The padding width is the total number of '#' characters in the pattern
    and every '#' run receives the same formatted number.

    Example:
        >>> apply_suffix_pattern("_L#", 12)
        '_L12'
    """
    width = pattern.count("#")
    if width == 0:
        return pattern
    formatted = format_number(layer_index, width)
    return PLACEHOLDER_RUN.sub(lambda _: formatted, pattern)
