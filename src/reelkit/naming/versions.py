"""Version marker and shot token detection.

Versioned assets follow the ``<name>_v###.<ext>`` convention (``v`` or
``V``). Scene/shot/take identifiers are found by an ordered list of shot
rules, each a regular expression with optional named groups ``scene``,
``shot`` and ``take``. The rule set is configuration; DEFAULT_SHOT_RULES
covers the usual SEQ/SC/SH layouts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from reelkit.naming.outcome import Matched, Outcome, Unmatched

# _v003 right before an extension, a path separator or the end of the path
VERSION_MARKER_PATTERN = re.compile(r"_[vV](\d{3})(?=[./\\]|\Z)", re.ASCII)

_VERSIONED_FILENAME_PATTERN = re.compile(
    r"^(?P<base>.+?)_[vV](?P<version>\d{3})(?:\.(?P<extension>[A-Za-z0-9]+))?\Z",
    re.ASCII | re.DOTALL,
)

_PATH_SEPARATOR = re.compile(r"[/\\]+")

_EXTENSION_PATTERN = re.compile(r"\.[A-Za-z0-9]+\Z")

# Default color page version name; never treated as a custom name
DEFAULT_VERSION_NAME = "Version 1"


@dataclass(frozen=True)
class ShotRule:
    """Named shot-token rule."""

    name: str
    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, name: str, pattern: str) -> ShotRule:
        """Build a rule from a pattern string (case-insensitive).

        Raises:
            re.error: If the pattern is not a valid regular expression.
        """
        return cls(name=name, pattern=re.compile(pattern, re.IGNORECASE))


@dataclass(frozen=True)
class ShotMatch:
    """Scene/shot/take identifiers found in a path."""

    scene: str | None = None
    shot: str | None = None
    take: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Return only the identifiers that were found."""
        result = {}
        if self.scene:
            result["scene"] = self.scene
        if self.shot:
            result["shot"] = self.shot
        if self.take:
            result["take"] = self.take
        return result


_BOUNDARY = r"(?<![A-Z0-9])"

DEFAULT_SHOT_RULES: tuple[ShotRule, ...] = (
    ShotRule.compile(
        "sequence_shot",
        _BOUNDARY
        + r"(?P<scene>SEQ\d{2,3})_(?P<shot>SH\d{3,4})(?!\d)(?:_T(?P<take>\d+))?",
    ),
    ShotRule.compile(
        "scene_shot",
        _BOUNDARY
        + r"(?P<scene>SC\d{2,3})_(?P<shot>SH\d{3,4})(?!\d)(?:_T(?P<take>\d+))?",
    ),
    ShotRule.compile(
        "shot",
        _BOUNDARY + r"(?P<shot>SH\d{3,4})(?!\d)(?:_T(?P<take>\d+))?",
    ),
)


@dataclass(frozen=True)
class VersionedAssetName:
    """Asset name following the ``<name>_v###.<ext>`` convention."""

    base_name: str
    version_number: int
    scene_name: str | None = None
    shot_id: str | None = None
    extension: str | None = None

    @property
    def version_label(self) -> str:
        """Version marker without separator, e.g. 'v003'."""
        return f"v{self.version_number:03d}"

    def render(self, extension: str | None = None) -> str:
        """Render the file name, optionally with a different extension."""
        ext = extension if extension is not None else self.extension
        name = f"{self.base_name}_{self.version_label}"
        return f"{name}.{ext}" if ext else name

    def with_version(self, version_number: int) -> VersionedAssetName:
        """Copy of this name with another version number."""
        return replace(self, version_number=version_number)

    def next_version(self) -> VersionedAssetName:
        """Copy of this name with the version number incremented."""
        return self.with_version(self.version_number + 1)


def _split_path(path: str) -> list[str]:
    return [part for part in _PATH_SEPARATOR.split(path) if part]


def detect_version_number(path: str) -> Outcome[int]:
    """Find the version number in a path.

    The last marker wins, so a versioned file inside a versioned directory
    reports the file's version.

    Returns:
        Matched with the version number, or Unmatched(0).
    """
    markers = VERSION_MARKER_PATTERN.findall(path)
    if not markers:
        return Unmatched(0)
    return Matched(int(markers[-1]))


def detect_shot(
    path: str,
    rules: tuple[ShotRule, ...] | list[ShotRule] = DEFAULT_SHOT_RULES,
) -> Outcome[ShotMatch | None]:
    """Detect scene/shot/take identifiers in a path.

    Rules are tried in order; for each rule the file stem is searched first,
    then the directories above it, nearest first. The first hit wins.

    Args:
        path: File path or bare file name.
        rules: Ordered shot rules.

    Returns:
        Matched with a ShotMatch and the rule name, or Unmatched(None).
    """
    parts = _split_path(path)
    if not parts:
        return Unmatched(None)
    components = [_EXTENSION_PATTERN.sub("", parts[-1]), *reversed(parts[:-1])]

    for rule in rules:
        for component in components:
            match = rule.pattern.search(component)
            if match is None:
                continue
            groups = match.groupdict()
            return Matched(
                ShotMatch(
                    scene=groups.get("scene"),
                    shot=groups.get("shot"),
                    take=groups.get("take"),
                ),
                rule=rule.name,
            )
    return Unmatched(None)


def parse_versioned_asset(
    path: str,
    rules: tuple[ShotRule, ...] | list[ShotRule] = DEFAULT_SHOT_RULES,
) -> Outcome[VersionedAssetName | None]:
    """Parse a versioned asset path.

    Args:
        path: Path whose file name follows ``<name>_v###[.<ext>]``.
        rules: Shot rules used to fill scene and shot.

    Returns:
        Matched with a VersionedAssetName, or Unmatched(None) when the file
        name carries no version marker.
    """
    parts = _split_path(path)
    if not parts:
        return Unmatched(None)
    match = _VERSIONED_FILENAME_PATTERN.match(parts[-1])
    if match is None:
        return Unmatched(None)

    shot = detect_shot(path, rules)
    shot_match = shot.value if shot.matched else ShotMatch()
    return Matched(
        VersionedAssetName(
            base_name=match.group("base"),
            version_number=int(match.group("version")),
            scene_name=shot_match.scene,
            shot_id=shot_match.shot,
            extension=match.group("extension"),
        ),
        rule=shot.rule,
    )


def _is_custom_version_name(name: str | None) -> bool:
    return bool(name) and name != DEFAULT_VERSION_NAME


def choose_version_name(
    current_version: str | None,
    version_names: list[str] | None = None,
    clip_name: str | None = None,
    media_name: str | None = None,
) -> str | None:
    """Pick the name to carry over when a timeline item is copied.

    Preference order: the current color version name, the first custom
    entry of the version list, then the timeline clip name when it differs
    from its media pool name. The default "Version 1" never counts.

    Returns:
        The chosen name, or None when the item has no custom name.
    """
    if _is_custom_version_name(current_version):
        return current_version
    for name in version_names or []:
        if _is_custom_version_name(name):
            return name
    if clip_name and clip_name != (media_name or ""):
        return clip_name if _is_custom_version_name(clip_name) else None
    return None
