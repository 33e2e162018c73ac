"""Batch clip renaming.

Runs a name transform over a collection of renamable items (media pool
clips, timeline items, or anything exposing get/set name). Each distinct
name is processed once, unchanged names are left alone, and every rename
is verified by reading the name back, since editing hosts may silently
refuse a rename.

Example usage:
    summary = batch_rename(bin_clips, extract_reel_clip)
    logger.info("Renamed %d clips", summary.renamed_count)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Renamable(Protocol):
    """An item whose name can be read and written."""

    def get_name(self) -> str: ...

    def set_name(self, name: str) -> object: ...


class RenameStatus(Enum):
    """Result of renaming one item."""

    RENAMED = "renamed"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"  # Duplicate of an already processed name
    FAILED = "failed"


@dataclass(frozen=True)
class RenameResult:
    """Outcome for one item."""

    old_name: str
    new_name: str
    status: RenameStatus
    error: str | None = None


@dataclass
class RenameSummary:
    """Outcome of a batch rename."""

    results: list[RenameResult] = field(default_factory=list)

    def _count(self, status: RenameStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def renamed_count(self) -> int:
        return self._count(RenameStatus.RENAMED)

    @property
    def unchanged_count(self) -> int:
        return self._count(RenameStatus.UNCHANGED)

    @property
    def skipped_count(self) -> int:
        return self._count(RenameStatus.SKIPPED)

    @property
    def failed_count(self) -> int:
        return self._count(RenameStatus.FAILED)

    def as_dict(self) -> dict[str, object]:
        """JSON-friendly representation."""
        return {
            "renamed": self.renamed_count,
            "unchanged": self.unchanged_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "results": [
                {
                    "old_name": r.old_name,
                    "new_name": r.new_name,
                    "status": r.status.value,
                    **({"error": r.error} if r.error else {}),
                }
                for r in self.results
            ],
        }


def _log_fields(old_name: str, new_name: str, status: RenameStatus) -> dict[str, str]:
    return {"old_name": old_name, "new_name": new_name, "status": status.value}


def _rename_one(item: Renamable, current: str, new_name: str) -> RenameResult:
    try:
        item.set_name(new_name)
        verified = item.get_name()
    except Exception as e:
        logger.warning(
            "Rename failed for %s: %s",
            current,
            e,
            extra=_log_fields(current, new_name, RenameStatus.FAILED),
        )
        return RenameResult(current, new_name, RenameStatus.FAILED, error=str(e))

    if verified != new_name:
        logger.warning(
            "Rename may have failed for: %s",
            current,
            extra=_log_fields(current, new_name, RenameStatus.FAILED),
        )
        return RenameResult(
            current,
            new_name,
            RenameStatus.FAILED,
            error=f"name reads back as {verified!r}",
        )

    logger.info(
        "Renamed: %s -> %s",
        current,
        new_name,
        extra=_log_fields(current, new_name, RenameStatus.RENAMED),
    )
    return RenameResult(current, new_name, RenameStatus.RENAMED)


def batch_rename(
    items: Iterable[Renamable],
    transform: Callable[[str], str],
    *,
    dry_run: bool = False,
) -> RenameSummary:
    """Rename items with a name transform.

    Args:
        items: Items to rename.
        transform: Function computing the new name from the current one
            (e.g. extract_reel_clip).
        dry_run: If True, compute results without calling set_name.

    Returns:
        RenameSummary with one result per item.
    """
    summary = RenameSummary()
    seen: set[str] = set()

    for item in items:
        current = item.get_name()
        if current in seen:
            logger.debug(
                "Skipping already processed name: %s",
                current,
                extra=_log_fields(current, current, RenameStatus.SKIPPED),
            )
            summary.results.append(
                RenameResult(current, current, RenameStatus.SKIPPED)
            )
            continue
        seen.add(current)

        new_name = transform(current)
        if new_name == current:
            logger.debug(
                "No change needed for: %s",
                current,
                extra=_log_fields(current, new_name, RenameStatus.UNCHANGED),
            )
            summary.results.append(
                RenameResult(current, new_name, RenameStatus.UNCHANGED)
            )
            continue

        if dry_run:
            summary.results.append(
                RenameResult(current, new_name, RenameStatus.RENAMED)
            )
            continue

        summary.results.append(_rename_one(item, current, new_name))

    logger.info(
        "Rename complete: %d renamed, %d unchanged, %d skipped, %d failed",
        summary.renamed_count,
        summary.unchanged_count,
        summary.skipped_count,
        summary.failed_count,
        extra={
            "renamed": summary.renamed_count,
            "skipped": summary.skipped_count,
            "failed": summary.failed_count,
        },
    )
    return summary
