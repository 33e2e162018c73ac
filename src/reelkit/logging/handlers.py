"""Log formatters for reelkit.

Rename, matching and planning code attaches structured fields to its log
records via ``extra=``. The JSON formatter lifts those fields to the top
level of each entry so batch runs can be filtered with tools like ``jq``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Fields reelkit passes through ``extra=``, in output order.
RECORD_FIELDS: tuple[str, ...] = (
    "old_name",
    "new_name",
    "status",
    "rule",
    "matched",
    "timeline",
    "clip_count",
    "playhead",
    "start_index",
    "renamed",
    "skipped",
    "failed",
)


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the reelkit fields present on a log record."""
    return {
        field: getattr(record, field)
        for field in RECORD_FIELDS
        if hasattr(record, field)
    }


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Every entry carries ``timestamp`` (ISO-8601 UTC), ``level``,
    ``logger`` and ``message``. Any of ``RECORD_FIELDS`` set on the record
    follow at the top level, then ``exception`` when exc_info is set.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(record_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain text formatter that appends reelkit fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{line} [{pairs}]"
