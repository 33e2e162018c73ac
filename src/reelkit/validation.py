"""Shared helpers for Pydantic-validated input files."""

from __future__ import annotations

from pydantic import ValidationError


def format_validation_error(error: ValidationError, subject: str) -> str:
    """Format a Pydantic validation error into a user-friendly message.

    Only the first error is reported, prefixed with its field location.

    Args:
        error: Validation error raised by ``model_validate``.
        subject: What was being validated, e.g. "Config" or "Timeline".

    Returns:
        Message such as "Timeline validation failed: clips.0.track: ...".
    """
    prefix = f"{subject} validation failed"
    errors = error.errors()
    if not errors:
        return f"{prefix}: {error}"
    first_error = errors[0]
    loc = ".".join(str(x) for x in first_error.get("loc", []))
    msg = first_error.get("msg", str(error))
    return f"{prefix}: {loc}: {msg}" if loc else f"{prefix}: {msg}"
