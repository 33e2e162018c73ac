"""Tests for validation error formatting."""

import pytest
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reelkit.validation import format_validation_error


class Media(BaseModel):
    model_config = ConfigDict(extra="forbid")

    par: float = Field(default=1.0, gt=0)


class Document(BaseModel):
    model_config = ConfigDict(extra="forbid")

    media: list[Media] = Field(default_factory=list)


def validation_error(data: dict) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        Document.model_validate(data)
    return exc_info.value


class TestFormatValidationError:
    """Tests for format_validation_error."""

    def test_prefixes_subject_and_location(self) -> None:
        """Should name the subject and the dotted field location."""
        error = validation_error({"media": [{"par": -1}]})
        message = format_validation_error(error, "Timeline")

        assert message.startswith("Timeline validation failed: media.0.par: ")
        assert "greater than 0" in message

    def test_subject_is_configurable(self) -> None:
        """Should use the given subject in the prefix."""
        error = validation_error({"unknown": 1})
        message = format_validation_error(error, "Config")

        assert message.startswith("Config validation failed: unknown: ")

    def test_reports_first_error_only(self) -> None:
        """Should report only the first of several errors."""
        error = validation_error({"media": [{"par": -1}, {"par": -2}]})
        message = format_validation_error(error, "Timeline")

        assert "media.0.par" in message
        assert "media.1.par" not in message
