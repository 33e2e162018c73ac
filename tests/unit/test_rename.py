"""Tests for batch renaming."""

import logging

import pytest

from reelkit.naming import extract_reel_clip
from reelkit.rename import Renamable, RenameStatus, batch_rename


class FakeClip:
    """Renamable item that accepts every rename."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.set_calls = 0

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> bool:
        self.set_calls += 1
        self.name = name
        return True


class RefusingClip(FakeClip):
    """Item whose host silently ignores renames."""

    def set_name(self, name: str) -> bool:
        self.set_calls += 1
        return True


class BrokenClip(FakeClip):
    """Item whose host raises on rename."""

    def set_name(self, name: str) -> bool:
        raise RuntimeError("media offline")


class TestBatchRename:
    """Tests for batch_rename."""

    def test_renames_with_transform(self) -> None:
        """Should rename items to the transformed name."""
        clips = [FakeClip("A001_10060927_C005.mov"), FakeClip("A001C003.mov")]

        summary = batch_rename(clips, extract_reel_clip)

        assert [c.name for c in clips] == ["A001C005", "A001C003"]
        assert summary.renamed_count == 2

    def test_unchanged_names_not_written(self) -> None:
        """Should not call set_name when the name would not change."""
        clip = FakeClip("A001C003")

        summary = batch_rename([clip], extract_reel_clip)

        assert clip.set_calls == 0
        assert summary.results[0].status is RenameStatus.UNCHANGED

    def test_duplicate_names_processed_once(self) -> None:
        """Should skip items whose name was already processed."""
        first, second = FakeClip("A001C003.mov"), FakeClip("A001C003.mov")

        summary = batch_rename([first, second], extract_reel_clip)

        assert first.name == "A001C003"
        assert second.name == "A001C003.mov"
        assert summary.skipped_count == 1

    def test_dry_run(self) -> None:
        """Should compute results without renaming."""
        clip = FakeClip("A001C003.mov")

        summary = batch_rename([clip], extract_reel_clip, dry_run=True)

        assert clip.set_calls == 0
        assert summary.results[0].new_name == "A001C003"
        assert summary.renamed_count == 1

    def test_refused_rename_is_failure(self, caplog) -> None:
        """Should detect renames that do not read back."""
        clip = RefusingClip("A001C003.mov")

        with caplog.at_level(logging.WARNING, logger="reelkit.rename"):
            summary = batch_rename([clip], extract_reel_clip)

        assert summary.failed_count == 1
        assert "may have failed" in caplog.text

    def test_host_error_is_failure(self) -> None:
        """Should record exceptions from the host as failures."""
        summary = batch_rename([BrokenClip("A001C003.mov")], extract_reel_clip)

        result = summary.results[0]
        assert result.status is RenameStatus.FAILED
        assert result.error == "media offline"

    def test_summary_as_dict(self) -> None:
        """Should produce a JSON-friendly summary."""
        summary = batch_rename(
            [FakeClip("A001C003.mov"), FakeClip("A001C004")], extract_reel_clip
        )

        data = summary.as_dict()
        assert data["renamed"] == 1
        assert data["unchanged"] == 1
        assert data["results"][0] == {
            "old_name": "A001C003.mov",
            "new_name": "A001C003",
            "status": "renamed",
        }


@pytest.mark.parametrize("item", [FakeClip("x"), RefusingClip("y")])
def test_fake_clips_are_renamable(item) -> None:
    """Test helpers should satisfy the Renamable protocol."""
    assert isinstance(item, Renamable)
