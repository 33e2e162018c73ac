"""Tests for version marker and shot token detection."""

import pytest

from reelkit.naming import (
    DEFAULT_SHOT_RULES,
    ShotMatch,
    ShotRule,
    VersionedAssetName,
    choose_version_name,
    detect_shot,
    detect_version_number,
    parse_versioned_asset,
)


class TestDetectVersionNumber:
    """Tests for detect_version_number."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/show/SEQ01/SH010/comp/SH010_comp_v003.exr", 3),
            ("shot_V012.mov", 12),
            ("/renders/comp_v002/frame.exr", 2),
            ("name_v003", 3),
            ("C:\\renders\\comp_v007\\frame.exr", 7),
        ],
    )
    def test_detects_marker(self, path: str, expected: int) -> None:
        """Should find _v### before an extension, separator or end."""
        outcome = detect_version_number(path)

        assert outcome.matched
        assert outcome.value == expected

    def test_last_marker_wins(self) -> None:
        """Should report the file's version inside a versioned directory."""
        assert detect_version_number("/comp_v001/comp_v004.exr").value == 4

    @pytest.mark.parametrize(
        "path",
        ["shot_v12.mov", "shot_v0012.mov", "shot_v003_final.mov", "plate.exr"],
    )
    def test_unmatched(self, path: str) -> None:
        """Should return Unmatched(0) without a 3-digit marker."""
        outcome = detect_version_number(path)

        assert not outcome.matched
        assert outcome.value == 0


class TestDetectShot:
    """Tests for detect_shot."""

    def test_sequence_and_shot(self) -> None:
        """Should detect SEQ/SH tokens in the file name."""
        outcome = detect_shot("/proj/SEQ01_SH010/comp/SEQ01_SH010_comp_v003.exr")

        assert outcome.matched
        assert outcome.value == ShotMatch(scene="SEQ01", shot="SH010")
        assert outcome.rule == "sequence_shot"

    def test_shot_from_parent_directory(self) -> None:
        """Should fall back to directories, nearest first."""
        outcome = detect_shot("/proj/SH020/plates/plate_v001.exr")

        assert outcome.value == ShotMatch(shot="SH020")
        assert outcome.rule == "shot"

    def test_take(self) -> None:
        """Should capture an optional take number."""
        outcome = detect_shot("SH030_T2_v001.mov")

        assert outcome.value.shot == "SH030"
        assert outcome.value.take == "2"

    def test_case_insensitive(self) -> None:
        """Should match lower-case scene and shot tokens."""
        outcome = detect_shot("sc01_sh0010_L1")

        assert outcome.value == ShotMatch(scene="sc01", shot="sh0010")
        assert outcome.rule == "scene_shot"

    def test_requires_token_boundary(self) -> None:
        """Should not match SH inside a longer word."""
        assert not detect_shot("FLASH001.mov").matched

    def test_rules_take_precedence_over_components(self) -> None:
        """Should try each rule on every component before the next rule."""
        outcome = detect_shot("/proj/SEQ01_SH010/SH020_v001.exr")

        assert outcome.value == ShotMatch(scene="SEQ01", shot="SH010")
        assert outcome.rule == "sequence_shot"

    def test_custom_rules(self) -> None:
        """Should use configured rules instead of the defaults."""
        rules = [ShotRule.compile("episode", r"(?P<scene>EP\d{2})_(?P<shot>\d{3})")]
        outcome = detect_shot("EP01_010_v001.mov", rules)

        assert outcome.value == ShotMatch(scene="EP01", shot="010")
        assert outcome.rule == "episode"

    def test_unmatched(self) -> None:
        """Should return Unmatched(None) without shot tokens."""
        outcome = detect_shot("/media/interview.mov")

        assert not outcome.matched
        assert outcome.value is None

    def test_empty_path(self) -> None:
        """Should return Unmatched for an empty path."""
        assert not detect_shot("").matched

    def test_default_rule_names(self) -> None:
        """Should order default rules from most to least specific."""
        assert [r.name for r in DEFAULT_SHOT_RULES] == [
            "sequence_shot",
            "scene_shot",
            "shot",
        ]


class TestShotMatch:
    """Tests for ShotMatch."""

    def test_as_dict_omits_missing(self) -> None:
        """Should only include identifiers that were found."""
        assert ShotMatch(shot="SH010").as_dict() == {"shot": "SH010"}
        assert ShotMatch("SEQ01", "SH010", "3").as_dict() == {
            "scene": "SEQ01",
            "shot": "SH010",
            "take": "3",
        }


class TestParseVersionedAsset:
    """Tests for parse_versioned_asset."""

    def test_parses_full_path(self) -> None:
        """Should split base name, version, extension and shot."""
        outcome = parse_versioned_asset(
            "/show/SEQ01_SH010/SEQ01_SH010_comp_v003.exr"
        )

        assert outcome.matched
        asset = outcome.value
        assert asset.base_name == "SEQ01_SH010_comp"
        assert asset.version_number == 3
        assert asset.extension == "exr"
        assert asset.scene_name == "SEQ01"
        assert asset.shot_id == "SH010"
        assert outcome.rule == "sequence_shot"

    def test_renders_next_version(self) -> None:
        """Should render the incremented version with the same extension."""
        asset = parse_versioned_asset("SEQ01_SH010_comp_v003.exr").value

        assert asset.render() == "SEQ01_SH010_comp_v003.exr"
        assert asset.next_version().render() == "SEQ01_SH010_comp_v004.exr"

    def test_last_marker_is_the_version(self) -> None:
        """Should keep earlier markers in the base name."""
        asset = parse_versioned_asset("a_v001_b_v002.exr").value

        assert asset.base_name == "a_v001_b"
        assert asset.version_number == 2

    def test_without_extension(self) -> None:
        """Should parse names without an extension."""
        asset = parse_versioned_asset("comp_v010").value

        assert asset.extension is None
        assert asset.render() == "comp_v010"

    def test_unmatched(self) -> None:
        """Should return Unmatched(None) without a version marker."""
        outcome = parse_versioned_asset("/plates/plate.exr")

        assert not outcome.matched
        assert outcome.value is None


class TestVersionedAssetName:
    """Tests for VersionedAssetName."""

    def test_version_label_is_padded(self) -> None:
        """Should pad the version to three digits."""
        assert VersionedAssetName("comp", 7).version_label == "v007"

    def test_render_with_other_extension(self) -> None:
        """Should render with an explicit extension."""
        name = VersionedAssetName("comp", 12, extension="exr")
        assert name.render("mov") == "comp_v012.mov"

    def test_with_version(self) -> None:
        """Should return a copy with another version number."""
        name = VersionedAssetName("comp", 1, shot_id="SH010")
        bumped = name.with_version(5)

        assert bumped.version_number == 5
        assert bumped.shot_id == "SH010"
        assert name.version_number == 1


class TestChooseVersionName:
    """Tests for choose_version_name."""

    def test_prefers_current_version(self) -> None:
        """Should use a custom current version name first."""
        assert choose_version_name("grade_a", ["grade_b"]) == "grade_a"

    def test_default_version_ignored(self) -> None:
        """Should skip 'Version 1' and use the first custom list entry."""
        assert choose_version_name("Version 1", ["Version 1", "grade_b"]) == "grade_b"

    def test_falls_back_to_clip_name(self) -> None:
        """Should use a timeline clip name that differs from the media name."""
        assert (
            choose_version_name(None, None, "sc01_sh0010", "A001C005.mov")
            == "sc01_sh0010"
        )

    def test_clip_name_equal_to_media_name(self) -> None:
        """Should return None when the clip still has its media name."""
        assert choose_version_name(None, None, "A001C005.mov", "A001C005.mov") is None

    def test_nothing_custom(self) -> None:
        """Should return None when no custom name exists."""
        assert choose_version_name("", [], "", "") is None
