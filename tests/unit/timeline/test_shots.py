"""Tests for shot rename planning."""

import logging

import pytest

from reelkit.timeline import (
    ShotRename,
    ShotSettings,
    TimelineClip,
    TrackType,
    clips_overlap,
    find_start_index,
    plan_audio_renames,
    plan_shot_renames,
    plan_video_renames,
)


def video(name: str, start: int, end: int, track: int = 1, enabled: bool = True):
    return TimelineClip(name, start, end, track, TrackType.VIDEO, enabled)


def audio(name: str, start: int, end: int, track: int = 1):
    return TimelineClip(name, start, end, track, TrackType.AUDIO)


@pytest.fixture
def clips() -> list[TimelineClip]:
    """Three V1 shots, one stacked layer on the first and two audio tracks."""
    return [
        video("c3", 200, 300),
        video("c1", 0, 100),
        video("c2", 100, 200),
        video("l1", 0, 100, track=2),
        audio("a1", 0, 100, track=1),
        audio("a2", 0, 100, track=2),
        audio("a3", 100, 200, track=1),
    ]


def names(renames: list[ShotRename]) -> list[tuple[str, str]]:
    return [(r.clip.name, r.new_name) for r in renames]


class TestShotSettings:
    """Tests for ShotSettings validation and naming."""

    def test_defaults(self) -> None:
        """Should default to sc01_sh#### numbered from 10 by 10."""
        settings = ShotSettings()

        assert settings.base_name(10) == "sc01_sh0010"
        assert settings.base_name(20) == "sc01_sh0020"

    def test_empty_scene(self) -> None:
        """Should omit the scene prefix when the scene is empty."""
        assert ShotSettings(scene="").base_name(10) == "sh0010"

    def test_pattern_requires_placeholder(self) -> None:
        """Should reject patterns without '#'."""
        with pytest.raises(ValueError, match="at least one '#'"):
            ShotSettings(pattern="shot")

    def test_requires_track_selection(self) -> None:
        """Should reject settings that process no track type."""
        with pytest.raises(ValueError, match="at least one track type"):
            ShotSettings(video=False, audio=False)


class TestPlanVideoRenames:
    """Tests for plan_video_renames."""

    def test_numbers_shots_and_layers(self, clips) -> None:
        """Should number V1 clips by start and suffix stacked layers."""
        renames = plan_video_renames(clips, ShotSettings())

        assert names(renames) == [
            ("c1", "sc01_sh0010_L1"),
            ("l1", "sc01_sh0010_L2"),
            ("c2", "sc01_sh0020"),
            ("c3", "sc01_sh0030"),
        ]

    def test_disabled_v1_clip_does_not_consume_number(self) -> None:
        """Should skip disabled V1 clips without advancing the counter."""
        clips = [
            video("c1", 0, 10),
            video("c2", 10, 20, enabled=False),
            video("c3", 20, 30),
        ]
        renames = plan_video_renames(clips, ShotSettings())

        assert names(renames) == [("c1", "sc01_sh0010"), ("c3", "sc01_sh0020")]

    def test_disabled_layer_not_stacked(self) -> None:
        """Should ignore disabled clips on upper tracks."""
        clips = [video("c1", 0, 10), video("l1", 0, 10, track=2, enabled=False)]

        assert names(plan_video_renames(clips, ShotSettings())) == [
            ("c1", "sc01_sh0010")
        ]

    def test_layers_ordered_by_track(self) -> None:
        """Should assign layer numbers in track order."""
        clips = [
            video("c1", 0, 10),
            video("v3", 0, 10, track=3),
            video("v2", 5, 10, track=2),
        ]
        renames = plan_video_renames(clips, ShotSettings(suffix_pattern="_L##"))

        assert names(renames) == [
            ("c1", "sc01_sh0010_L01"),
            ("v2", "sc01_sh0010_L02"),
            ("v3", "sc01_sh0010_L03"),
        ]

    def test_custom_numbering(self) -> None:
        """Should honour start, increment and pattern."""
        clips = [video("c1", 0, 10), video("c2", 10, 20)]
        settings = ShotSettings(scene="", pattern="shot_###", start=100, increment=5)

        assert [r.new_name for r in plan_video_renames(clips, settings)] == [
            "shot_100",
            "shot_105",
        ]

    def test_start_index(self, clips) -> None:
        """Should restart numbering at the start index."""
        renames = plan_video_renames(clips, ShotSettings(), start_index=1)

        assert names(renames) == [("c2", "sc01_sh0010"), ("c3", "sc01_sh0020")]


class TestPlanAudioRenames:
    """Tests for plan_audio_renames."""

    def test_suffix_only_for_multiple_clips(self, clips) -> None:
        """Should suffix audio clips only when several overlap a shot."""
        renames = plan_audio_renames(clips, ShotSettings(audio=True))

        assert names(renames) == [
            ("a1", "sc01_sh0010_L1"),
            ("a2", "sc01_sh0010_L2"),
            ("a3", "sc01_sh0020"),
        ]


class TestFindStartIndex:
    """Tests for find_start_index."""

    def test_clip_under_playhead(self, clips) -> None:
        """Should return the index of the V1 clip under the playhead."""
        # 00:00:04:10 at 25 fps is frame 110
        assert find_start_index(clips, "00:00:04:10", 25) == 1

    def test_last_frame_of_clip(self, clips) -> None:
        """Should include the clip's last frame."""
        assert find_start_index(clips, "00:00:03:24", 25) == 0

    def test_beyond_timeline(self, clips) -> None:
        """Should return 0 when no V1 clip is under the playhead."""
        assert find_start_index(clips, "00:01:00:00", 25) == 0

    @pytest.mark.parametrize("frame_rate", [float("inf"), "1e400", float("nan")])
    def test_non_finite_frame_rate(self, clips, frame_rate) -> None:
        """Should fall back to the first clip instead of raising."""
        assert find_start_index(clips, "00:00:04:10", frame_rate) == 0


class TestPlanShotRenames:
    """Tests for plan_shot_renames."""

    def test_video_only_by_default(self, clips) -> None:
        """Should plan video renames only with default settings."""
        plan = plan_shot_renames(clips, ShotSettings())

        assert plan.start_index == 0
        assert plan.audio == []
        assert len(plan.renames) == 4

    def test_video_and_audio(self, clips) -> None:
        """Should list video renames before audio renames."""
        plan = plan_shot_renames(clips, ShotSettings(audio=True))

        assert [r.clip.track_type for r in plan.renames] == [TrackType.VIDEO] * 4 + [
            TrackType.AUDIO
        ] * 3

    def test_from_playhead(self, clips, caplog) -> None:
        """Should start at the playhead clip when requested."""
        with caplog.at_level(logging.INFO, logger="reelkit.timeline.shots"):
            plan = plan_shot_renames(
                clips, ShotSettings(from_playhead=True), playhead="00:00:04:10"
            )

        assert plan.start_index == 1
        assert names(plan.video)[0] == ("c2", "sc01_sh0010")
        assert "Starting from playhead" in caplog.text

    def test_from_playhead_with_infinite_frame_rate(self, clips) -> None:
        """Should start at the first clip when the frame rate is unusable."""
        plan = plan_shot_renames(
            clips,
            ShotSettings(from_playhead=True),
            playhead="00:00:04:10",
            frame_rate=float("inf"),
        )

        assert plan.start_index == 0
        assert names(plan.video)[0] == ("c1", "sc01_sh0010_L1")

    def test_playhead_ignored_without_flag(self, clips) -> None:
        """Should start at the first clip unless from_playhead is set."""
        plan = plan_shot_renames(clips, ShotSettings(), playhead="00:00:04:10")
        assert plan.start_index == 0


class TestShotRename:
    """Tests for ShotRename."""

    def test_describe(self) -> None:
        """Should render a preview line with the track label."""
        rename = ShotRename(video("c1", 0, 10, track=2), "sc01_sh0010_L2")
        assert rename.describe() == "sc01_sh0010_L2 (video track 2)"

    def test_changed(self) -> None:
        """Should report whether the name differs."""
        assert ShotRename(video("a", 0, 1), "b").changed
        assert not ShotRename(video("a", 0, 1), "a").changed


class TestTimelineClip:
    """Tests for TimelineClip."""

    def test_adjacent_clips_do_not_overlap(self) -> None:
        """Should treat end as exclusive."""
        assert not clips_overlap(video("a", 0, 100), video("b", 100, 200))
        assert clips_overlap(video("a", 0, 100), video("b", 99, 200))

    def test_rejects_inverted_range(self) -> None:
        """Should reject clips ending before they start."""
        with pytest.raises(ValueError, match="must not be before start"):
            video("a", 10, 5)

    def test_rejects_track_zero(self) -> None:
        """Should reject track numbers below 1."""
        with pytest.raises(ValueError, match="track must be >= 1"):
            video("a", 0, 5, track=0)
