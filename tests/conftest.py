"""Shared test fixtures for reelkit."""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from reelkit.config import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path: Path):
    """Point config discovery at a missing file and clear env overrides."""
    monkeypatch.setenv("REELKIT_CONFIG_PATH", str(tmp_path / "missing-config.yaml"))
    for var in ("REELKIT_LOG_LEVEL", "REELKIT_LOG_FORMAT", "REELKIT_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def timeline_data() -> dict:
    """Timeline description with stacked video, audio and export media."""
    return {
        "name": "Edit_v01",
        "frame_rate": 25,
        "playhead": "00:00:04:10",
        "clips": [
            {"name": "A001C005", "start": 0, "end": 100, "track": 1},
            {"name": "A001C006", "start": 100, "end": 200, "track": 1},
            {"name": "B002C001", "start": 200, "end": 300, "track": 1},
            {"name": "GFX_title", "start": 0, "end": 100, "track": 2},
            {"name": "A001C005", "start": 0, "end": 100, "type": "audio"},
            {"name": "boom", "start": 0, "end": 100, "track": 2, "type": "audio"},
        ],
        "media": [
            {
                "name": "A001C005.mov",
                "resolution": "3840x2160",
                "start_frame": 500,
                "timeline_inpoint": 0,
                "reel_name": "A001",
                "version_name": "sc01_sh0010",
            },
            {
                "name": "B002C001.mov",
                "resolution": "1920x1080",
                "start_frame": 100,
                "timeline_inpoint": 200,
            },
            {
                "name": "A001C006.mov",
                "resolution": "3840x2160",
                "start_frame": 20,
                "timeline_inpoint": 100,
            },
            {"name": "missing.mov", "resolution": "Unknown"},
        ],
    }


@pytest.fixture
def timeline_file(temp_dir: Path, timeline_data: dict) -> Path:
    """Timeline description written to a YAML file."""
    path = temp_dir / "timeline.yaml"
    path.write_text(yaml.safe_dump(timeline_data), encoding="utf-8")
    return path
