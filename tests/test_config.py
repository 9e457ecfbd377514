"""Tests for the settings file handling"""

import json
from pathlib import Path

from student_directory.config import Settings


def test_missing_file_returns_defaults(tmp_path: Path):
    """Test that a missing config file gives the default settings"""
    loaded = Settings.load_from_file(tmp_path / "missing.json")

    assert loaded.DIRECTORY_ENDPOINT == Settings().DIRECTORY_ENDPOINT


def test_values_from_file(tmp_path: Path):
    """Test that values in the JSON file override the defaults"""
    path = tmp_path / "config.json"
    _ = path.write_text(
        json.dumps({"DIRECTORY_ENDPOINT": "http://localhost:9000/users", "REQUEST_TIMEOUT": 3}),
        encoding="utf-8",
    )

    loaded = Settings.load_from_file(path)

    assert loaded.DIRECTORY_ENDPOINT == "http://localhost:9000/users"
    assert loaded.REQUEST_TIMEOUT == 3.0


def test_invalid_file_returns_defaults(tmp_path: Path):
    """Test that a corrupt or invalid file falls back to the defaults"""
    corrupt = tmp_path / "corrupt.json"
    _ = corrupt.write_text("{not json", encoding="utf-8")
    invalid = tmp_path / "invalid.json"
    _ = invalid.write_text(json.dumps({"SEARCH_DEBOUNCE_MS": "soon"}), encoding="utf-8")

    assert Settings.load_from_file(corrupt).SEARCH_DEBOUNCE_MS == Settings().SEARCH_DEBOUNCE_MS
    assert Settings.load_from_file(invalid).SEARCH_DEBOUNCE_MS == Settings().SEARCH_DEBOUNCE_MS


def test_non_object_file_returns_defaults(tmp_path: Path):
    """Test that a JSON array or scalar is ignored"""
    path = tmp_path / "config.json"
    _ = path.write_text("[1, 2]", encoding="utf-8")

    assert Settings.load_from_file(path).REQUEST_TIMEOUT == Settings().REQUEST_TIMEOUT
