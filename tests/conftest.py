"""Shared test fixtures for j2velements tests."""

import pytest
import yaml


@pytest.fixture
def write_manifest(tmp_path):
    """Return a helper that writes a manifest dict to a YAML file.

    Shared across test_manifest.py and test_cli.py.
    """
    def _write(content, name="movie.yaml"):
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(content, f)
        return str(path)
    return _write


@pytest.fixture
def minimal_manifest():
    """A valid manifest dict with one movie-level and one scene element."""
    return {
        "movie": {"width": 1280, "height": 720, "quality": "medium"},
        "paths": {"media": "https://cdn.example.com"},
        "elements": [
            {"type": "subtitles", "captions": "${media}/subs.srt"},
        ],
        "scenes": [
            {
                "comment": "Intro",
                "elements": [
                    {
                        "type": "video",
                        "src": "${media}/intro.mp4",
                        "timing": {"duration": "5", "fadeIn": 0.5},
                    },
                ],
            },
        ],
    }
