"""Shared test fixtures."""

import json

import pytest


@pytest.fixture
def letters():
    """Four single-letter strings for slice tests."""
    return ["a", "b", "c", "d"]


@pytest.fixture
def debug_config_file(tmp_path):
    """Write a config file that turns on debug logging."""
    path = tmp_path / "sprockets.json"
    path.write_text(json.dumps({"log_level": "DEBUG"}))
    return path
