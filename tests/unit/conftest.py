"""Unit test fixtures."""

import pytest

from sprockets.config import reset_config


# Unit tests only: @given tests cannot take function-scoped fixtures.
@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from the default config, ignoring the environment."""
    monkeypatch.delenv("SPROCKETS_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()
