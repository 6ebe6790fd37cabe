"""Pytest configuration and fixtures."""

import pytest

from termbox.colors import Styler


@pytest.fixture
def plain_styler():
    """Styler that validates color names but emits no escape codes."""
    return Styler(enabled=False)


@pytest.fixture
def presets_file(tmp_path):
    """Path for a presets JSON file inside a temp dir (not created)."""
    return tmp_path / "presets.json"
