"""Shared test fixtures for the discussion_formatter test suite.

Provides a session-wide QApplication, settings isolation and small factories
for themes and theme directories.
"""

import json
import os
import sys

import pytest

from discussion_formatter.core import settings
from discussion_formatter.theme import Theme, ThemeLoader


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication, shared by all GUI tests."""
    from PyQt6.QtWidgets import QApplication

    # Headless CI has no display server
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp dir so tests never touch ~/.config."""
    settings_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_dir / "settings.json")
    return settings_dir


@pytest.fixture
def theme_factory():
    """Factory fixture: build Themes from plain dicts like a theme file would."""
    def _make(**data):
        return Theme.from_dict(data)
    return _make


@pytest.fixture
def themes_dir(tmp_path):
    """Empty directory for theme files, plus a writer helper."""
    directory = tmp_path / "themes"
    directory.mkdir()
    return directory


@pytest.fixture
def write_theme(themes_dir):
    """Write a theme file into themes_dir and return its path."""
    def _write(file_stem, data):
        path = themes_dir / f"{file_stem}.json"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def empty_loader(tmp_path):
    """Loader over a directory with no themes: palette-only rendering."""
    return ThemeLoader([tmp_path / "no-themes-here"])
