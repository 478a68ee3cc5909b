"""Shared fixtures: headless Qt and in-memory theme plumbing."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from themekit.config.settings import MemoryKeyValueStore
from themekit.themes.store import ThemeStore
from themekit.themes.synchronizer import StyleSynchronizer
from themekit.ui.surface import RecordingStyleSurface


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def storage():
    return MemoryKeyValueStore()


@pytest.fixture
def surface():
    return RecordingStyleSurface()


@pytest.fixture
def make_store(storage, surface):
    def _make() -> ThemeStore:
        return ThemeStore(storage, StyleSynchronizer(surface))

    return _make
