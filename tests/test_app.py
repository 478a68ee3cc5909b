"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

from PySide6.QtCore import QSettings

from themekit.app import build_theme_store, configure_logging
from themekit.config.settings import AppSettings
from themekit.themes.constants import STORAGE_KEY
from themekit.themes.models import Theme


def _settings(tmp_path: Path) -> AppSettings:
    return AppSettings(QSettings(str(tmp_path / "themekit.ini"), QSettings.Format.IniFormat))


def test_configure_logging_writes_rotating_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("APPDATA", str(tmp_path))
    logger = logging.getLogger("themekit")
    saved_handlers = list(logger.handlers)
    saved_propagate = logger.propagate
    logger.handlers = []
    try:
        configured = configure_logging(_settings(tmp_path))
        assert configured is configure_logging(_settings(tmp_path))
        assert len(configured.handlers) == 1
        configured.info("hello")
        configured.handlers[0].flush()
        log_file = tmp_path / "themekit" / "logs" / "themekit.log"
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers = saved_handlers
        logger.propagate = saved_propagate
        logger.setLevel(logging.NOTSET)


def test_build_theme_store_persists_and_styles_app(qapp, tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    requested: list[str] = []
    store = build_theme_store(qapp, settings, font_loader=SimpleNamespace(request=requested.append))
    store.activate()
    store.set_theme(
        Theme(name="Mint", primary="#2E7D32", background="#F1F8E9", accent="#00897B", font="Lato")
    )
    qapp.processEvents()

    assert settings.get(STORAGE_KEY) is not None
    assert "font-family: 'Lato', sans-serif;" in qapp.styleSheet()
    assert any("family=Lato" in address for address in requested)
    store.shutdown()
