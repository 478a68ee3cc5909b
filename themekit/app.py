"""QApplication bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from themekit import __version__
from themekit.config.settings import AppSettings
from themekit.core.personalize import HttpSuggestionProvider
from themekit.themes.store import ThemeStore
from themekit.themes.synchronizer import StyleSynchronizer
from themekit.ui.font_loader import WebFontLoader
from themekit.ui.surface import QtStyleSurface
from themekit.ui.theme_dialog import ThemeDialog


def configure_logging(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themekit")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.logs_dir / "themekit.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_theme_store(
    app: QApplication,
    settings: AppSettings,
    *,
    font_loader: WebFontLoader | None = None,
) -> ThemeStore:
    """Wire a Qt style surface and QSettings storage into a theme store."""
    surface = QtStyleSurface(
        app,
        font_loader=font_loader.request if font_loader is not None else None,
    )
    return ThemeStore(settings, StyleSynchronizer(surface), parent=app)


def run_app() -> int:
    """Initialize and run the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setApplicationName("ThemeKit")
    app.setOrganizationName("ThemeKit")
    settings = AppSettings()
    logger = configure_logging(settings)
    logger.info("startup version=%s", __version__)

    font_loader = WebFontLoader(app) if settings.load_remote_fonts else None
    store = build_theme_store(app, settings, font_loader=font_loader)
    store.activate()
    logger.info("active theme %r", store.theme.name)

    endpoint = settings.suggestion_endpoint
    provider = HttpSuggestionProvider(endpoint) if endpoint else None
    if provider is None:
        logger.info("no suggestion endpoint configured; AI generator disabled")

    window = ThemeDialog(store, provider=provider)
    geometry = settings.window_geometry
    if geometry:
        window.restoreGeometry(geometry)
    window.show()
    # The window only renders after show(); re-sync once the event loop runs.
    QTimer.singleShot(0, store.sync_style)

    exit_code = app.exec()
    settings.window_geometry = window.saveGeometry()
    store.shutdown()
    settings.sync()
    return exit_code
