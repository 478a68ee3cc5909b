"""Webfont download and registration with the Qt font database."""

from __future__ import annotations

import logging
import re

from PySide6.QtCore import QByteArray, QObject, QUrl, Signal
from PySide6.QtGui import QFontDatabase
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from themekit import __version__

logger = logging.getLogger("themekit.fonts")

_FONT_SRC_RE = re.compile(r"url\((https://[^)\s]+)\)")
_MAX_FONT_FILES_PER_SHEET = 16


class WebFontLoader(QObject):
    """Fetches a webfont stylesheet and registers every font file it lists.

    Use as the ``font_loader`` of a :class:`QtStyleSurface`; the surface calls
    :meth:`request` at most once per address.
    """

    font_loaded = Signal(str)       # family name
    font_failed = Signal(str, str)  # address, error message

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)
        self._loaded_families: list[str] = []

    @property
    def loaded_families(self) -> list[str]:
        return list(self._loaded_families)

    def request(self, address: str) -> None:
        logger.info("requesting font stylesheet %s", address)
        reply = self._manager.get(self._build_request(address))
        reply.finished.connect(lambda: self._on_stylesheet_finished(reply, address))

    def _build_request(self, address: str) -> QNetworkRequest:
        request = QNetworkRequest(QUrl(address))
        # An unrecognized agent gets TrueType sources, which Qt can register everywhere.
        request.setRawHeader(b"User-Agent", f"ThemeKit/{__version__}".encode("ascii"))
        return request

    def _on_stylesheet_finished(self, reply: QNetworkReply, address: str) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                self._fail(address, reply.errorString())
                return
            css = bytes(reply.readAll().data()).decode("utf-8", errors="replace")
        finally:
            reply.deleteLater()

        sources = font_sources_from_css(css)
        if not sources:
            self._fail(address, "no font sources in stylesheet")
            return
        for source in sources:
            font_reply = self._manager.get(self._build_request(source))
            font_reply.finished.connect(
                lambda r=font_reply, s=source: self._on_font_finished(r, s)
            )

    def _on_font_finished(self, reply: QNetworkReply, source: str) -> None:
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                self._fail(source, reply.errorString())
                return
            data: QByteArray = reply.readAll()
        finally:
            reply.deleteLater()

        font_id = QFontDatabase.addApplicationFontFromData(data)
        if font_id < 0:
            self._fail(source, "font data rejected by QFontDatabase")
            return
        for family in QFontDatabase.applicationFontFamilies(font_id):
            if family not in self._loaded_families:
                self._loaded_families.append(family)
                logger.info("registered font family %s", family)
                self.font_loaded.emit(family)

    def _fail(self, address: str, message: str) -> None:
        logger.warning("font load failed for %s: %s", address, message)
        self.font_failed.emit(address, message)


def font_sources_from_css(css: str) -> list[str]:
    """Return the distinct font file URLs referenced by ``@font-face`` rules."""
    sources: list[str] = []
    for match in _FONT_SRC_RE.finditer(css):
        url = match.group(1).strip("'\"")
        if url not in sources:
            sources.append(url)
        if len(sources) >= _MAX_FONT_FILES_PER_SHEET:
            break
    return sources
