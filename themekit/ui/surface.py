"""Style surfaces the theme synchronizer writes to."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from themekit.ui.stylesheet import DEFAULT_DOCUMENT_FONT, DEFAULT_VARIABLES, build_stylesheet

logger = logging.getLogger("themekit.surface")


class StyleSurface(Protocol):
    """A place to set named style variables and the document base font."""

    def set_variable(self, name: str, value: str) -> None: ...

    def set_document_font(self, value: str) -> None: ...

    def ensure_font_resource(self, address: str) -> bool: ...


class FontResourceRegistry:
    """Tracks requested webfont addresses; each address is requested once."""

    def __init__(self, on_request: Callable[[str], None] | None = None) -> None:
        self._addresses: list[str] = []
        self._on_request = on_request

    def __contains__(self, address: object) -> bool:
        return address in self._addresses

    def addresses(self) -> list[str]:
        return list(self._addresses)

    def ensure(self, address: str) -> bool:
        """Request ``address`` unless it was already requested.

        Returns True only when a new request was made.
        """
        if address in self._addresses:
            return False
        self._addresses.append(address)
        if self._on_request is not None:
            self._on_request(address)
        return True


class NullStyleSurface:
    """Surface for hosts with nothing to render. Every write is dropped."""

    def set_variable(self, name: str, value: str) -> None:
        return None

    def set_document_font(self, value: str) -> None:
        return None

    def ensure_font_resource(self, address: str) -> bool:
        return False


class RecordingStyleSurface:
    """In-memory surface that keeps the last value written to each variable."""

    def __init__(self, registry: FontResourceRegistry | None = None) -> None:
        self.variables: dict[str, str] = {}
        self.document_font = ""
        self.fonts = registry or FontResourceRegistry()

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def set_document_font(self, value: str) -> None:
        self.document_font = value

    def ensure_font_resource(self, address: str) -> bool:
        return self.fonts.ensure(address)


class QtStyleSurface:
    """Renders style variables into the QApplication stylesheet.

    Writes are coalesced: the stylesheet is rebuilt once on the next event
    loop turn, or immediately through :meth:`refresh`.
    """

    def __init__(
        self,
        app: QApplication,
        *,
        font_loader: Callable[[str], None] | None = None,
    ) -> None:
        self._app = app
        self._variables = dict(DEFAULT_VARIABLES)
        self._document_font = DEFAULT_DOCUMENT_FONT
        self._fonts = FontResourceRegistry(on_request=font_loader)
        self._refresh_pending = False

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)

    @property
    def fonts(self) -> FontResourceRegistry:
        return self._fonts

    def set_variable(self, name: str, value: str) -> None:
        if self._variables.get(name) == value:
            return
        self._variables[name] = value
        self._schedule_refresh()

    def set_document_font(self, value: str) -> None:
        if self._document_font == value:
            return
        self._document_font = value
        self._schedule_refresh()

    def ensure_font_resource(self, address: str) -> bool:
        return self._fonts.ensure(address)

    def refresh(self) -> None:
        self._refresh_pending = False
        stylesheet = build_stylesheet(
            variables=self._variables,
            document_font=self._document_font,
        )
        self._app.setStyleSheet(stylesheet)
        logger.debug("stylesheet refreshed (%d variables)", len(self._variables))

    def _schedule_refresh(self) -> None:
        if self._refresh_pending:
            return
        self._refresh_pending = True
        QTimer.singleShot(0, self._flush)

    def _flush(self) -> None:
        if self._refresh_pending:
            self.refresh()
