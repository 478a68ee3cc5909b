"""Worker for requesting a personalized theme suggestion."""

from __future__ import annotations

import logging
from threading import Event

from PySide6.QtCore import QObject, Signal

from themekit.core.personalize import (
    PersonalizeThemeRequest,
    SuggestionProvider,
    request_suggestion,
)
from themekit.errors import classify_exception, format_error_for_user

logger = logging.getLogger("themekit.suggestions")


class SuggestionWorker(QObject):
    """Calls the suggestion service in a background thread.

    Move to a ``QThread`` and connect ``thread.started`` to :meth:`run`.
    The store is never touched from here; connect ``finished`` to
    ``ThemeStore.set_ai_suggested_theme`` so delivery is queued onto the
    store's thread.
    """

    started = Signal()
    finished = Signal(object)           # ThemeSuggestion
    error = Signal(str)                 # user-facing message
    cancelled = Signal()

    def __init__(
        self,
        provider: SuggestionProvider,
        request: PersonalizeThemeRequest,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._provider = provider
        self._request = request
        self._cancel_event = Event()

    @property
    def request(self) -> PersonalizeThemeRequest:
        return self._request

    def cancel(self) -> None:
        """Drop the result once the service answers. The call itself is not interrupted."""
        self._cancel_event.set()

    def run(self) -> None:
        self.started.emit()
        try:
            suggestion = request_suggestion(self._provider, self._request)
        except Exception as exc:
            error = classify_exception(exc)
            logger.warning("theme suggestion failed: %s", error.to_dict())
            self.error.emit(format_error_for_user(error))
            return
        if self._cancel_event.is_set():
            logger.info("theme suggestion %r discarded after cancel", suggestion.theme_name)
            self.cancelled.emit()
            return
        logger.info(
            "theme suggestion %r received (acceptable=%s)",
            suggestion.theme_name,
            suggestion.is_theme_acceptable,
        )
        self.finished.emit(suggestion)
