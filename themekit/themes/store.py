"""Active theme state, startup recovery and persistence."""

from __future__ import annotations

import logging
from enum import Enum

from PySide6.QtCore import QObject, Signal

from themekit.config.settings import KeyValueStore
from themekit.errors import ErrorCode, ThemeKitError
from themekit.themes.constants import AI_SUGGESTION_FALLBACK_NAME, DEFAULT_THEME, STORAGE_KEY
from themekit.themes.loader import decode_theme_record, encode_theme_record
from themekit.themes.models import Theme, ThemeSuggestion, ThemeValidationError
from themekit.themes.synchronizer import StyleSynchronizer

logger = logging.getLogger("themekit.store")


class StorePhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class ThemeStore(QObject):
    """Owns the active theme and the held AI suggestion for one session.

    Call :meth:`activate` once to restore the persisted theme. Theme
    mutations are accepted only once the store is ready; none of them raise.
    """

    theme_changed = Signal(object)        # Theme
    suggestion_changed = Signal(object)   # ThemeSuggestion | None
    phase_changed = Signal(str)

    def __init__(
        self,
        storage: KeyValueStore,
        synchronizer: StyleSynchronizer | None = None,
        *,
        storage_key: str = STORAGE_KEY,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._storage = storage
        self._synchronizer = synchronizer or StyleSynchronizer()
        self._storage_key = storage_key
        self._theme = DEFAULT_THEME
        self._suggestion: ThemeSuggestion | None = None
        self._phase = StorePhase.UNINITIALIZED

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def ai_suggested_theme(self) -> ThemeSuggestion | None:
        return self._suggestion

    @property
    def phase(self) -> StorePhase:
        return self._phase

    @property
    def is_loading(self) -> bool:
        return self._phase is StorePhase.LOADING

    @property
    def is_ready(self) -> bool:
        return self._phase is StorePhase.READY

    # -- lifecycle --

    def activate(self) -> None:
        """Restore the persisted theme and become ready.

        Only the first call has an effect. Ready is reached even when the
        persisted record is unreadable or corrupt.
        """
        if self._phase is not StorePhase.UNINITIALIZED:
            return
        self._set_phase(StorePhase.LOADING)
        try:
            self._restore()
        finally:
            self._set_phase(StorePhase.READY)
        self.sync_style()

    def sync_style(self) -> None:
        """Re-apply the active theme, e.g. once a window is actually shown."""
        if self._phase is not StorePhase.READY:
            return
        self._synchronizer.apply_theme(self._theme)

    def shutdown(self) -> None:
        """Drop in-memory state. The persisted record is left in place."""
        if self._phase is StorePhase.UNINITIALIZED:
            return
        self._theme = DEFAULT_THEME
        self._suggestion = None
        self._set_phase(StorePhase.UNINITIALIZED)

    # -- mutations --

    def set_theme(self, theme: Theme) -> None:
        if not self._require_ready("set_theme"):
            return
        self._theme = theme
        self._synchronizer.apply_theme(theme)
        self._persist(theme)
        self.theme_changed.emit(theme)

    def reset_theme(self) -> None:
        if not self._require_ready("reset_theme"):
            return
        self.set_theme(DEFAULT_THEME)
        self.set_ai_suggested_theme(None)

    def apply_ai_suggestion(self) -> None:
        """Make the held suggestion the active theme. The suggestion is kept."""
        if not self._require_ready("apply_ai_suggestion"):
            return
        if self._suggestion is None:
            return
        self.set_theme(self._suggestion.to_theme(AI_SUGGESTION_FALLBACK_NAME))

    def set_ai_suggested_theme(self, suggestion: ThemeSuggestion | None) -> None:
        if suggestion == self._suggestion:
            return
        self._suggestion = suggestion
        self.suggestion_changed.emit(suggestion)

    # -- internals --

    def _restore(self) -> None:
        try:
            raw = self._storage.get(self._storage_key)
        except Exception as exc:
            error = ThemeKitError(ErrorCode.STORAGE_READ_FAILED, details={"original": str(exc)})
            logger.error("theme read failed: %s", error.to_dict())
            self._synchronizer.apply_theme(DEFAULT_THEME)
            return

        if raw is None:
            self._synchronizer.apply_theme(DEFAULT_THEME)
            return

        try:
            theme = decode_theme_record(raw)
        except ThemeValidationError as exc:
            error = ThemeKitError(ErrorCode.THEME_CORRUPT, details={"original": str(exc)})
            logger.warning("discarding stored theme: %s", error.to_dict())
            self._discard_record()
            self._synchronizer.apply_theme(DEFAULT_THEME)
            return

        self._theme = theme
        self._synchronizer.apply_theme(theme)
        self.theme_changed.emit(theme)

    def _persist(self, theme: Theme) -> None:
        try:
            self._storage.set(self._storage_key, encode_theme_record(theme))
        except Exception as exc:
            error = ThemeKitError(ErrorCode.STORAGE_WRITE_FAILED, details={"original": str(exc)})
            logger.error("theme write failed: %s", error.to_dict())

    def _discard_record(self) -> None:
        try:
            self._storage.remove(self._storage_key)
        except Exception as exc:
            error = ThemeKitError(ErrorCode.STORAGE_WRITE_FAILED, details={"original": str(exc)})
            logger.error("could not remove stored theme: %s", error.to_dict())

    def _require_ready(self, operation: str) -> bool:
        if self._phase is StorePhase.READY:
            return True
        logger.warning("%s ignored: theme store is %s", operation, self._phase.value)
        return False

    def _set_phase(self, phase: StorePhase) -> None:
        if phase is self._phase:
            return
        self._phase = phase
        self.phase_changed.emit(phase.value)
