"""Application settings and key-value persistence via QSettings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from PySide6.QtCore import QSettings


class KeyValueStore(Protocol):
    """Durable string storage keyed by string."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """Process-local store for headless hosts and tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class AppSettings:
    """Wraps QSettings for persistent app configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("ThemeKit", "ThemeKit")

    # -- raw key-value access --

    def get(self, key: str) -> str | None:
        if not self._qs.contains(key):
            return None
        value = self._qs.value(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def set(self, key: str, value: str) -> None:
        self._qs.setValue(key, value)

    def remove(self, key: str) -> None:
        self._qs.remove(key)

    def sync(self) -> None:
        self._qs.sync()

    # -- fonts --

    @property
    def load_remote_fonts(self) -> bool:
        return self._qs.value("fonts/load_remote", True, type=bool)

    @load_remote_fonts.setter
    def load_remote_fonts(self, value: bool) -> None:
        self._qs.setValue("fonts/load_remote", bool(value))

    # -- suggestions --

    @property
    def suggestion_endpoint(self) -> str:
        override = os.environ.get("THEMEKIT_SUGGESTION_ENDPOINT", "").strip()
        if override:
            return override
        raw = self._qs.value("suggestions/endpoint", "", type=str)
        return (raw or "").strip()

    @suggestion_endpoint.setter
    def suggestion_endpoint(self, value: str) -> None:
        self._qs.setValue("suggestions/endpoint", (value or "").strip())

    # -- window geometry --

    @property
    def window_geometry(self) -> bytes | None:
        return self._qs.value("ui/window_geometry")

    @window_geometry.setter
    def window_geometry(self, value: bytes) -> None:
        self._qs.setValue("ui/window_geometry", value)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def logs_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themekit"
