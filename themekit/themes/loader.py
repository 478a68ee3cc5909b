"""Theme record and suggestion payload parsing."""

from __future__ import annotations

import json
from typing import Mapping

from themekit.themes.constants import THEME_FIELDS
from themekit.themes.models import Theme, ThemeSuggestion, ThemeValidationError

_SUGGESTION_STR_FIELDS: tuple[tuple[str, str], ...] = (
    ("themeName", "theme_name"),
    ("primaryColor", "primary_color"),
    ("backgroundColor", "background_color"),
    ("accentColor", "accent_color"),
    ("font", "font"),
)


def encode_theme_record(theme: Theme) -> str:
    """Serialize a theme for the key-value store."""
    return json.dumps(theme.to_dict(), separators=(",", ":"))


def decode_theme_record(raw: object) -> Theme:
    """Parse a persisted record. Any shape other than the five fields is corrupt."""
    if not isinstance(raw, str):
        raise ThemeValidationError(f"Theme record must be a string, got {type(raw).__name__}")
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ThemeValidationError(f"Invalid JSON in theme record: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeValidationError("Expected JSON object in theme record")

    _reject_unknown_keys(data, allowed=set(THEME_FIELDS), context="theme record")
    missing = [key for key in THEME_FIELDS if key not in data]
    if missing:
        joined = ", ".join(sorted(missing))
        raise ThemeValidationError(f"theme record: missing required fields: {joined}")

    values: dict[str, str] = {}
    for key in THEME_FIELDS:
        value = data[key]
        if not isinstance(value, str):
            raise ThemeValidationError(f"theme record: field {key!r} must be a string")
        values[key] = value
    return Theme(**values)


def suggestion_from_payload(data: Mapping[str, object]) -> ThemeSuggestion:
    """Build a suggestion from the generative service's camelCase payload."""
    if not isinstance(data, Mapping):
        raise ThemeValidationError("Expected a mapping for the suggestion payload")

    values: dict[str, object] = {}
    for source_key, field_name in _SUGGESTION_STR_FIELDS:
        value = data.get(source_key)
        if not isinstance(value, str):
            raise ThemeValidationError(f"suggestion: field {source_key!r} must be a string")
        values[field_name] = value

    acceptable = data.get("isThemeAcceptable")
    if not isinstance(acceptable, bool):
        raise ThemeValidationError("suggestion: field 'isThemeAcceptable' must be a boolean")
    values["is_theme_acceptable"] = acceptable
    return ThemeSuggestion(**values)  # type: ignore[arg-type]


def theme_share_text(theme: Theme) -> str:
    """Plain-text summary suitable for the clipboard."""
    return (
        f"Theme Name: {theme.name}\n"
        f"Primary: {theme.primary}\n"
        f"Background: {theme.background}\n"
        f"Accent: {theme.accent}\n"
        f"Font: {theme.font}"
    )


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(str(key) for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise ThemeValidationError(f"{context}: unsupported keys found: {joined}")
