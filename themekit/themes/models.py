"""Theme engine models."""

from __future__ import annotations

from dataclasses import asdict, dataclass


class ThemeValidationError(ValueError):
    """Raised when a theme record or suggestion payload has the wrong shape."""


@dataclass(frozen=True, slots=True)
class Theme:
    """One complete visual configuration. Replaced wholesale on change."""

    name: str
    primary: str
    background: str
    accent: str
    font: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FontOption:
    """A catalog font: display name and CSS font-family string."""

    name: str
    family: str


@dataclass(frozen=True, slots=True)
class ThemeSuggestion:
    """A generated candidate theme, held apart from the active theme."""

    theme_name: str
    primary_color: str
    background_color: str
    accent_color: str
    font: str
    is_theme_acceptable: bool = True

    def to_theme(self, fallback_name: str) -> Theme:
        """Copy the payload fields into a Theme, naming it if unnamed."""
        return Theme(
            name=self.theme_name or fallback_name,
            primary=self.primary_color,
            background=self.background_color,
            accent=self.accent_color,
            font=self.font,
        )
