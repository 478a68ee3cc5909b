"""Theme engine constants."""

from __future__ import annotations

from themekit.themes.models import FontOption, Theme

STORAGE_KEY = "theme/active"
AI_SUGGESTION_FALLBACK_NAME = "AI Suggested Theme"

THEME_FIELDS: tuple[str, ...] = (
    "name",
    "primary",
    "background",
    "accent",
    "font",
)

DEFAULT_THEME = Theme(
    name="Default",
    primary="#9F50E3",
    background="#EEE7F7",
    accent="#50E3D6",
    font="PT Sans",
)

# First entry doubles as the fallback for unknown font names.
AVAILABLE_FONTS: tuple[FontOption, ...] = (
    FontOption(name="PT Sans", family="'PT Sans', sans-serif"),
    FontOption(name="Inter", family="'Inter', sans-serif"),
    FontOption(name="Roboto", family="'Roboto', sans-serif"),
    FontOption(name="Open Sans", family="'Open Sans', sans-serif"),
    FontOption(name="Lato", family="'Lato', sans-serif"),
    FontOption(name="Montserrat", family="'Montserrat', sans-serif"),
)

FONT_STYLESHEET_URL = "https://fonts.googleapis.com/css2?family={family}:wght@400;700&display=swap"

DARK_FOREGROUND = "0 0% 10%"
LIGHT_FOREGROUND = "0 0% 98%"
LIGHT_CARD = "0 0% 100%"
CARD_LIGHTNESS_STEP = 5
LIGHTNESS_FLIP_THRESHOLD = 50

STYLE_VARIABLES: tuple[str, ...] = (
    "--primary",
    "--primary-foreground",
    "--background",
    "--foreground",
    "--card",
    "--card-foreground",
    "--accent",
    "--accent-foreground",
    "--ring",
    "--font-body",
)

FONT_BODY_VARIABLE = "--font-body"
DOCUMENT_FONT_VALUE = f"var({FONT_BODY_VARIABLE})"
