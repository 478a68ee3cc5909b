"""Theme engine exports."""

from themekit.themes.constants import AVAILABLE_FONTS, DEFAULT_THEME
from themekit.themes.models import FontOption, Theme, ThemeSuggestion, ThemeValidationError
from themekit.themes.synchronizer import StyleSynchronizer, derive_style_variables

__all__ = [
    "AVAILABLE_FONTS",
    "DEFAULT_THEME",
    "FontOption",
    "Theme",
    "ThemeSuggestion",
    "ThemeValidationError",
    "StyleSynchronizer",
    "derive_style_variables",
]
