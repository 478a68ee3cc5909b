"""Derive style variables from a theme and apply them to a style surface."""

from __future__ import annotations

import logging

from themekit.core.color import HslColor, hex_to_hsl
from themekit.themes.constants import (
    AVAILABLE_FONTS,
    CARD_LIGHTNESS_STEP,
    DARK_FOREGROUND,
    DOCUMENT_FONT_VALUE,
    FONT_BODY_VARIABLE,
    FONT_STYLESHEET_URL,
    LIGHT_CARD,
    LIGHT_FOREGROUND,
    LIGHTNESS_FLIP_THRESHOLD,
)
from themekit.themes.models import FontOption, Theme
from themekit.ui.surface import NullStyleSurface, StyleSurface

logger = logging.getLogger("themekit.synchronizer")


def resolve_font(name: str) -> FontOption:
    """Look up a catalog font by display name, falling back to the first entry."""
    for option in AVAILABLE_FONTS:
        if option.name == name:
            return option
    return AVAILABLE_FONTS[0]


def font_resource_url(font: FontOption) -> str:
    return FONT_STYLESHEET_URL.format(family=font.name.replace(" ", "+"))


def foreground_for(color: HslColor) -> str:
    """Dark text on light colors, light text on dark ones."""
    return DARK_FOREGROUND if color.l > LIGHTNESS_FLIP_THRESHOLD else LIGHT_FOREGROUND


def derive_style_variables(theme: Theme) -> dict[str, str]:
    """Compute every style variable the theme defines.

    Colors that fail to parse contribute nothing, so their variables are
    absent from the result and keep whatever value the surface already has.
    """
    variables: dict[str, str] = {}

    primary = hex_to_hsl(theme.primary)
    if primary is not None:
        variables["--primary"] = primary.css()
        variables["--primary-foreground"] = foreground_for(primary)

    background = hex_to_hsl(theme.background)
    if background is not None:
        variables["--background"] = background.css()
        variables["--foreground"] = foreground_for(background)
        if background.l > LIGHTNESS_FLIP_THRESHOLD:
            variables["--card"] = LIGHT_CARD
        else:
            card = background._replace(l=max(0, background.l - CARD_LIGHTNESS_STEP))
            variables["--card"] = card.css()
        variables["--card-foreground"] = foreground_for(background)

    accent = hex_to_hsl(theme.accent)
    if accent is not None:
        variables["--accent"] = accent.css()
        variables["--accent-foreground"] = foreground_for(accent)
        variables["--ring"] = accent.css()

    variables[FONT_BODY_VARIABLE] = resolve_font(theme.font).family
    return variables


class StyleSynchronizer:
    """Applies themes to a style surface. Holds no theme state of its own."""

    def __init__(self, surface: StyleSurface | None = None) -> None:
        self._surface = surface if surface is not None else NullStyleSurface()

    @property
    def surface(self) -> StyleSurface:
        return self._surface

    def apply_theme(self, theme: Theme) -> None:
        """Write the theme's variables, base font and font resource. Never raises."""
        font = resolve_font(theme.font)
        try:
            for name, value in derive_style_variables(theme).items():
                self._surface.set_variable(name, value)
            self._surface.set_document_font(DOCUMENT_FONT_VALUE)
            if self._surface.ensure_font_resource(font_resource_url(font)):
                logger.debug("requested font resource for %s", font.name)
        except Exception:
            logger.exception("failed to apply theme %r to style surface", theme.name)
