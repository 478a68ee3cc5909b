"""Application stylesheet rendered from theme style variables."""

from __future__ import annotations

import re
from typing import Mapping

# Seed values so the stylesheet renders before the first theme is applied.
# Mirrors the variables derived from the default theme.
DEFAULT_VARIABLES = {
    "--primary": "272 72% 60%",
    "--primary-foreground": "0 0% 10%",
    "--background": "266 50% 94%",
    "--foreground": "0 0% 10%",
    "--card": "0 0% 100%",
    "--card-foreground": "0 0% 10%",
    "--accent": "175 72% 60%",
    "--accent-foreground": "0 0% 10%",
    "--ring": "175 72% 60%",
    "--font-body": "'PT Sans', sans-serif",
}

DEFAULT_DOCUMENT_FONT = "var(--font-body)"

_COLOR_REF_RE = re.compile(r"hsl\(var\((--[a-z][a-z0-9-]*)\)\)")
_VAR_REF_RE = re.compile(r"var\((--[a-z][a-z0-9-]*)\)")
_HSL_TRIPLE_RE = re.compile(r"^(\d+) (\d+)% (\d+)%$")

BASE_STYLES = """
QWidget {
    background-color: hsl(var(--background));
    color: hsl(var(--foreground));
    font-family: @document-font;
    font-size: 10pt;
}

QLabel {
    background-color: transparent;
}

#ThemeHeading {
    color: hsl(var(--primary));
    font-size: 15pt;
    font-weight: 700;
}

#StatusDetail {
    font-size: 9pt;
}
"""

CARD_STYLES = """
QGroupBox, #Card {
    background-color: hsl(var(--card));
    color: hsl(var(--card-foreground));
    border: 1px solid hsl(var(--accent));
    border-radius: 8px;
    margin-top: 12px;
    padding: 10px;
}

QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
}
"""

BUTTON_STYLES = """
QPushButton {
    background-color: hsl(var(--primary));
    color: hsl(var(--primary-foreground));
    border: none;
    border-radius: 6px;
    padding: 6px 14px;
}

QPushButton:focus {
    border: 2px solid hsl(var(--ring));
}

QPushButton#SecondaryButton {
    background-color: hsl(var(--accent));
    color: hsl(var(--accent-foreground));
}

QPushButton:disabled {
    background-color: hsl(var(--card));
    color: hsl(var(--card-foreground));
}
"""

FORM_STYLES = """
QLineEdit, QComboBox, QPlainTextEdit {
    background-color: hsl(var(--card));
    color: hsl(var(--card-foreground));
    border: 1px solid hsl(var(--accent));
    border-radius: 4px;
    padding: 4px 6px;
}

QLineEdit:focus, QComboBox:focus, QPlainTextEdit:focus {
    border: 1px solid hsl(var(--ring));
}
"""

APP_STYLESHEET = "\n".join(
    [
        BASE_STYLES,
        CARD_STYLES,
        BUTTON_STYLES,
        FORM_STYLES,
    ]
)


def build_stylesheet(
    *,
    variables: Mapping[str, str] | None = None,
    document_font: str = DEFAULT_DOCUMENT_FONT,
) -> str:
    """Render the application stylesheet with variable overrides."""
    resolved = dict(DEFAULT_VARIABLES)
    for key, value in (variables or {}).items():
        if isinstance(value, str) and value:
            resolved[key] = value

    def _color(match: re.Match[str]) -> str:
        return qss_color(resolved.get(match.group(1), ""))

    def _value(match: re.Match[str]) -> str:
        return resolved.get(match.group(1), "")

    stylesheet = _COLOR_REF_RE.sub(_color, APP_STYLESHEET)
    font = _VAR_REF_RE.sub(_value, document_font)
    return stylesheet.replace("@document-font", font or DEFAULT_VARIABLES["--font-body"])


def qss_color(triple: str) -> str:
    """Turn an ``"H S% L%"`` triple into a Qt ``hsl()`` color."""
    match = _HSL_TRIPLE_RE.match(triple.strip())
    if match is None:
        return "transparent"
    h, s, l = match.groups()  # noqa: E741
    # Qt expects hue in [0, 359].
    return f"hsl({int(h) % 360}, {s}%, {l}%)"
