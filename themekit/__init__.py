"""ThemeKit: persistent, AI-assisted application theming for Qt."""

__version__ = "0.3.0"
