"""Design tokens and theme files."""

from .models import ThemeFile, ThemeLoadResult, load_theme, write_theme
from .tokens import CATEGORIES, DarkModeBuilder, Theme, theme

__all__ = [
    "Theme",
    "DarkModeBuilder",
    "CATEGORIES",
    "theme",
    "ThemeFile",
    "ThemeLoadResult",
    "load_theme",
    "write_theme",
]
