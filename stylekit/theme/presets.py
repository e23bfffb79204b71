"""Stock token tables for Theme.preset()."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tokens import Theme

_EASE = "150ms cubic-bezier(0.4, 0, 0.2, 1)"

COLORS = {
    "white": "#ffffff",
    "black": "#000000",
    # Neutral palette
    "gray-50": "#fafafa",
    "gray-100": "#f4f4f5",
    "gray-200": "#e4e4e7",
    "gray-300": "#d4d4d8",
    "gray-400": "#a1a1aa",
    "gray-500": "#71717a",
    "gray-600": "#52525b",
    "gray-700": "#3f3f46",
    "gray-800": "#27272a",
    "gray-900": "#18181b",
    "gray-950": "#09090b",
    # Primary (indigo)
    "primary-50": "#eef2ff",
    "primary-100": "#e0e7ff",
    "primary-200": "#c7d2fe",
    "primary-300": "#a5b4fc",
    "primary-400": "#818cf8",
    "primary-500": "#6366f1",
    "primary-600": "#4f46e5",
    "primary-700": "#4338ca",
    "primary-800": "#3730a3",
    "primary-900": "#312e81",
    # Semantic
    "background": "#ffffff",
    "foreground": "#18181b",
    "muted": "#f4f4f5",
    "muted-foreground": "#71717a",
    "border": "#e4e4e7",
    "ring": "#4f46e5",
    "success": "#22c55e",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

# key -> rem; 0 and px are special
_SPACING_REM = """
    0.5 1 1.5 2 2.5 3 3.5 4 5 6 7 8 9 10 11 12 14 16 20 24 28 32 36 40 44 48 52 56 60 64 72 80 96
"""


def _rem(key: str) -> str:
    value = float(key) / 4
    return f"{value:g}rem"


SPACING = {"0": "0", "px": "1px", **{key: _rem(key) for key in _SPACING_REM.split()}}

RADIUS = {
    "none": "0",
    "sm": "0.125rem",
    "DEFAULT": "0.25rem",
    "md": "0.375rem",
    "lg": "0.5rem",
    "xl": "0.75rem",
    "2xl": "1rem",
    "3xl": "1.5rem",
    "full": "9999px",
}

SHADOW = {
    "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
    "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
    "none": "0 0 #0000",
}

FONT_SIZE = {
    "xs": "0.75rem",
    "sm": "0.875rem",
    "base": "1rem",
    "lg": "1.125rem",
    "xl": "1.25rem",
    "2xl": "1.5rem",
    "3xl": "1.875rem",
    "4xl": "2.25rem",
    "5xl": "3rem",
    "6xl": "3.75rem",
    "7xl": "4.5rem",
    "8xl": "6rem",
    "9xl": "8rem",
}

FONT_WEIGHT = {
    name: str(weight)
    for weight, name in zip(
        range(100, 1000, 100),
        "thin extralight light normal medium semibold bold extrabold black".split(),
    )
}

LINE_HEIGHT = {
    "none": "1",
    "tight": "1.25",
    "snug": "1.375",
    "normal": "1.5",
    "relaxed": "1.625",
    "loose": "2",
}

BREAKPOINTS = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

TRANSITION = {
    "none": "none",
    "all": f"all {_EASE}",
    "DEFAULT": (
        "color, background-color, border-color, text-decoration-color, fill, stroke, "
        f"opacity, box-shadow, transform, filter, backdrop-filter {_EASE}"
    ),
    "colors": f"color, background-color, border-color, text-decoration-color, fill, stroke {_EASE}",
    "opacity": f"opacity {_EASE}",
    "shadow": f"box-shadow {_EASE}",
    "transform": f"transform {_EASE}",
}

Z_INDEX = {**{str(z): str(z) for z in range(0, 60, 10)}, "auto": "auto"}

DARK_COLORS = {
    "background": "#09090b",
    "foreground": "#fafafa",
    "muted": "#27272a",
    "muted-foreground": "#a1a1aa",
    "border": "#27272a",
}

# category -> tokens, in the order they are applied
PRESET_TOKENS = {
    "color": COLORS,
    "spacing": SPACING,
    "radius": RADIUS,
    "shadow": SHADOW,
    "font_size": FONT_SIZE,
    "font_weight": FONT_WEIGHT,
    "line_height": LINE_HEIGHT,
    "breakpoint": BREAKPOINTS,
    "transition": TRANSITION,
    "z": Z_INDEX,
}


def apply_preset(theme: Theme) -> Theme:
    """Load the stock tokens and dark overrides into `theme`."""
    for category, tokens in PRESET_TOKENS.items():
        theme.update(category, tokens)
    dark = theme.dark()
    for name, value in DARK_COLORS.items():
        dark.color(name, value)
    return dark.done()
