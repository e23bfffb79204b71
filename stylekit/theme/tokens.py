"""Design token table with dark-mode overrides."""

from __future__ import annotations

from collections.abc import Mapping

from ..config import DEFAULT_DARK_CLASS, INDENT
from ..values.base import CSSInput, Function, css_text, raw

# Category -> custom property prefix, in serialization order.
# `custom` tokens carry no prefix (`--<name>`).
CATEGORIES: dict[str, str] = {
    "color": "color-",
    "spacing": "spacing-",
    "radius": "radius-",
    "shadow": "shadow-",
    "font_size": "font-size-",
    "font_weight": "font-weight-",
    "line_height": "line-height-",
    "transition": "transition-",
    "z": "z-",
    "custom": "",
}

# Only these categories accept dark-mode overrides
DARK_CATEGORIES = ("color", "custom")


def _var(name: str) -> Function:
    return Function("var", (raw("--" + name),))


class Theme:
    """Ordered design tokens, rendered as CSS custom properties.

    Setters store a token and return the theme. The `*_var` getters return a
    `var(--<category>-<name>)` reference without checking that the token
    exists; use `has_color()` and friends for presence checks.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._tokens: dict[str, dict[str, str]] = {category: {} for category in CATEGORIES}
        self._breakpoints: dict[str, str] = {}
        self._dark: dict[str, dict[str, str]] = {category: {} for category in DARK_CATEGORIES}

    @classmethod
    def preset(cls) -> Theme:
        """Theme seeded with the stock palette and scales."""
        from .presets import apply_preset

        return apply_preset(cls())

    # ==================== Setters ====================

    def set(self, category: str, name: str, value: CSSInput) -> Theme:
        """Store a token in `category` (one of CATEGORIES or `breakpoint`).

        Raises:
            KeyError: If the category is unknown
        """
        if category == "breakpoint":
            self._breakpoints[name] = css_text(value)
        else:
            self._tokens[category][name] = css_text(value)
        return self

    def update(self, category: str, tokens: Mapping[str, CSSInput]) -> Theme:
        for name, value in tokens.items():
            self.set(category, name, value)
        return self

    def color(self, name: str, value: CSSInput) -> Theme:
        return self.set("color", name, value)

    def spacing(self, name: str, value: CSSInput) -> Theme:
        return self.set("spacing", name, value)

    def radius(self, name: str, value: CSSInput) -> Theme:
        return self.set("radius", name, value)

    def shadow(self, name: str, value: CSSInput) -> Theme:
        return self.set("shadow", name, value)

    def font_size(self, name: str, value: CSSInput) -> Theme:
        return self.set("font_size", name, value)

    def font_weight(self, name: str, value: CSSInput) -> Theme:
        return self.set("font_weight", name, value)

    def line_height(self, name: str, value: CSSInput) -> Theme:
        return self.set("line_height", name, value)

    def breakpoint(self, name: str, value: CSSInput) -> Theme:
        return self.set("breakpoint", name, value)

    def transition(self, name: str, value: CSSInput) -> Theme:
        return self.set("transition", name, value)

    def z_index(self, name: str, value: CSSInput) -> Theme:
        return self.set("z", name, value)

    def custom(self, name: str, value: CSSInput) -> Theme:
        return self.set("custom", name, value)

    def dark(self) -> DarkModeBuilder:
        return DarkModeBuilder(self)

    # ==================== Getters ====================

    def color_var(self, name: str) -> Function:
        return _var("color-" + name)

    def spacing_var(self, name: str) -> Function:
        return _var("spacing-" + name)

    def radius_var(self, name: str) -> Function:
        return _var("radius-" + name)

    def shadow_var(self, name: str) -> Function:
        return _var("shadow-" + name)

    def font_size_var(self, name: str) -> Function:
        return _var("font-size-" + name)

    def font_weight_var(self, name: str) -> Function:
        return _var("font-weight-" + name)

    def line_height_var(self, name: str) -> Function:
        return _var("line-height-" + name)

    def transition_var(self, name: str) -> Function:
        return _var("transition-" + name)

    def z_var(self, name: str) -> Function:
        return _var("z-" + name)

    def token(self, name: str) -> Function:
        """Reference any custom property by its full name (without `--`)."""
        return _var(name)

    def breakpoint_value(self, name: str) -> str:
        """Raw breakpoint value, `"0"` when undefined."""
        return self._breakpoints.get(name, "0")

    def has_color(self, name: str) -> bool:
        return name in self._tokens["color"]

    def color_value(self, name: str) -> str | None:
        return self._tokens["color"].get(name)

    def spacing_value(self, name: str) -> str | None:
        return self._tokens["spacing"].get(name)

    def color_names(self) -> list[str]:
        return list(self._tokens["color"])

    def tokens(self, category: str) -> dict[str, str]:
        """Copy of one category's tokens."""
        if category == "breakpoint":
            return dict(self._breakpoints)
        return dict(self._tokens[category])

    def dark_tokens(self, category: str) -> dict[str, str]:
        """Copy of the dark overrides for `color` or `custom`."""
        return dict(self._dark[category])

    def has_dark_overrides(self) -> bool:
        return any(self._dark.values())

    # ==================== CSS ====================

    def _dark_lines(self, indent: str) -> list[str]:
        return [
            f"{indent}--{CATEGORIES[category]}{name}: {value};"
            for category in DARK_CATEGORIES
            for name, value in self._dark[category].items()
        ]

    def to_css(self) -> str:
        """`:root` block with every token, then the dark-mode media query if any."""
        lines = [":root {"]
        for category, prefix in CATEGORIES.items():
            lines += [f"{INDENT}--{prefix}{name}: {value};" for name, value in self._tokens[category].items()]
        lines.append("}")
        css = "\n".join(lines) + "\n"

        if self.has_dark_overrides():
            dark = ["", "@media (prefers-color-scheme: dark) {", f"{INDENT}:root {{"]
            dark += self._dark_lines(INDENT * 2)
            dark += [f"{INDENT}}}", "}"]
            css += "\n".join(dark) + "\n"
        return css

    def to_dark_class_css(self, class_name: str = DEFAULT_DARK_CLASS) -> str:
        """Dark overrides as a `.<class_name>` block for manual toggling; "" when none."""
        if not self.has_dark_overrides():
            return ""
        lines = [f".{class_name} {{", *self._dark_lines(INDENT), "}"]
        return "\n".join(lines) + "\n"

    def to_full_css(self) -> str:
        return self.to_css() + "\n" + self.to_dark_class_css(DEFAULT_DARK_CLASS)

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        counts = ", ".join(f"{c}={len(t)}" for c, t in self._tokens.items() if t)
        return f"Theme({self.name!r}, {counts})"


class DarkModeBuilder:
    """Collects dark-mode overrides for a theme; `done()` returns the theme."""

    def __init__(self, theme: Theme) -> None:
        self._theme = theme

    def color(self, name: str, value: CSSInput) -> DarkModeBuilder:
        self._theme._dark["color"][name] = css_text(value)
        return self

    def custom(self, name: str, value: CSSInput) -> DarkModeBuilder:
        self._theme._dark["custom"][name] = css_text(value)
        return self

    def done(self) -> Theme:
        return self._theme

    build = done


def theme(name: str = "default") -> Theme:
    return Theme(name)
