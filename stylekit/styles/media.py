"""@media query builder.

Conditions accumulate in call order and are joined with `and`:

    >>> media().screen().min_width(px(768)).rule(".nav", style().display("flex")).build()
    '@media screen and (min-width: 768px) {\\n  .nav {\\n    display: flex;\\n  }\\n}'
"""

from __future__ import annotations

from ..values.base import CSSInput, Value, css_text
from ..values.units import px
from .builder import Rule, Style
from .selectors import Selector


class MediaQuery(Value):
    def __init__(self) -> None:
        self._conditions: list[str] = []
        self._rules: dict[str, Style] = {}

    def condition(self, text: str) -> MediaQuery:
        """Append a raw condition (`(min-aspect-ratio: 16/9)`)."""
        self._conditions.append(text)
        return self

    def _feature(self, name: str, value: CSSInput) -> MediaQuery:
        return self.condition(f"({name}: {css_text(value)})")

    # Media types
    def screen(self) -> MediaQuery:
        return self.condition("screen")

    def print_(self) -> MediaQuery:
        return self.condition("print")

    def all_(self) -> MediaQuery:
        return self.condition("all")

    # Dimensions
    def min_width(self, value: CSSInput) -> MediaQuery:
        return self._feature("min-width", value)

    def max_width(self, value: CSSInput) -> MediaQuery:
        return self._feature("max-width", value)

    def width(self, value: CSSInput) -> MediaQuery:
        return self._feature("width", value)

    def min_height(self, value: CSSInput) -> MediaQuery:
        return self._feature("min-height", value)

    def max_height(self, value: CSSInput) -> MediaQuery:
        return self._feature("max-height", value)

    def height(self, value: CSSInput) -> MediaQuery:
        return self._feature("height", value)

    def portrait(self) -> MediaQuery:
        return self._feature("orientation", "portrait")

    def landscape(self) -> MediaQuery:
        return self._feature("orientation", "landscape")

    # User preferences
    def prefers_color_scheme(self, scheme: str) -> MediaQuery:
        return self._feature("prefers-color-scheme", scheme)

    def prefers_dark(self) -> MediaQuery:
        return self.prefers_color_scheme("dark")

    def prefers_light(self) -> MediaQuery:
        return self.prefers_color_scheme("light")

    def prefers_reduced_motion(self) -> MediaQuery:
        return self._feature("prefers-reduced-motion", "reduce")

    def prefers_reduced_transparency(self) -> MediaQuery:
        return self._feature("prefers-reduced-transparency", "reduce")

    def prefers_contrast(self, value: str) -> MediaQuery:
        return self._feature("prefers-contrast", value)

    # Resolution and display
    def min_resolution(self, value: CSSInput) -> MediaQuery:
        return self._feature("min-resolution", value)

    def max_resolution(self, value: CSSInput) -> MediaQuery:
        return self._feature("max-resolution", value)

    def retina(self) -> MediaQuery:
        return self._feature("-webkit-min-device-pixel-ratio", 2)

    def display_mode(self, mode: str) -> MediaQuery:
        return self._feature("display-mode", mode)

    def fullscreen(self) -> MediaQuery:
        return self.display_mode("fullscreen")

    def standalone(self) -> MediaQuery:
        return self.display_mode("standalone")

    # Input
    def hover(self) -> MediaQuery:
        return self._feature("hover", "hover")

    def no_hover(self) -> MediaQuery:
        return self._feature("hover", "none")

    def pointer(self, value: str) -> MediaQuery:
        return self._feature("pointer", value)

    def fine_pointer(self) -> MediaQuery:
        return self.pointer("fine")

    def coarse_pointer(self) -> MediaQuery:
        return self.pointer("coarse")

    # Logic
    def not_(self) -> MediaQuery:
        """Negate the most recent condition. No-op when there is none."""
        if self._conditions:
            self._conditions[-1] = "not " + self._conditions[-1]
        return self

    def only(self) -> MediaQuery:
        """Prefix the first condition with `only`. No-op when there is none."""
        if self._conditions:
            self._conditions[0] = "only " + self._conditions[0]
        return self

    # Rules
    def rule(self, selector: str | Selector, rule_style: Style) -> MediaQuery:
        self._rules[css_text(selector)] = rule_style
        return self

    def rules(self, *rules: Rule) -> MediaQuery:
        for r in rules:
            self._rules[r.selector] = r
        return self

    def copy(self) -> MediaQuery:
        """Independent query with the same conditions and rules."""
        clone = MediaQuery()
        clone._conditions = list(self._conditions)
        clone._rules = dict(self._rules)
        return clone

    @property
    def query(self) -> str:
        return " and ".join(self._conditions)

    def build(self) -> str:
        lines = [f"@media {self.query} {{"]
        for selector, rule_style in self._rules.items():
            lines += rule_style.block(selector)
        lines.append("}")
        return "\n".join(lines)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"MediaQuery({self.query!r}, rules={len(self._rules)})"


def media() -> MediaQuery:
    return MediaQuery()


# ==================== Breakpoints ====================


def xs() -> MediaQuery:
    return media().max_width(px(575))


def sm() -> MediaQuery:
    return media().min_width(px(576))


def md() -> MediaQuery:
    return media().min_width(px(768))


def lg() -> MediaQuery:
    return media().min_width(px(992))


def xl() -> MediaQuery:
    return media().min_width(px(1200))


def xxl() -> MediaQuery:
    return media().min_width(px(1400))


def mobile() -> MediaQuery:
    return media().max_width(px(767))


def tablet() -> MediaQuery:
    return media().min_width(px(768)).max_width(px(1023))


def desktop() -> MediaQuery:
    return media().min_width(px(1024))
