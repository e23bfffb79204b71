"""@container query builder.

    >>> container("card").min_width(px(400)).rule(".title", style().font_size(rem(2))).build()
    '@container card (min-width: 400px) {\\n  .title {\\n    font-size: 2rem;\\n  }\\n}'
"""

from __future__ import annotations

from ..values.base import CSSInput, Keyword, Value, css_text
from .builder import Rule, Style
from .selectors import Selector

# container-type values
inline_size = Keyword("inline-size")
size = Keyword("size")
normal = Keyword("normal")


class ContainerQuery(Value):
    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._conditions: list[str] = []
        self._rules: dict[str, Style] = {}

    def condition(self, text: str) -> ContainerQuery:
        self._conditions.append(text)
        return self

    def _feature(self, name: str, value: CSSInput) -> ContainerQuery:
        return self.condition(f"({name}: {css_text(value)})")

    # Size
    def min_width(self, value: CSSInput) -> ContainerQuery:
        return self._feature("min-width", value)

    def max_width(self, value: CSSInput) -> ContainerQuery:
        return self._feature("max-width", value)

    def width(self, value: CSSInput) -> ContainerQuery:
        return self._feature("width", value)

    def min_height(self, value: CSSInput) -> ContainerQuery:
        return self._feature("min-height", value)

    def max_height(self, value: CSSInput) -> ContainerQuery:
        return self._feature("max-height", value)

    def height(self, value: CSSInput) -> ContainerQuery:
        return self._feature("height", value)

    # Logical size
    def min_inline_size(self, value: CSSInput) -> ContainerQuery:
        return self._feature("min-inline-size", value)

    def max_inline_size(self, value: CSSInput) -> ContainerQuery:
        return self._feature("max-inline-size", value)

    def min_block_size(self, value: CSSInput) -> ContainerQuery:
        return self._feature("min-block-size", value)

    def max_block_size(self, value: CSSInput) -> ContainerQuery:
        return self._feature("max-block-size", value)

    # Shape
    def min_aspect_ratio(self, ratio: str) -> ContainerQuery:
        return self._feature("min-aspect-ratio", ratio)

    def max_aspect_ratio(self, ratio: str) -> ContainerQuery:
        return self._feature("max-aspect-ratio", ratio)

    def aspect_ratio(self, ratio: str) -> ContainerQuery:
        return self._feature("aspect-ratio", ratio)

    def portrait(self) -> ContainerQuery:
        return self._feature("orientation", "portrait")

    def landscape(self) -> ContainerQuery:
        return self._feature("orientation", "landscape")

    # Rules
    def rule(self, selector: str | Selector, rule_style: Style) -> ContainerQuery:
        self._rules[css_text(selector)] = rule_style
        return self

    def rules(self, *rules: Rule) -> ContainerQuery:
        for r in rules:
            self._rules[r.selector] = r
        return self

    @property
    def query(self) -> str:
        """Optional container name followed by the `and`-joined conditions."""
        conditions = " and ".join(self._conditions)
        return f"{self.name} {conditions}" if self.name else conditions

    def build(self) -> str:
        lines = [f"@container {self.query} {{"]
        for selector, rule_style in self._rules.items():
            lines += rule_style.block(selector)
        lines.append("}")
        return "\n".join(lines)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"ContainerQuery({self.query!r}, rules={len(self._rules)})"


def container(name: str | None = None) -> ContainerQuery:
    return ContainerQuery(name)
