"""Whole-stylesheet assembly.

Each added item is rendered when it is added; `build()` joins the rendered
entries with newlines in the order they were added.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..values.base import CSSInput
from .at_property import PropertyRegistration
from .builder import Rule, Style
from .container import ContainerQuery
from .font_face import FontFace
from .keyframes import Keyframes
from .layer import LayerBuilder, order
from .media import MediaQuery
from .selectors import Selector
from .supports import Supports

if TYPE_CHECKING:
    from ..theme.tokens import Theme


class Stylesheet:
    def __init__(self) -> None:
        self._entries: list[str] = []

    def rule(self, selector: str | Selector | Rule, rule_style: Style | None = None) -> Stylesheet:
        """Add `rule(".x")...` directly, or a selector plus a Style.

        A Rule given with a Style keeps its own declarations; the Style is merged
        over a copy of them.
        """
        if isinstance(selector, Rule):
            combined = selector if rule_style is None else selector.copy().merge(rule_style)
            self._entries.append(combined.to_rule())
            return self
        self._entries.append(Rule(selector).merge(rule_style or Style()).to_rule())
        return self

    def rules(self, *rules: Rule) -> Stylesheet:
        for r in rules:
            self._entries.append(r.to_rule())
        return self

    def media(self, query: MediaQuery | str, *rules: Rule) -> Stylesheet:
        """Add a media query with `rules` nested into a copy of it; `query` is unchanged."""
        if isinstance(query, str):
            self._entries.append(query)
            return self
        self._entries.append(query.copy().rules(*rules).build())
        return self

    def keyframes(self, animation: Keyframes) -> Stylesheet:
        self._entries.append(animation.build())
        return self

    def property(self, registration: PropertyRegistration) -> Stylesheet:
        self._entries.append(registration.build())
        return self

    def font_face(self, face: FontFace) -> Stylesheet:
        self._entries.append(face.build())
        return self

    def supports(self, query: Supports) -> Stylesheet:
        self._entries.append(query.build())
        return self

    def container(self, query: ContainerQuery) -> Stylesheet:
        self._entries.append(query.build())
        return self

    def layer_order(self, *names: str) -> Stylesheet:
        """`@layer a, b, c;` statement fixing the layer precedence."""
        self._entries.append(order(*names))
        return self

    def layer(self, block: LayerBuilder | str) -> Stylesheet:
        self._entries.append(block if isinstance(block, str) else block.build())
        return self

    def raw(self, css: str) -> Stylesheet:
        self._entries.append(css)
        return self

    def comment(self, text: str) -> Stylesheet:
        self._entries.append(f"/* {text} */")
        return self

    def variable(self, name: str, value: CSSInput) -> Stylesheet:
        """`:root { --name: value; }` as its own entry."""
        self._entries.append(Rule(":root").var(name, value).to_rule())
        return self

    def variables(self, pairs: Mapping[str, CSSInput] | None = None, **named: CSSInput) -> Stylesheet:
        """Several custom properties in one `:root` rule.

        Keyword names use underscores for dashes (`primary_color` -> `--primary-color`).
        """
        root = Rule(":root")
        for name, value in (pairs or {}).items():
            root.var(name, value)
        for name, value in named.items():
            root.var(name.replace("_", "-"), value)
        self._entries.append(root.to_rule())
        return self

    def theme(self, theme: Theme, dark_class: str | None = None) -> Stylesheet:
        """Add the theme's `:root` variables (and the dark class block when named)."""
        self._entries.append(theme.to_css().rstrip("\n"))
        if dark_class:
            dark = theme.to_dark_class_css(dark_class)
            if dark:
                self._entries.append(dark.rstrip("\n"))
        return self

    def __len__(self) -> int:
        return len(self._entries)

    def build(self) -> str:
        return "\n".join(self._entries)

    def to_style_tag(self) -> str:
        return "<style>\n" + self.build() + "\n</style>"

    def __str__(self) -> str:
        return self.build()


def stylesheet() -> Stylesheet:
    return Stylesheet()
