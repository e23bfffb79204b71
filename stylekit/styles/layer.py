"""Cascade layers (`@layer`).

`order()` and `declare()` return statement strings. `layer()` and
`anonymous()` wrap rules or raw CSS in a block, indenting every line:

    >>> layer("base", rule("body").margin(0))
    '@layer base {\\n  body { margin: 0; }\\n}'
"""

from __future__ import annotations

from ..config import INDENT
from .builder import Rule


def order(*names: str) -> str:
    """`@layer reset, base, components;`"""
    return "@layer " + ", ".join(names) + ";"


def declare(name: str) -> str:
    return f"@layer {name};"


def import_into(name: str, url: str, media_query: str | None = None) -> str:
    """`@import url('...') layer(name)`, optionally followed by a media query."""
    statement = f"@import url('{url}') layer({name})"
    if media_query:
        statement += f" {media_query}"
    return statement + ";"


class LayerBuilder:
    """Collects rendered rules and raw CSS for one `@layer` block.

    An empty name renders an anonymous layer (`@layer { ... }`).
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._items: list[str] = []

    def rule(self, rule: Rule) -> LayerBuilder:
        self._items.append(rule.to_rule())
        return self

    def css(self, text: str) -> LayerBuilder:
        """Raw CSS, including nested at-rules such as a built @media block."""
        self._items.append(text)
        return self

    media = css

    def add(self, *items: Rule | str) -> LayerBuilder:
        for item in items:
            if isinstance(item, Rule):
                self.rule(item)
            else:
                self.css(str(item))
        return self

    def build(self) -> str:
        header = f"@layer {self.name} {{" if self.name else "@layer {"
        lines = [header]
        for item in self._items:
            lines += [INDENT + line for line in item.split("\n")]
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"LayerBuilder({self.name!r}, items={len(self._items)})"


def named(name: str) -> LayerBuilder:
    return LayerBuilder(name)


def layer(name: str, *items: Rule | str) -> str:
    return LayerBuilder(name).add(*items).build()


def anonymous(*items: Rule | str) -> str:
    return LayerBuilder().add(*items).build()
