"""Fluent property builder.

`style()` starts an inline declaration list, `rule(selector)` a selector-scoped
rule. Every setter renders its value(s) immediately, stores the text under the
canonical property name and returns the same builder, so chains keep the
concrete type (a chain started with `rule()` stays a Rule).

    >>> rule(".btn").padding(px(10), px(20)).color(white).to_rule()
    '.btn { padding: 10px 20px; color: white; }'

Ordering: declarations serialize in insertion order. Setting a property that is
already present replaces its value in place (it keeps its original position).
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable, Iterator
from typing import TypeVar

from ..config import CLASS_PREFIX, INDENT
from ..errors import MissingSelectorError
from ..values.base import CSSInput, Value, css_text, join_css
from ..values.motion import AnimationBuilder, Transition
from .properties import PROPERTIES

S = TypeVar("S", bound="Style")


class Style(Value):
    """Ordered, mutable map of CSS property name to rendered value text.

    A Style is itself a Value whose text is its declaration list, so it can be
    handed to anything that accepts a value.
    """

    selector: str | None = None

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    # ==================== Core ====================

    def set(self: S, name: str, *values: CSSInput) -> S:
        """Store `values` (space joined) under `name`, replacing any previous value."""
        self._properties[name] = join_css(values)
        return self

    def unsafe(self: S, name: str, value: str) -> S:
        """Set any property to free-form text. Use when no typed setter exists."""
        self._properties[name] = value
        return self

    prop = set

    def var(self: S, name: str, value: CSSInput) -> S:
        """Define a custom property; `--` is added only when missing."""
        return self.set(name if name.startswith("--") else "--" + name, value)

    def merge(self: S, other: Style) -> S:
        """Copy every declaration of `other` into this builder (last write wins)."""
        self._properties.update(other._properties)
        return self

    def copy(self: S) -> S:
        """Independent snapshot with the same declarations (and selector)."""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._properties = dict(self._properties)
        return clone

    # ==================== Special setters ====================

    def margin_x(self: S, value: CSSInput) -> S:
        return self.set("margin-left", value).set("margin-right", value)

    def margin_y(self: S, value: CSSInput) -> S:
        return self.set("margin-top", value).set("margin-bottom", value)

    def padding_x(self: S, value: CSSInput) -> S:
        return self.set("padding-left", value).set("padding-right", value)

    def padding_y(self: S, value: CSSInput) -> S:
        return self.set("padding-top", value).set("padding-bottom", value)

    def grid_column(self: S, start: CSSInput, end: CSSInput | None = None) -> S:
        """`grid-column: 1 / 3` with two arguments, the value as-is with one."""
        return self._span("grid-column", start, end)

    def grid_row(self: S, start: CSSInput, end: CSSInput | None = None) -> S:
        return self._span("grid-row", start, end)

    def _span(self: S, name: str, start: CSSInput, end: CSSInput | None) -> S:
        if end is None:
            return self.set(name, start)
        return self.set(name, f"{css_text(start)} / {css_text(end)}")

    def grid_template_areas(self: S, *rows: str) -> S:
        """Each row is quoted: `grid_template_areas("a a", "b c")` -> `"a a" "b c"`."""
        return self.set("grid-template-areas", " ".join(f'"{row}"' for row in rows))

    def aspect_ratio(self: S, width: CSSInput, height: CSSInput | None = None) -> S:
        return self._span("aspect-ratio", width, height)

    def content(self: S, value: CSSInput) -> S:
        """Plain strings are quoted (`content: 'x'`); values render as-is."""
        if isinstance(value, str):
            return self.set("content", f"'{value}'")
        return self.set("content", value)

    def transition(self: S, *values: CSSInput) -> S:
        """Either one transition spelled out (`prop_color, s(0.3), ease_out`) or
        several `trans(...)` values, which are comma separated."""
        return self._layers("transition", values, Transition)

    def animation(self: S, *values: CSSInput) -> S:
        return self._layers("animation", values, AnimationBuilder)

    def _layers(self: S, name: str, values: tuple[CSSInput, ...], layer: type) -> S:
        if len(values) > 1 and all(isinstance(v, layer) for v in values):
            return self.set(name, join_css(values, ", "))
        return self.set(name, *values)

    def container(self: S, name: str, container_type: CSSInput) -> S:
        return self.set("container", f"{name} / {css_text(container_type)}")

    def animation_range(self: S, start: str, end: str | None = None) -> S:
        return self.set("animation-range", start if end is None else f"{start} {end}")

    # ==================== Shortcuts ====================

    def display_flex(self: S) -> S:
        return self.set("display", "flex")

    def flex_col(self: S) -> S:
        return self.set("display", "flex").set("flex-direction", "column")

    def flex_row(self: S) -> S:
        return self.set("display", "flex").set("flex-direction", "row")

    def flex_center(self: S) -> S:
        return self.set("display", "flex").set("justify-content", "center").set("align-items", "center")

    def flex_between(self: S) -> S:
        return (
            self.set("display", "flex")
            .set("justify-content", "space-between")
            .set("align-items", "center")
        )

    def grid(self: S, columns: int, gap: CSSInput | None = None) -> S:
        """`display: grid` with `columns` equal tracks. The `grid` shorthand
        property itself is set with `set("grid", ...)`."""
        self.set("display", "grid").set("grid-template-columns", f"repeat({columns}, 1fr)")
        if gap is not None:
            self.set("gap", gap)
        return self

    def full(self: S) -> S:
        return self.set("width", "100%").set("height", "100%")

    def full_width(self: S) -> S:
        return self.set("width", "100%")

    def full_height(self: S) -> S:
        return self.set("height", "100%")

    def absolute_fill(self: S) -> S:
        return self.set("position", "absolute").set("inset", "0")

    def relative(self: S) -> S:
        return self.set("position", "relative")

    def fixed(self: S) -> S:
        return self.set("position", "fixed")

    def sticky(self: S) -> S:
        return self.set("position", "sticky")

    def text_center(self: S) -> S:
        return self.set("text-align", "center")

    def bold(self: S) -> S:
        return self.set("font-weight", 700)

    def clickable(self: S) -> S:
        return self.set("cursor", "pointer")

    def truncate(self: S) -> S:
        return self.set("overflow", "hidden").set("text-overflow", "ellipsis").set("white-space", "nowrap")

    def no_select(self: S) -> S:
        return self.set("user-select", "none")

    def rounded(self: S, value: CSSInput) -> S:
        return self.set("border-radius", value)

    def center_x(self: S) -> S:
        return self.set("margin", "0 auto")

    # ==================== Output ====================

    def build(self) -> str:
        """Declaration list: `display: flex; padding: 10px;`"""
        return " ".join(f"{name}: {value};" for name, value in self._properties.items())

    def css(self) -> str:
        return self.build()

    def to_rule(self) -> str:
        """`<selector> { <declarations> }`; only builders made by rule() have a selector."""
        if self.selector is None:
            raise MissingSelectorError()
        body = self.build()
        return f"{self.selector} {{ {body} }}" if body else f"{self.selector} {{ }}"

    def block(self, label: str, depth: int = 1) -> list[str]:
        """Multi-line `label { ... }` lines, indented `depth` levels."""
        outer = INDENT * depth
        inner = INDENT * (depth + 1)
        lines = [f"{outer}{label} {{"]
        lines += [f"{inner}{name}: {value};" for name, value in self._properties.items()]
        lines.append(f"{outer}}}")
        return lines

    def to_map(self) -> dict[str, str]:
        return dict(self._properties)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._properties.items())

    def is_empty(self) -> bool:
        return not self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.build()!r})"


class Rule(Style):
    """A Style bound to a selector."""

    def __init__(self, selector: str | Value) -> None:
        super().__init__()
        self.selector = css_text(selector)

    def __repr__(self) -> str:
        return f"Rule({self.to_rule()!r})"


def _setter(attr: str, name: str) -> Callable[..., Style]:
    def setter(self: S, *values: CSSInput) -> S:
        return self.set(name, *values)

    setter.__name__ = attr
    setter.__qualname__ = f"Style.{attr}"
    setter.__doc__ = f"Sets `{name}`; several values are space joined."
    return setter


# Explicit methods above win over generated setters of the same name.
for _attr, _name in PROPERTIES.items():
    if _attr not in Style.__dict__:
        setattr(Style, _attr, _setter(_attr, _name))
del _attr, _name


def style() -> Style:
    """New inline style builder."""
    return Style()


def rule(selector: str | Value) -> Rule:
    """New rule builder for `selector` (a string or a Selector)."""
    return Rule(selector)


_class_counter = itertools.count(1)
_class_lock = threading.Lock()


def unique_class(prefix: str = CLASS_PREFIX) -> str:
    """Process-wide unique class name (`sk-1`, `sk-2`, ...)."""
    with _class_lock:
        n = next(_class_counter)
    return f"{prefix}-{n}"


__all__ = ["Style", "Rule", "style", "rule", "unique_class"]
