"""@supports feature query builder.

Conditions are space-joined in call order. `and_()`, `or_()` and `not_()` set
an operator that is written in front of the next condition:

    >>> supports("display", "grid").and_().not_().property("gap", "1rem").condition_text
    '(display: grid) and not (gap: 1rem)'
"""

from __future__ import annotations

from ..values.base import CSSInput, Value, css_text
from .builder import Rule, Style
from .selectors import Selector


class Supports(Value):
    def __init__(self) -> None:
        self._conditions: list[str] = []
        self._operator: str | None = None
        self._rules: dict[str, Style] = {}

    def _add(self, condition: str) -> Supports:
        if self._operator is not None:
            self._conditions.append(self._operator)
            self._operator = None
        self._conditions.append(condition)
        return self

    # Must precede property(), which shadows the builtin for the rest of the class body
    @property
    def condition_text(self) -> str:
        return " ".join(self._conditions)

    def property(self, name: CSSInput, value: CSSInput) -> Supports:
        """`(name: value)`"""
        return self._add(f"({css_text(name)}: {css_text(value)})")

    def selector(self, selector: str | Selector) -> Supports:
        """`selector(<selector>)`"""
        return self._add(f"selector({css_text(selector)})")

    def group(self, inner: Supports) -> Supports:
        """Parenthesize another query's conditions."""
        return self._add(f"({inner.condition_text})")

    def and_(self) -> Supports:
        self._operator = "and"
        return self

    def or_(self) -> Supports:
        self._operator = "or"
        return self

    def not_(self) -> Supports:
        self._operator = "not"
        return self

    # Rules
    def rule(self, selector: str | Selector, rule_style: Style) -> Supports:
        self._rules[css_text(selector)] = rule_style
        return self

    def rules(self, *rules: Rule) -> Supports:
        for r in rules:
            self._rules[r.selector] = r
        return self

    def build(self) -> str:
        lines = [f"@supports {self.condition_text} {{"]
        for selector, rule_style in self._rules.items():
            lines += rule_style.block(selector)
        lines.append("}")
        return "\n".join(lines)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"Supports({self.condition_text!r}, rules={len(self._rules)})"


def supports(name: CSSInput | None = None, value: CSSInput | None = None) -> Supports:
    """Empty query, or one seeded with `(name: value)`."""
    query = Supports()
    if name is not None and value is not None:
        query.property(name, value)
    return query


def supports_selector(selector: str | Selector) -> Supports:
    return Supports().selector(selector)


# ==================== Common feature checks ====================

# function name -> (property, test value)
_PROPERTY_CHECKS = {
    "supports_flexbox": ("display", "flex"),
    "supports_grid": ("display", "grid"),
    "supports_custom_properties": ("--test", "value"),
    "supports_backdrop_filter": ("backdrop-filter", "blur(1px)"),
    "supports_container_queries": ("container-type", "inline-size"),
    "supports_aspect_ratio": ("aspect-ratio", "1/1"),
    "supports_subgrid": ("grid-template-columns", "subgrid"),
    "supports_color_mix": ("color", "color-mix(in srgb, red 50%, blue)"),
    "supports_scroll_snap": ("scroll-snap-type", "x mandatory"),
    "supports_sticky": ("position", "sticky"),
    "supports_clamp": ("font-size", "clamp(1rem, 2vw, 3rem)"),
    "supports_logical_properties": ("margin-inline-start", "1rem"),
}

# function name -> selector
_SELECTOR_CHECKS = {
    "supports_has_selector": ":has(*)",
    "supports_focus_visible": ":focus-visible",
    "supports_where_selector": ":where(*)",
    "supports_is_selector": ":is(*)",
}


def _property_check(name: str, value: str):
    def check() -> Supports:
        return supports(name, value)

    return check


def _selector_check(selector: str):
    def check() -> Supports:
        return supports_selector(selector)

    return check


for _fn_name, (_name, _value) in _PROPERTY_CHECKS.items():
    globals()[_fn_name] = _property_check(_name, _value)
for _fn_name, _selector in _SELECTOR_CHECKS.items():
    globals()[_fn_name] = _selector_check(_selector)
del _fn_name, _name, _value, _selector


def supports_flex_gap() -> Supports:
    return supports("display", "flex").and_().property("gap", "1rem")
