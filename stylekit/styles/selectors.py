"""Selector composition.

`Selector` appends selector fragments with their CSS punctuation; nothing is
validated. The free functions return plain strings that can be concatenated
or passed to `Selector.raw()`.

    >>> cls("card").child().tag("img").hover().build()
    '.card > img:hover'
"""

from __future__ import annotations

from ..errors import UsageError
from ..values.base import Value


def _text(selector: str | Selector) -> str:
    return selector.build() if isinstance(selector, Selector) else selector


def _functional(name: str, selectors: tuple[str | Selector, ...]) -> str:
    if not selectors:
        raise UsageError(f":{name}() requires at least one selector")
    return f":{name}(" + ", ".join(_text(s) for s in selectors) + ")"


def _attr(name: str, op: str = "", value: str | None = None) -> str:
    if value is None:
        return f"[{name}]"
    return f'[{name}{op}"{value}"]'


class Selector(Value):
    """Mutable selector text accumulator; every method returns self."""

    def __init__(self, text: str = "") -> None:
        self._parts: list[str] = [text] if text else []

    def _add(self, fragment: str) -> Selector:
        self._parts.append(fragment)
        return self

    # Simple selectors
    def tag(self, name: str) -> Selector:
        return self._add(name)

    def cls(self, name: str) -> Selector:
        return self._add("." + name)

    def id(self, name: str) -> Selector:
        return self._add("#" + name)

    def universal(self) -> Selector:
        return self._add("*")

    def raw(self, text: str) -> Selector:
        return self._add(text)

    def attr(self, name: str, value: str | None = None, op: str = "=") -> Selector:
        """`[name]`, `[name="v"]`, or `[name<op>"v"]` for `~= |= ^= $= *=`."""
        return self._add(_attr(name, op, value))

    # Pseudo-classes and pseudo-elements
    def pseudo(self, name: str) -> Selector:
        return self._add(":" + name)

    def pseudo_element(self, name: str) -> Selector:
        return self._add("::" + name)

    def hover(self) -> Selector:
        return self.pseudo("hover")

    def focus(self) -> Selector:
        return self.pseudo("focus")

    def focus_visible(self) -> Selector:
        return self.pseudo("focus-visible")

    def focus_within(self) -> Selector:
        return self.pseudo("focus-within")

    def active(self) -> Selector:
        return self.pseudo("active")

    def visited(self) -> Selector:
        return self.pseudo("visited")

    def disabled(self) -> Selector:
        return self.pseudo("disabled")

    def checked(self) -> Selector:
        return self.pseudo("checked")

    def first_child(self) -> Selector:
        return self.pseudo("first-child")

    def last_child(self) -> Selector:
        return self.pseudo("last-child")

    def nth_child(self, expression: int | str) -> Selector:
        return self._add(nth_child(expression))

    def before(self) -> Selector:
        return self.pseudo_element("before")

    def after(self) -> Selector:
        return self.pseudo_element("after")

    def placeholder(self) -> Selector:
        return self.pseudo_element("placeholder")

    def not_(self, *selectors: str | Selector) -> Selector:
        return self._add(not_(*selectors))

    def is_(self, *selectors: str | Selector) -> Selector:
        return self._add(is_(*selectors))

    def where(self, *selectors: str | Selector) -> Selector:
        return self._add(where(*selectors))

    def has(self, *selectors: str | Selector) -> Selector:
        return self._add(has(*selectors))

    # Combinators
    def descendant(self, selector: str | Selector | None = None) -> Selector:
        self._add(" ")
        return self._add(_text(selector)) if selector is not None else self

    def child(self, selector: str | Selector | None = None) -> Selector:
        self._add(" > ")
        return self._add(_text(selector)) if selector is not None else self

    def adjacent(self, selector: str | Selector | None = None) -> Selector:
        self._add(" + ")
        return self._add(_text(selector)) if selector is not None else self

    def sibling(self, selector: str | Selector | None = None) -> Selector:
        self._add(" ~ ")
        return self._add(_text(selector)) if selector is not None else self

    def or_(self, selector: str | Selector | None = None) -> Selector:
        self._add(", ")
        return self._add(_text(selector)) if selector is not None else self

    def build(self) -> str:
        return "".join(self._parts)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"Selector({self.build()!r})"


def select(text: str = "") -> Selector:
    return Selector(text)


def tag(name: str) -> Selector:
    return Selector().tag(name)


def cls(name: str) -> Selector:
    return Selector().cls(name)


def id_(name: str) -> Selector:
    return Selector().id(name)


def universal() -> Selector:
    return Selector().universal()


# ==================== Functional pseudo-classes ====================


def has(*selectors: str | Selector) -> str:
    """`has(".icon", ".badge")` -> `:has(.icon, .badge)`"""
    return _functional("has", selectors)


def is_(*selectors: str | Selector) -> str:
    return _functional("is", selectors)


def where(*selectors: str | Selector) -> str:
    return _functional("where", selectors)


def not_(*selectors: str | Selector) -> str:
    return _functional("not", selectors)


def nth_child(expression: int | str) -> str:
    """`nth_child("2n+1")` -> `:nth-child(2n+1)`"""
    return f":nth-child({expression})"


def nth_last_child(expression: int | str) -> str:
    return f":nth-last-child({expression})"


def nth_of_type(expression: int | str) -> str:
    return f":nth-of-type({expression})"


def nth_last_of_type(expression: int | str) -> str:
    return f":nth-last-of-type({expression})"


# ==================== Constants ====================

_PSEUDO_CLASSES = """
    first-child last-child first-of-type last-of-type only-child only-of-type
    empty root target checked disabled enabled required optional valid invalid
    in-range out-of-range read-only read-write placeholder-shown
    focus-visible focus-within hover focus active visited
"""

_PSEUDO_ELEMENTS = """
    before after first-line first-letter selection placeholder marker backdrop
"""

PSEUDO_CLASSES = {name.replace("-", "_"): ":" + name for name in _PSEUDO_CLASSES.split()}
PSEUDO_ELEMENTS = {name.replace("-", "_"): "::" + name for name in _PSEUDO_ELEMENTS.split()}
globals().update(PSEUDO_CLASSES)
globals().update(PSEUDO_ELEMENTS)

# View transitions
view_transition = "::view-transition"
view_transition_group_all = "::view-transition-group(*)"
view_transition_image_pair_all = "::view-transition-image-pair(*)"
view_transition_old_all = "::view-transition-old(*)"
view_transition_new_all = "::view-transition-new(*)"


def view_transition_group(name: str) -> str:
    return f"::view-transition-group({name})"


def view_transition_image_pair(name: str) -> str:
    return f"::view-transition-image-pair({name})"


def view_transition_old(name: str) -> str:
    return f"::view-transition-old({name})"


def view_transition_new(name: str) -> str:
    return f"::view-transition-new({name})"


# Scrollbars (WebKit only)
scrollbar = "::-webkit-scrollbar"
scrollbar_track = "::-webkit-scrollbar-track"
scrollbar_thumb = "::-webkit-scrollbar-thumb"
scrollbar_button = "::-webkit-scrollbar-button"
scrollbar_corner = "::-webkit-scrollbar-corner"


def scrollbar_of(element: str) -> str:
    """`scrollbar_of(".content")` -> `.content::-webkit-scrollbar`"""
    return element + scrollbar


def scrollbar_track_of(element: str) -> str:
    return element + scrollbar_track


def scrollbar_thumb_of(element: str) -> str:
    return element + scrollbar_thumb


def scrollbar_thumb_hover_of(element: str) -> str:
    return element + scrollbar_thumb + ":hover"


# ==================== Attributes ====================


def attr(name: str) -> str:
    return _attr(name)


def attr_equals(name: str, value: str) -> str:
    """`attr_equals("type", "button")` -> `[type="button"]`"""
    return _attr(name, "=", value)


def attr_contains(name: str, value: str) -> str:
    return _attr(name, "*=", value)


def attr_starts_with(name: str, value: str) -> str:
    return _attr(name, "^=", value)


def attr_ends_with(name: str, value: str) -> str:
    return _attr(name, "$=", value)


def attr_contains_word(name: str, value: str) -> str:
    return _attr(name, "~=", value)


def attr_starts_with_prefix(name: str, value: str) -> str:
    """`[lang|="en"]`"""
    return _attr(name, "|=", value)


# ==================== Combinators ====================


def descendant(parent: str | Selector, child: str | Selector) -> str:
    return f"{_text(parent)} {_text(child)}"


def child(parent: str | Selector, child: str | Selector) -> str:
    return f"{_text(parent)} > {_text(child)}"


def adjacent(first: str | Selector, second: str | Selector) -> str:
    return f"{_text(first)} + {_text(second)}"


def sibling(first: str | Selector, second: str | Selector) -> str:
    return f"{_text(first)} ~ {_text(second)}"
