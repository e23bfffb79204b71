"""Core value types.

A Value is an immutable CSS fragment with a single capability: render to text.
Composite values keep references to the values they wrap and only render them
when css() is called.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


class Value:
    """Any CSS value: a unit, color, keyword or function expression."""

    __slots__ = ()

    def css(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.css()


# Anything accepted where a value is expected. Strings pass through verbatim.
CSSInput = Union[Value, str, int, float]


def format_number(value: int | float) -> str:
    """Format a number the way CSS expects it.

    Whole numbers render without a decimal point (10.0 -> "10"). Other floats use
    Python's shortest round-tripping repr, which never depends on the locale.

    Args:
        value: Number to format

    Returns:
        Number as text
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def css_text(value: CSSInput) -> str:
    """Render a value, number or raw string to CSS text."""
    if isinstance(value, Value):
        return value.css()
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def join_css(values: Iterable[CSSInput], sep: str = " ") -> str:
    """Render each value and join the results."""
    return sep.join(css_text(v) for v in values)


@dataclass(frozen=True, slots=True)
class Keyword(Value):
    """A value whose text is fixed (e.g. `flex`, `ease-in-out`, `#fff`)."""

    text: str

    def css(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Length(Value):
    """A number followed by a unit suffix (`10px`, `1.5rem`, `50%`)."""

    number: int | float
    unit: str = ""

    def css(self) -> str:
        return format_number(self.number) + self.unit


@dataclass(frozen=True, slots=True)
class Function(Value):
    """A CSS function call: `name(arg<sep>arg...)`."""

    name: str
    args: tuple[CSSInput, ...] = ()
    sep: str = ", "

    def css(self) -> str:
        return f"{self.name}({join_css(self.args, self.sep)})"


@dataclass(frozen=True, slots=True)
class Joined(Value):
    """Several values rendered side by side (space or comma separated)."""

    parts: tuple[CSSInput, ...]
    sep: str = " "

    def css(self) -> str:
        return join_css(self.parts, self.sep)


def raw(text: str) -> Keyword:
    """Wrap free-form CSS text as a value (escape hatch)."""
    return Keyword(text)


def values_from_table(table: str) -> dict[str, Keyword]:
    """Build keyword values from a whitespace separated `name=text` table.

    A bare `name` renders the name with underscores turned into dashes.
    """
    out: dict[str, Keyword] = {}
    for entry in table.split():
        name, _, text = entry.partition("=")
        out[name] = Keyword(text or name.rstrip("_").replace("_", "-"))
    return out
