"""Numeric unit constructors and CSS math functions."""

from __future__ import annotations

from collections.abc import Callable

from .base import CSSInput, Function, Keyword, Length, format_number, raw

# (factory name, unit suffix)
_UNITS = """
    px=px rem=rem em=em percent=% ex=ex ch=ch
    vh=vh vw=vw vmin=vmin vmax=vmax dvh=dvh dvw=dvw svh=svh lvh=lvh
    cqw=cqw cqh=cqh cqi=cqi cqb=cqb
    fr=fr
    ms=ms s=s
    deg=deg rad=rad grad=grad turn=turn
    dpi=dpi dpcm=dpcm dppx=dppx x=x
"""


def _unit(suffix: str) -> Callable[[int | float], Length]:
    def make(value: int | float) -> Length:
        return Length(value, suffix)

    make.__doc__ = f"`<value>{suffix}`"
    return make


def _unit_table(table: str) -> dict[str, Callable[[int | float], Length]]:
    out = {}
    for entry in table.split():
        name, _, suffix = entry.partition("=")
        fn = _unit(suffix)
        fn.__name__ = fn.__qualname__ = name
        out[name] = fn
    return out


UNITS = _unit_table(_UNITS)

px = UNITS["px"]
rem = UNITS["rem"]
em = UNITS["em"]
percent = UNITS["percent"]
ex = UNITS["ex"]
ch = UNITS["ch"]
vh = UNITS["vh"]
vw = UNITS["vw"]
vmin = UNITS["vmin"]
vmax = UNITS["vmax"]
dvh = UNITS["dvh"]
dvw = UNITS["dvw"]
svh = UNITS["svh"]
lvh = UNITS["lvh"]
cqw = UNITS["cqw"]
cqh = UNITS["cqh"]
cqi = UNITS["cqi"]
cqb = UNITS["cqb"]
fr = UNITS["fr"]
ms = UNITS["ms"]
s = UNITS["s"]
seconds = s
deg = UNITS["deg"]
rad = UNITS["rad"]
grad = UNITS["grad"]
turn = UNITS["turn"]
dpi = UNITS["dpi"]
dpcm = UNITS["dpcm"]
dppx = UNITS["dppx"]
x = UNITS["x"]


def num(value: int | float) -> Length:
    """A unitless number (`1.5`, `400`)."""
    return Length(value)


# Global keywords usable for any property.
zero = Keyword("0")
auto = Keyword("auto")
inherit = Keyword("inherit")
initial = Keyword("initial")
unset = Keyword("unset")
revert = Keyword("revert")
none = Keyword("none")


def calc(expression: str) -> Function:
    """`calc(<expression>)`; the expression is free-form text."""
    return Function("calc", (raw(expression),))


def min_(*values: CSSInput) -> Function:
    return Function("min", values)


def max_(*values: CSSInput) -> Function:
    return Function("max", values)


def clamp(minimum: CSSInput, preferred: CSSInput, maximum: CSSInput) -> Function:
    """`clamp(min, preferred, max)`, e.g. fluid type sizes."""
    return Function("clamp", (minimum, preferred, maximum))


__all__ = [name for name in UNITS] + [
    "seconds",
    "num",
    "zero",
    "auto",
    "inherit",
    "initial",
    "unset",
    "revert",
    "none",
    "calc",
    "min_",
    "max_",
    "clamp",
    "format_number",
]
