"""Color values: named colors, hex, rgb/hsl and color manipulation.

No channel is range checked. `rgba(0, 0, 0, 2)` renders as written and the
browser decides what it means.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import CSSInput, Function, Keyword, Value, css_text, format_number, values_from_table

# Named colors render as their CSS keyword.
_NAMED = """
    white black red green blue yellow cyan magenta
    gray dark_gray=darkgray light_gray=lightgray silver
    orange purple pink brown navy teal olive maroon aqua lime
    coral crimson gold indigo violet salmon turquoise
    sky_blue=skyblue slate_gray=slategray
    transparent current_color=currentColor
"""

NAMED_COLORS = values_from_table(_NAMED)

white = NAMED_COLORS["white"]
black = NAMED_COLORS["black"]
red = NAMED_COLORS["red"]
green = NAMED_COLORS["green"]
blue = NAMED_COLORS["blue"]
yellow = NAMED_COLORS["yellow"]
cyan = NAMED_COLORS["cyan"]
magenta = NAMED_COLORS["magenta"]
gray = NAMED_COLORS["gray"]
dark_gray = NAMED_COLORS["dark_gray"]
light_gray = NAMED_COLORS["light_gray"]
silver = NAMED_COLORS["silver"]
orange = NAMED_COLORS["orange"]
purple = NAMED_COLORS["purple"]
pink = NAMED_COLORS["pink"]
brown = NAMED_COLORS["brown"]
navy = NAMED_COLORS["navy"]
teal = NAMED_COLORS["teal"]
olive = NAMED_COLORS["olive"]
maroon = NAMED_COLORS["maroon"]
aqua = NAMED_COLORS["aqua"]
lime = NAMED_COLORS["lime"]
coral = NAMED_COLORS["coral"]
crimson = NAMED_COLORS["crimson"]
gold = NAMED_COLORS["gold"]
indigo = NAMED_COLORS["indigo"]
violet = NAMED_COLORS["violet"]
salmon = NAMED_COLORS["salmon"]
turquoise = NAMED_COLORS["turquoise"]
sky_blue = NAMED_COLORS["sky_blue"]
slate_gray = NAMED_COLORS["slate_gray"]
transparent = NAMED_COLORS["transparent"]
current_color = NAMED_COLORS["current_color"]


def hex_(value: str) -> Keyword:
    """Hex color; `#` is added only when missing (`"333"` and `"#333"` agree)."""
    return Keyword(value if value.startswith("#") else "#" + value)


def _channels(*values: int | float) -> str:
    return ", ".join(format_number(v) for v in values)


def rgb(r: int, g: int, b: int) -> Keyword:
    return Keyword(f"rgb({_channels(r, g, b)})")


def rgba(r: int, g: int, b: int, a: float) -> Keyword:
    return Keyword(f"rgba({_channels(r, g, b, a)})")


def hsl(h: int, s: int, l: int) -> Keyword:  # noqa: E741
    return Keyword(f"hsl({format_number(h)}, {format_number(s)}%, {format_number(l)}%)")


def hsla(h: int, s: int, l: int, a: float) -> Keyword:  # noqa: E741
    return Keyword(f"hsla({format_number(h)}, {format_number(s)}%, {format_number(l)}%, {format_number(a)})")


@dataclass(frozen=True, slots=True)
class ColorMix(Value):
    """`color-mix(in <space>, <first> <percent>%, <second>)`"""

    first: CSSInput
    second: CSSInput
    percent: int | float
    space: str = "srgb"

    def css(self) -> str:
        return (
            f"color-mix(in {self.space}, {css_text(self.first)} "
            f"{format_number(self.percent)}%, {css_text(self.second)})"
        )


def color_mix(first: CSSInput, second: CSSInput, percent: int, space: str = "srgb") -> ColorMix:
    return ColorMix(first, second, percent, space)


def lighten(color: CSSInput, percent: int) -> ColorMix:
    """Mix `percent`% white into the color."""
    return color_mix(white, color, percent)


def darken(color: CSSInput, percent: int) -> ColorMix:
    """Mix `percent`% black into the color."""
    return color_mix(black, color, percent)


def light_dark(light: CSSInput, dark: CSSInput) -> Function:
    return Function("light-dark", (light, dark))
