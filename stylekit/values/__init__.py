"""CSS value constructors: units, colors, keywords and functions."""

from .base import CSSInput, Function, Joined, Keyword, Length, Value, css_text, format_number, join_css, raw
from .colors import color_mix, darken, hex_, hsl, hsla, light_dark, lighten, rgb, rgba
from .functions import linear_gradient, radial_gradient, url, var
from .motion import AnimationBuilder, Transition, animation, trans, transition, transitions
from .units import calc, clamp, em, ms, num, percent, px, rem, s, seconds, vh, vw

__all__ = [
    "Value",
    "Keyword",
    "Length",
    "Function",
    "Joined",
    "CSSInput",
    "css_text",
    "join_css",
    "format_number",
    "raw",
    "px",
    "rem",
    "em",
    "percent",
    "vh",
    "vw",
    "ms",
    "s",
    "seconds",
    "num",
    "calc",
    "clamp",
    "hex_",
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "color_mix",
    "lighten",
    "darken",
    "light_dark",
    "var",
    "url",
    "linear_gradient",
    "radial_gradient",
    "Transition",
    "transition",
    "trans",
    "transitions",
    "AnimationBuilder",
    "animation",
]
