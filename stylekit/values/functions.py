"""Function-shaped values: variables, transforms, gradients, filters, shapes.

Each constructor returns a value that renders `name(args)` with the argument
separator the CSS grammar of that function uses.
"""

from __future__ import annotations

from .base import CSSInput, Function, Joined, Keyword, format_number, raw


def var(name: str, fallback: CSSInput | None = None) -> Function:
    """Reference a custom property; `--` is added only when missing.

    >>> var("x").css() == var("--x").css() == "var(--x)"
    True
    """
    normalized = name if name.startswith("--") else "--" + name
    if fallback is None:
        return Function("var", (raw(normalized),))
    return Function("var", (raw(normalized), fallback))


def url(path: str) -> Keyword:
    return Keyword(f"url('{path}')")


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Function:
    return Function("cubic-bezier", (x1, y1, x2, y2))


def steps(count: int, position: str | None = None) -> Function:
    if position is None:
        return Function("steps", (count,))
    return Function("steps", (count, raw(position)))


# ==================== Transforms ====================


def translate(x: CSSInput, y: CSSInput) -> Function:
    return Function("translate", (x, y))


def translate_x(x: CSSInput) -> Function:
    return Function("translateX", (x,))


def translate_y(y: CSSInput) -> Function:
    return Function("translateY", (y,))


def translate3d(x: CSSInput, y: CSSInput, z: CSSInput) -> Function:
    return Function("translate3d", (x, y, z))


def scale(x: float, y: float | None = None) -> Function:
    return Function("scale", (x,) if y is None else (x, y))


def scale_x(x: float) -> Function:
    return Function("scaleX", (x,))


def scale_y(y: float) -> Function:
    return Function("scaleY", (y,))


def rotate(angle: CSSInput) -> Function:
    return Function("rotate", (angle,))


def rotate_x(angle: CSSInput) -> Function:
    return Function("rotateX", (angle,))


def rotate_y(angle: CSSInput) -> Function:
    return Function("rotateY", (angle,))


def rotate_z(angle: CSSInput) -> Function:
    return Function("rotateZ", (angle,))


def skew(x: CSSInput, y: CSSInput) -> Function:
    return Function("skew", (x, y))


def skew_x(x: CSSInput) -> Function:
    return Function("skewX", (x,))


def skew_y(y: CSSInput) -> Function:
    return Function("skewY", (y,))


def perspective(distance: CSSInput) -> Function:
    return Function("perspective", (distance,))


# ==================== Gradients ====================


def color_stop(color: CSSInput, *positions: CSSInput) -> Joined:
    """A gradient stop: `red 10%` or `red 10% 20%`."""
    return Joined((color, *positions))


def _gradient(name: str, direction: str | None, stops: tuple[CSSInput, ...]) -> Function:
    args: tuple[CSSInput, ...] = stops if direction is None else (raw(direction), *stops)
    return Function(name, args)


def linear_gradient(*stops: CSSInput, direction: str | None = None) -> Function:
    """`linear-gradient(...)`.

    A leading plain string is taken as the direction, so both
    `linear_gradient("to right", red, blue)` and
    `linear_gradient(red, blue, direction="to right")` render
    `linear-gradient(to right, red, blue)`.
    """
    return _gradient("linear-gradient", direction, stops)


def radial_gradient(*stops: CSSInput, shape: str | None = None) -> Function:
    return _gradient("radial-gradient", shape, stops)


def conic_gradient(*stops: CSSInput, origin: str | None = None) -> Function:
    return _gradient("conic-gradient", origin, stops)


def repeating_linear_gradient(*stops: CSSInput, direction: str | None = None) -> Function:
    return _gradient("repeating-linear-gradient", direction, stops)


def repeating_radial_gradient(*stops: CSSInput, shape: str | None = None) -> Function:
    return _gradient("repeating-radial-gradient", shape, stops)


# ==================== Filters ====================


def blur(radius: CSSInput) -> Function:
    return Function("blur", (radius,))


def brightness(amount: CSSInput) -> Function:
    return Function("brightness", (amount,))


def contrast(amount: CSSInput) -> Function:
    return Function("contrast", (amount,))


def grayscale(amount: CSSInput) -> Function:
    return Function("grayscale", (amount,))


def hue_rotate(angle: CSSInput) -> Function:
    return Function("hue-rotate", (angle,))


def invert(amount: CSSInput) -> Function:
    return Function("invert", (amount,))


def opacity_(amount: CSSInput) -> Function:
    return Function("opacity", (amount,))


def saturate(amount: CSSInput) -> Function:
    return Function("saturate", (amount,))


def sepia(amount: CSSInput) -> Function:
    return Function("sepia", (amount,))


def drop_shadow(x: CSSInput, y: CSSInput, blur_radius: CSSInput, color: CSSInput) -> Function:
    return Function("drop-shadow", (x, y, blur_radius, color), sep=" ")


# ==================== Shadows ====================


def shadow(
    x: CSSInput,
    y: CSSInput,
    blur_radius: CSSInput | None = None,
    spread: CSSInput | None = None,
    color: CSSInput | None = None,
    inset: bool = False,
) -> Joined:
    """One box-shadow layer: `[inset] x y [blur] [spread] [color]`."""
    parts: list[CSSInput] = [raw("inset")] if inset else []
    parts += [p for p in (x, y, blur_radius, spread, color) if p is not None]
    return Joined(tuple(parts))


def shadows(*layers: CSSInput) -> Joined:
    """Several box-shadow layers, comma separated."""
    return Joined(layers, sep=", ")


# ==================== Clip-path shapes ====================


def _at(at: str | None) -> tuple[CSSInput, ...]:
    return (raw("at"), raw(at)) if at else ()


def circle(radius: CSSInput, at: str | None = None) -> Function:
    """`circle(50% at center)`"""
    return Function("circle", (radius, *_at(at)), sep=" ")


def ellipse(rx: CSSInput, ry: CSSInput, at: str | None = None) -> Function:
    return Function("ellipse", (rx, ry, *_at(at)), sep=" ")


def inset_shape(*offsets: CSSInput, round_: CSSInput | None = None) -> Function:
    """`inset(10px 20px round 4px)`"""
    rounding: tuple[CSSInput, ...] = (raw("round"), round_) if round_ is not None else ()
    return Function("inset", (*offsets, *rounding), sep=" ")


def polygon(*points: tuple[CSSInput, CSSInput]) -> Function:
    """`polygon(x y, x y, ...)` from (x, y) pairs."""
    return Function("polygon", tuple(Joined(point) for point in points))


# ==================== Grid ====================


def repeat(count: int | CSSInput, *tracks: CSSInput) -> Function:
    """`repeat(3, 1fr)` or `repeat(auto-fit, minmax(200px, 1fr))`."""
    return Function("repeat", (count, Joined(tracks)))


def minmax(minimum: CSSInput, maximum: CSSInput) -> Function:
    return Function("minmax", (minimum, maximum))


def fit_content(limit: CSSInput) -> Function:
    return Function("fit-content", (limit,))


auto_fit = Keyword("auto-fit")
auto_fill = Keyword("auto-fill")


def ratio(width: int | float, height: int | float) -> Keyword:
    """Aspect ratio value `w / h`."""
    return Keyword(f"{format_number(width)} / {format_number(height)}")
