"""@keyframes builder and the stock animations."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..config import KEYFRAME_PERCENT_DECIMALS
from ..errors import UsageError
from ..values.base import Value
from ..values.functions import rotate, scale, translate_x, translate_y
from ..values.units import deg, percent, px, zero
from .builder import Style, style


def format_percent(value: int | float) -> str:
    """Frame label for a percentage: `50%`, `33.33%`."""
    if isinstance(value, int) or value.is_integer():
        return f"{int(value)}%"
    return f"{value:.{KEYFRAME_PERCENT_DECIMALS}f}%"


class Keyframes(Value):
    """Named, ordered frames. Frames are rendered in the order they were added.

    `from_()` and `to()` store the literal labels `from` and `to`, never
    `0%`/`100%`. The Style passed in is copied, so later changes to it do not
    leak into the animation.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._frames: dict[str, Style] = {}

    def frame(self, label: str, frame_style: Style) -> Keyframes:
        """Store a frame under an arbitrary label."""
        self._frames[label] = frame_style.copy()
        return self

    def from_(self, frame_style: Style) -> Keyframes:
        return self.frame("from", frame_style)

    def to(self, frame_style: Style) -> Keyframes:
        return self.frame("to", frame_style)

    def at(self, position: int | float | Sequence[int | float], frame_style: Style) -> Keyframes:
        """Frame at one percentage, or several sharing one block (`0%, 100%`)."""
        if isinstance(position, (int, float)):
            return self.frame(format_percent(position), frame_style)
        return self.frame(", ".join(format_percent(p) for p in position), frame_style)

    @property
    def labels(self) -> list[str]:
        return list(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def build(self) -> str:
        lines = [f"@keyframes {self.name} {{"]
        for label, frame_style in self._frames.items():
            lines += frame_style.block(label)
        lines.append("}")
        return "\n".join(lines)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"Keyframes({self.name!r}, frames={self.labels!r})"


def keyframes(name: str) -> Keyframes:
    return Keyframes(name)


# ==================== Stock animations ====================


def fade_in() -> Keyframes:
    return keyframes("fadeIn").from_(style().opacity(0)).to(style().opacity(1))


def fade_out() -> Keyframes:
    return keyframes("fadeOut").from_(style().opacity(1)).to(style().opacity(0))


def _slide(name: str, move: Callable[[Value], Value], start: int) -> Keyframes:
    return (
        keyframes(name)
        .from_(style().transform(move(percent(start))).opacity(0))
        .to(style().transform(move(zero)).opacity(1))
    )


def slide_in_left() -> Keyframes:
    return _slide("slideInLeft", translate_x, -100)


def slide_in_right() -> Keyframes:
    return _slide("slideInRight", translate_x, 100)


def slide_in_top() -> Keyframes:
    return _slide("slideInTop", translate_y, -100)


def slide_in_bottom() -> Keyframes:
    return _slide("slideInBottom", translate_y, 100)


def pulse() -> Keyframes:
    return (
        keyframes("pulse")
        .at(0, style().transform(scale(1)))
        .at(50, style().transform(scale(1.05)))
        .at(100, style().transform(scale(1)))
    )


def bounce() -> Keyframes:
    return (
        keyframes("bounce")
        .at(0, style().transform(translate_y(zero)))
        .at(25, style().transform(translate_y(px(-10))))
        .at(50, style().transform(translate_y(zero)))
        .at(75, style().transform(translate_y(px(-5))))
        .at(100, style().transform(translate_y(zero)))
    )


def shake() -> Keyframes:
    return (
        keyframes("shake")
        .at(0, style().transform(translate_x(zero)))
        .at(25, style().transform(translate_x(px(-5))))
        .at(50, style().transform(translate_x(px(5))))
        .at(75, style().transform(translate_x(px(-5))))
        .at(100, style().transform(translate_x(zero)))
    )


def spin() -> Keyframes:
    return keyframes("spin").from_(style().transform(rotate(deg(0)))).to(style().transform(rotate(deg(360))))


def zoom_in() -> Keyframes:
    return (
        keyframes("zoomIn")
        .from_(style().transform(scale(0)).opacity(0))
        .to(style().transform(scale(1)).opacity(1))
    )


def zoom_out() -> Keyframes:
    return (
        keyframes("zoomOut")
        .from_(style().transform(scale(1)).opacity(1))
        .to(style().transform(scale(0)).opacity(0))
    )


# animation name -> factory
PRESETS: dict[str, Callable[[], Keyframes]] = {
    "fadeIn": fade_in,
    "fadeOut": fade_out,
    "slideInLeft": slide_in_left,
    "slideInRight": slide_in_right,
    "slideInTop": slide_in_top,
    "slideInBottom": slide_in_bottom,
    "pulse": pulse,
    "bounce": bounce,
    "shake": shake,
    "spin": spin,
    "zoomIn": zoom_in,
    "zoomOut": zoom_out,
}


def preset(name: str) -> Keyframes:
    """Look up a stock animation by CSS name (`fadeIn`) or function name (`fade_in`).

    Raises:
        UsageError: If no stock animation has that name
    """
    factory = PRESETS.get(name)
    if factory is None:
        factory = next((f for f in PRESETS.values() if f.__name__ == name), None)
    if factory is None:
        known = ", ".join(PRESETS)
        raise UsageError(f"Unknown animation {name!r} (known: {known})")
    return factory()
