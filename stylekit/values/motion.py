"""Transition and animation values."""

from __future__ import annotations

from dataclasses import dataclass

from .base import CSSInput, Joined, Keyword, Length, Value, css_text, values_from_table

# Properties commonly named in `transition`.
_TRANSITION_PROPERTIES = """
    prop_all=all prop_none=none prop_color=color prop_background=background
    prop_background_color=background-color prop_border_color=border-color
    prop_opacity=opacity prop_transform=transform prop_box_shadow=box-shadow
    prop_width=width prop_height=height prop_max_height=max-height
    prop_top=top prop_left=left prop_filter=filter prop_visibility=visibility
"""

TRANSITION_PROPERTIES = values_from_table(_TRANSITION_PROPERTIES)
globals().update(TRANSITION_PROPERTIES)

_ANIMATION_KEYWORDS = """
    infinite=infinite
    direction_normal=normal direction_reverse=reverse
    direction_alternate=alternate direction_alternate_reverse=alternate-reverse
    fill_none=none fill_forwards=forwards fill_backwards=backwards fill_both=both
    running paused allow_discrete
    range_entry=entry range_exit=exit range_cover=cover range_contain=contain
"""

ANIMATION_KEYWORDS = values_from_table(_ANIMATION_KEYWORDS)
globals().update(ANIMATION_KEYWORDS)


@dataclass(frozen=True, slots=True)
class Transition(Value):
    """One transition: `<property> <duration> [<timing>] [<delay>]`."""

    property: CSSInput
    duration: CSSInput
    timing: CSSInput | None = None
    delay: CSSInput | None = None

    def css(self) -> str:
        parts = [p for p in (self.property, self.duration, self.timing, self.delay) if p is not None]
        return Joined(tuple(parts)).css()


def transition(
    property: CSSInput,
    duration: CSSInput,
    timing: CSSInput | None = None,
    delay: CSSInput | None = None,
) -> Transition:
    """`transition(prop_color, s(0.3), ease_out)` renders `color 0.3s ease-out`."""
    return Transition(property, duration, timing, delay)


trans = transition


def transitions(*items: CSSInput) -> Joined:
    """Several transitions, comma separated."""
    return Joined(items, sep=", ")


def iteration_count(count: int | float) -> Length:
    return Length(count)


def anim_name(name: str) -> Keyword:
    return Keyword(name)


def scroll_timeline(scroller: str | None = None, axis: str | None = None) -> Keyword:
    """`scroll()`, `scroll(block)` or `scroll(nearest block)`."""
    return Keyword("scroll(" + " ".join(p for p in (scroller, axis) if p) + ")")


def view_timeline(axis: str | None = None) -> Keyword:
    return Keyword(f"view({axis or ''})")


def anim_range(start: str, end: str) -> Keyword:
    return Keyword(f"{start} {end}")


def stagger_delay(index: int, delay_ms: int) -> Length:
    """Delay for the index-th item of a staggered sequence."""
    return Length(index * delay_ms, "ms")


class AnimationBuilder(Value):
    """Fluent `animation` shorthand value.

    Parts render in CSS shorthand order:
    name duration timing delay iteration-count direction fill-mode play-state.
    """

    def __init__(self, name: str, duration: CSSInput | None = None):
        self.name = name
        self._parts: dict[str, CSSInput | None] = {
            "duration": duration,
            "timing": None,
            "delay": None,
            "iteration_count": None,
            "direction": None,
            "fill_mode": None,
            "play_state": None,
        }

    def _with(self, key: str, value: CSSInput) -> AnimationBuilder:
        self._parts[key] = value
        return self

    def duration(self, value: CSSInput) -> AnimationBuilder:
        return self._with("duration", value)

    def timing(self, value: CSSInput) -> AnimationBuilder:
        return self._with("timing", value)

    def delay(self, value: CSSInput) -> AnimationBuilder:
        return self._with("delay", value)

    def iteration_count(self, value: CSSInput) -> AnimationBuilder:
        return self._with("iteration_count", value)

    def direction(self, value: CSSInput) -> AnimationBuilder:
        return self._with("direction", value)

    def fill_mode(self, value: CSSInput) -> AnimationBuilder:
        return self._with("fill_mode", value)

    def play_state(self, value: CSSInput) -> AnimationBuilder:
        return self._with("play_state", value)

    def css(self) -> str:
        return " ".join([self.name] + [css_text(v) for v in self._parts.values() if v is not None])


def animation(name: str, duration: CSSInput | None = None) -> AnimationBuilder:
    return AnimationBuilder(name, duration)


# Shortcuts for animations whose @keyframes ship in stylekit.styles.keyframes
# (or are expected to be defined by the page).
_PRESET_ANIMATIONS = """
    fade_in=fadeIn fade_out=fadeOut fade_in_up=fadeInUp fade_in_down=fadeInDown
    slide_in_left=slideInLeft slide_in_right=slideInRight
    slide_in_top=slideInTop slide_in_bottom=slideInBottom
    zoom_in=zoomIn zoom_out=zoomOut pulse=pulse bounce=bounce shake=shake
    spin=spin rotate360=spin
"""


def _preset(css_name: str):
    def make(duration: CSSInput) -> AnimationBuilder:
        return AnimationBuilder(css_name, duration)

    make.__doc__ = f"`{css_name} <duration>` animation"
    return make


PRESET_ANIMATIONS = {
    name: _preset(css_name)
    for name, _, css_name in (entry.partition("=") for entry in _PRESET_ANIMATIONS.split())
}
globals().update(PRESET_ANIMATIONS)
