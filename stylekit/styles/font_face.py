"""@font-face declarations."""

from __future__ import annotations

from ..config import INDENT

# src format() hints
woff2 = "woff2"
woff = "woff"
truetype = "truetype"
opentype = "opentype"
embedded_opentype = "embedded-opentype"
svg = "svg"

# font-display values
auto = "auto"
block = "block"
swap = "swap"
fallback = "fallback"
optional = "optional"

# font-style values
normal = "normal"
italic = "italic"
oblique = "oblique"


class FontFace:
    """One `@font-face` block.

    `font-style` and `font-display` are always written (defaults `normal` and
    `swap`). Weight, unicode-range and stretch appear only once set. Sources
    keep the order they were added in.
    """

    def __init__(self, family: str) -> None:
        self.family = family
        self._sources: list[str] = []
        self._weight: int | None = None
        self._weight_max: int | None = None
        self._style = normal
        self._display = swap
        self._unicode_range: str | None = None
        self._stretch: str | None = None

    def src(self, url: str, fmt: str | None = None) -> FontFace:
        source = f"url('{url}')"
        if fmt is not None:
            source += f" format('{fmt}')"
        self._sources.append(source)
        return self

    def local(self, name: str) -> FontFace:
        self._sources.append(f"local('{name}')")
        return self

    def font_weight(self, weight: int, maximum: int | None = None) -> FontFace:
        """Single weight, or a `min max` range for variable fonts."""
        self._weight = weight
        self._weight_max = maximum
        return self

    def font_style(self, style: str) -> FontFace:
        self._style = style
        return self

    def font_display(self, display: str) -> FontFace:
        self._display = display
        return self

    def unicode_range(self, value: str) -> FontFace:
        self._unicode_range = value
        return self

    def font_stretch(self, value: str) -> FontFace:
        self._stretch = value
        return self

    def build(self) -> str:
        lines = ["@font-face {", f"{INDENT}font-family: '{self.family}';"]
        if self._sources:
            # continuation sources line up under the first one
            separator = ",\n" + " " * len(f"{INDENT}src: ")
            lines.append(f"{INDENT}src: {separator.join(self._sources)};")
        if self._weight is not None:
            weight = str(self._weight)
            if self._weight_max is not None:
                weight += f" {self._weight_max}"
            lines.append(f"{INDENT}font-weight: {weight};")
        lines.append(f"{INDENT}font-style: {self._style};")
        lines.append(f"{INDENT}font-display: {self._display};")
        if self._unicode_range is not None:
            lines.append(f"{INDENT}unicode-range: {self._unicode_range};")
        if self._stretch is not None:
            lines.append(f"{INDENT}font-stretch: {self._stretch};")
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"FontFace({self.family!r}, sources={len(self._sources)})"


def font_face(family: str) -> FontFace:
    return FontFace(family)
