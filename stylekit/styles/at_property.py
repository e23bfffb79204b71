"""@property registrations (typed custom properties)."""

from __future__ import annotations

from ..config import INDENT
from ..errors import IncompletePropertyError
from ..values.base import CSSInput, Value, css_text


class PropertyRegistration(Value):
    """Builder for one `@property --name { ... }` block.

    Descriptors are checked only when the block is built; a failed build
    leaves the registration untouched so it can be completed and rebuilt.
    """

    def __init__(self, name: str) -> None:
        self.name = name if name.startswith("--") else "--" + name
        self._syntax: str | None = None
        self._inherits: bool | None = None
        self._initial_value: str | None = None

    def syntax(self, syntax: str) -> PropertyRegistration:
        self._syntax = syntax
        return self

    def inherits(self, inherits: bool = True) -> PropertyRegistration:
        self._inherits = inherits
        return self

    def initial_value(self, value: CSSInput) -> PropertyRegistration:
        self._initial_value = css_text(value)
        return self

    def build(self) -> str:
        """Render the block.

        Returns:
            `@property` block text

        Raises:
            IncompletePropertyError: If syntax or inherits was never set, or the
                initial value is missing while syntax is not `*`
        """
        if self._syntax is None:
            raise IncompletePropertyError(f"@property {self.name} requires a syntax descriptor")
        if self._inherits is None:
            raise IncompletePropertyError(f"@property {self.name} requires inherits to be set")
        if self._initial_value is None and self._syntax != "*":
            raise IncompletePropertyError(
                f"@property {self.name} with syntax '{self._syntax}' requires an initial-value"
            )

        lines = [
            f"@property {self.name} {{",
            f"{INDENT}syntax: '{self._syntax}';",
            f"{INDENT}inherits: {'true' if self._inherits else 'false'};",
        ]
        if self._initial_value is not None:
            lines.append(f"{INDENT}initial-value: {self._initial_value};")
        lines.append("}")
        return "\n".join(lines)

    def css(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"PropertyRegistration({self.name!r}, syntax={self._syntax!r})"


def register(name: str) -> PropertyRegistration:
    return PropertyRegistration(name)


def color_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<color>")


def length_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<length>")


def number_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<number>")


def percentage_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<percentage>")


def integer_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<integer>")


def angle_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<angle>")


def time_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<time>")


def image_property(name: str) -> PropertyRegistration:
    return register(name).syntax("<image>")


def properties_css(*registrations: PropertyRegistration) -> str:
    """Build every registration, separated by a blank line."""
    return "\n\n".join(r.build() for r in registrations)
