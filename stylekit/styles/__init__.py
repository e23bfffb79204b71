"""Builders that produce CSS text: rules, selectors, keyframes, at-rules.

Factories named after their own submodule (`media()`, `keyframes()`,
`supports()`, `container()`, `font_face()`, `layer()`, `stylesheet()`) are not
re-exported here, so `stylekit.styles.media` and friends stay modules. Import
them from the submodule or from the top-level `stylekit` package.
"""

from .at_property import PropertyRegistration, properties_css, register
from .builder import Rule, Style, rule, style, unique_class
from .container import ContainerQuery
from .font_face import FontFace
from .keyframes import PRESETS, Keyframes
from .layer import LayerBuilder
from .media import MediaQuery
from .selectors import Selector, cls, id_, select, tag, universal
from .stylesheet import Stylesheet
from .supports import Supports

__all__ = [
    "Style",
    "Rule",
    "style",
    "rule",
    "unique_class",
    "Selector",
    "select",
    "tag",
    "cls",
    "id_",
    "universal",
    "Keyframes",
    "PRESETS",
    "PropertyRegistration",
    "register",
    "properties_css",
    "MediaQuery",
    "Supports",
    "ContainerQuery",
    "FontFace",
    "LayerBuilder",
    "Stylesheet",
]
