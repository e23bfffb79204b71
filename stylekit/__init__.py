"""stylekit - fluent builders that generate CSS text."""

__version__ = "0.1.0"

from .errors import IncompletePropertyError, MissingSelectorError, StyleKitError, ThemeFileError, UsageError
from .styles import (
    ContainerQuery,
    FontFace,
    Keyframes,
    LayerBuilder,
    MediaQuery,
    PropertyRegistration,
    Rule,
    Selector,
    Style,
    Stylesheet,
    Supports,
    register,
    rule,
    select,
    style,
    unique_class,
)
from .styles.container import container
from .styles.font_face import font_face
from .styles.keyframes import keyframes
from .styles.layer import layer
from .styles.media import media
from .styles.stylesheet import stylesheet
from .styles.supports import supports
from .theme import Theme, load_theme

__all__ = [
    "__version__",
    "Style",
    "Rule",
    "style",
    "rule",
    "unique_class",
    "Selector",
    "select",
    "Keyframes",
    "keyframes",
    "PropertyRegistration",
    "register",
    "MediaQuery",
    "media",
    "Supports",
    "supports",
    "ContainerQuery",
    "container",
    "FontFace",
    "font_face",
    "LayerBuilder",
    "layer",
    "Stylesheet",
    "stylesheet",
    "Theme",
    "load_theme",
    "StyleKitError",
    "UsageError",
    "MissingSelectorError",
    "IncompletePropertyError",
    "ThemeFileError",
]
