"""Exceptions raised by stylekit builders."""


class StyleKitError(Exception):
    """Base class for all stylekit errors."""


class UsageError(StyleKitError, ValueError):
    """Raised when a builder is used without a required precondition."""


class MissingSelectorError(UsageError):
    """Raised by to_rule() on a builder created without a selector."""

    def __init__(self) -> None:
        super().__init__(
            "to_rule() requires a selector; create the builder with rule(selector) instead of style()"
        )


class IncompletePropertyError(UsageError):
    """Raised when an @property registration is built with missing descriptors."""


class ThemeFileError(StyleKitError):
    """Raised when a theme file cannot be read or does not validate."""
