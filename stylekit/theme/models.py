"""Theme files: JSON token definitions validated with pydantic."""

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..config import SCHEMA_VERSION
from ..errors import ThemeFileError
from .tokens import CATEGORIES, DARK_CATEGORIES, Theme

TokenValue = str | int | float


class ThemeFile(BaseModel):
    """On-disk theme definition.

    Every category is an ordered `name -> value` mapping; key order in the
    file is the order of the emitted custom properties.
    """

    schema_version: int = SCHEMA_VERSION
    name: str = "default"
    extends_preset: bool = False
    color: dict[str, TokenValue] = Field(default_factory=dict)
    spacing: dict[str, TokenValue] = Field(default_factory=dict)
    radius: dict[str, TokenValue] = Field(default_factory=dict)
    shadow: dict[str, TokenValue] = Field(default_factory=dict)
    font_size: dict[str, TokenValue] = Field(default_factory=dict)
    font_weight: dict[str, TokenValue] = Field(default_factory=dict)
    line_height: dict[str, TokenValue] = Field(default_factory=dict)
    breakpoint: dict[str, TokenValue] = Field(default_factory=dict)
    transition: dict[str, TokenValue] = Field(default_factory=dict)
    z: dict[str, TokenValue] = Field(default_factory=dict)
    custom: dict[str, TokenValue] = Field(default_factory=dict)
    dark: dict[str, dict[str, TokenValue]] = Field(default_factory=dict)

    @classmethod
    def from_theme(cls, theme: Theme) -> "ThemeFile":
        """Snapshot a Theme (including dark overrides) as a file model."""
        tokens = {category: theme.tokens(category) for category in CATEGORIES}
        return cls(
            name=theme.name,
            breakpoint=theme.tokens("breakpoint"),
            dark={c: theme.dark_tokens(c) for c in DARK_CATEGORIES if theme.dark_tokens(c)},
            **tokens,
        )


class ThemeLoadResult(BaseModel):
    """Result of loading a theme file."""

    model_config = {"arbitrary_types_allowed": True}

    path: Path
    theme: Theme
    warnings: list[str]


def build_theme(theme_file: ThemeFile) -> tuple[Theme, list[str]]:
    """Turn a validated ThemeFile into a Theme.

    Args:
        theme_file: Parsed theme file

    Returns:
        Tuple of (theme, warnings)
    """
    warnings: list[str] = []
    theme = Theme.preset() if theme_file.extends_preset else Theme()
    theme.name = theme_file.name

    for category in (*CATEGORIES, "breakpoint"):
        theme.update(category, getattr(theme_file, category))

    dark = theme.dark()
    for category, tokens in theme_file.dark.items():
        if category not in DARK_CATEGORIES:
            warnings.append(
                f"Dark overrides are only supported for {', '.join(DARK_CATEGORIES)}; "
                f"ignored {len(tokens)} '{category}' token(s)"
            )
            continue
        setter = dark.color if category == "color" else dark.custom
        for name, value in tokens.items():
            setter(name, value)

    return theme, warnings


def load_theme(path: Path) -> ThemeLoadResult:
    """Load and validate a JSON theme file.

    Args:
        path: Path to the theme JSON file

    Returns:
        ThemeLoadResult with the theme and any warnings

    Raises:
        ThemeFileError: If the file cannot be read, is not JSON, or fails validation
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ThemeFileError(f"Cannot read theme file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ThemeFileError(f"Theme file {path} is not valid JSON: {e}") from e

    try:
        theme_file = ThemeFile.model_validate(data)
    except ValidationError as e:
        raise ThemeFileError(f"Theme file {path} is invalid:\n{e}") from e

    if theme_file.schema_version > SCHEMA_VERSION:
        raise ThemeFileError(
            f"Theme file {path} uses schema version {theme_file.schema_version}; "
            f"this version of stylekit reads up to {SCHEMA_VERSION}"
        )

    theme, warnings = build_theme(theme_file)
    return ThemeLoadResult(path=path, theme=theme, warnings=warnings)


def write_theme(theme: Theme, path: Path) -> None:
    """Write a theme as a JSON theme file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(ThemeFile.from_theme(theme).model_dump_json(indent=2) + "\n", encoding="utf-8")
