"""CLI entry point for stylekit.

Prints (or writes) theme variables, stock @keyframes and @property blocks.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DEFAULT_DARK_CLASS
from .errors import StyleKitError


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stylekit",
        description="Generate CSS from stylekit themes and stock animations.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"stylekit {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_theme = sub.add_parser("theme", help="Emit theme custom properties")
    p_theme.add_argument("--preset", action="store_true", help="Start from the stock theme")
    p_theme.add_argument("--file", "-f", type=Path, help="JSON theme file to load")
    p_theme.add_argument("--dark-class", default=DEFAULT_DARK_CLASS, help="Class name for manual dark mode")
    p_theme.add_argument("--no-dark-class", action="store_true", help="Only emit the prefers-color-scheme block")
    p_theme.add_argument("--json", action="store_true", help="Emit the theme as a JSON theme file instead of CSS")
    p_theme.add_argument("--out", "-o", type=Path, help="Write to this file instead of stdout")

    p_kf = sub.add_parser("keyframes", help="Emit stock @keyframes")
    p_kf.add_argument("names", nargs="*", help="Animation names (fadeIn, spin, ...)")
    p_kf.add_argument("--all", action="store_true", help="Emit every stock animation")
    p_kf.add_argument("--list", action="store_true", help="List the stock animation names")
    p_kf.add_argument("--out", "-o", type=Path, help="Write to this file instead of stdout")

    p_prop = sub.add_parser("property", help="Emit an @property registration")
    p_prop.add_argument("name", help="Custom property name (-- is optional)")
    p_prop.add_argument("--syntax", "-s", required=True, help="Syntax descriptor, e.g. '<color>' or '*'")
    p_prop.add_argument("--inherits", action="store_true", help="Mark the property as inherited")
    p_prop.add_argument("--initial-value", "-i", help="Initial value")
    p_prop.add_argument("--out", "-o", type=Path, help="Write to this file instead of stdout")

    args = parser.parse_args(argv)

    if args.cmd == "theme":
        return _cmd_theme(args)
    if args.cmd == "keyframes":
        return _cmd_keyframes(args)
    if args.cmd == "property":
        return _cmd_property(args)

    parser.print_help()
    return 2


def _emit(css: str, out: Path | None) -> None:
    text = css if css.endswith("\n") else css + "\n"
    if out is None:
        sys.stdout.write(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    print(f"✓ Wrote {out}")


def _cmd_theme(args: Any) -> int:
    from .theme import Theme, ThemeFile, load_theme

    warnings: list[str] = []
    try:
        if args.file:
            result = load_theme(args.file)
            theme = result.theme
            warnings = result.warnings
        elif args.preset:
            theme = Theme.preset()
        else:
            print("Error: either --preset or --file must be provided", file=sys.stderr)
            return 2
    except StyleKitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        css = ThemeFile.from_theme(theme).model_dump_json(indent=2)
    elif args.no_dark_class:
        css = theme.to_css()
    else:
        css = theme.to_css() + "\n" + theme.to_dark_class_css(args.dark_class)

    _emit(css, args.out)

    if warnings:
        print(f"\nWarnings ({len(warnings)}):", file=sys.stderr)
        for w in warnings:
            print(f"  - {w}", file=sys.stderr)
    return 0


def _cmd_keyframes(args: Any) -> int:
    from .styles.keyframes import PRESETS, preset

    if args.list:
        for name in PRESETS:
            print(name)
        return 0

    names = list(PRESETS) if args.all else args.names
    if not names:
        print("Error: give one or more animation names, or --all", file=sys.stderr)
        return 2

    try:
        blocks = [preset(name).build() for name in names]
    except StyleKitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit("\n\n".join(blocks), args.out)
    return 0


def _cmd_property(args: Any) -> int:
    from .styles.at_property import register

    registration = register(args.name).syntax(args.syntax).inherits(bool(args.inherits))
    if args.initial_value is not None:
        registration.initial_value(args.initial_value)

    try:
        css = registration.build()
    except StyleKitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit(css, args.out)
    return 0


if __name__ == "__main__":
    app()
