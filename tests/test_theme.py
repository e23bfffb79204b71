"""Tests for theme tokens and theme files."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from stylekit.errors import ThemeFileError
from stylekit.theme import Theme, ThemeFile, load_theme, write_theme


class TestThemeTokens(unittest.TestCase):
    def test_getters_do_not_validate(self) -> None:
        t = Theme()
        self.assertEqual(t.color_var("does-not-exist").css(), "var(--color-does-not-exist)")
        self.assertEqual(t.spacing_var("4").css(), "var(--spacing-4)")
        self.assertEqual(t.font_size_var("lg").css(), "var(--font-size-lg)")
        self.assertEqual(t.z_var("50").css(), "var(--z-50)")
        self.assertEqual(t.token("brand").css(), "var(--brand)")

    def test_presence_checks(self) -> None:
        t = Theme().color("primary", "#4f46e5")
        self.assertTrue(t.has_color("primary"))
        self.assertFalse(t.has_color("secondary"))
        self.assertEqual(t.color_value("primary"), "#4f46e5")
        self.assertIsNone(t.color_value("secondary"))
        self.assertEqual(t.color_names(), ["primary"])

    def test_breakpoint_value(self) -> None:
        t = Theme().breakpoint("md", "768px")
        self.assertEqual(t.breakpoint_value("md"), "768px")
        self.assertEqual(t.breakpoint_value("huge"), "0")

    def test_to_css_category_order(self) -> None:
        t = (
            Theme()
            .custom("brand", "red")
            .z_index("10", 10)
            .spacing("4", "1rem")
            .color("bg", "#fff")
            .color("fg", "#000")
        )
        self.assertEqual(
            t.to_css(),
            ":root {\n"
            "  --color-bg: #fff;\n"
            "  --color-fg: #000;\n"
            "  --spacing-4: 1rem;\n"
            "  --z-10: 10;\n"
            "  --brand: red;\n"
            "}\n",
        )

    def test_breakpoints_not_emitted(self) -> None:
        t = Theme().breakpoint("md", "768px")
        self.assertEqual(t.to_css(), ":root {\n}\n")

    def test_dark_overrides(self) -> None:
        t = Theme().color("bg", "#fff").custom("glow", "none").dark().color("bg", "#000").custom("glow", "blue").done()
        self.assertEqual(
            t.to_css(),
            ":root {\n"
            "  --color-bg: #fff;\n"
            "  --glow: none;\n"
            "}\n"
            "\n"
            "@media (prefers-color-scheme: dark) {\n"
            "  :root {\n"
            "    --color-bg: #000;\n"
            "    --glow: blue;\n"
            "  }\n"
            "}\n",
        )
        self.assertEqual(
            t.to_dark_class_css("night"),
            ".night {\n  --color-bg: #000;\n  --glow: blue;\n}\n",
        )

    def test_no_dark_overrides(self) -> None:
        t = Theme().color("bg", "#fff")
        self.assertNotIn("@media", t.to_css())
        self.assertEqual(t.to_dark_class_css(), "")

    def test_full_css(self) -> None:
        t = Theme().color("bg", "#fff").dark().color("bg", "#000").done()
        self.assertEqual(t.to_full_css(), t.to_css() + "\n" + t.to_dark_class_css("dark"))
        self.assertIn(".dark {\n", t.to_full_css())


class TestPreset(unittest.TestCase):
    def test_preset_tokens(self) -> None:
        t = Theme.preset()
        self.assertEqual(t.color_value("primary-500"), "#6366f1")
        self.assertEqual(t.spacing_value("0.5"), "0.125rem")
        self.assertEqual(t.spacing_value("4"), "1rem")
        self.assertEqual(t.spacing_value("96"), "24rem")
        self.assertEqual(t.breakpoint_value("2xl"), "1536px")
        self.assertEqual(t.tokens("font_weight")["semibold"], "600")
        self.assertEqual(t.tokens("z")["auto"], "auto")

    def test_preset_css_layout(self) -> None:
        css = Theme.preset().to_css()
        self.assertTrue(css.startswith(":root {\n  --color-white: #ffffff;\n"))
        self.assertIn("  --spacing-px: 1px;\n", css)
        self.assertIn("  --radius-DEFAULT: 0.25rem;\n", css)
        self.assertIn("  --line-height-snug: 1.375;\n", css)
        self.assertIn("    --color-background: #09090b;\n", css)
        self.assertLess(css.index("--color-info"), css.index("--spacing-0"))
        self.assertLess(css.index("--transition-none"), css.index("--z-0"))

    def test_preset_spacing_order(self) -> None:
        keys = list(Theme.preset().tokens("spacing"))
        self.assertEqual(keys[:5], ["0", "px", "0.5", "1", "1.5"])


class TestThemeFile(unittest.TestCase):
    def test_load_theme(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.json"
            path.write_text(
                json.dumps(
                    {
                        "schema_version": 1,
                        "name": "brand",
                        "color": {"primary": "#ff0066", "bg": "#fff"},
                        "font_weight": {"bold": 700},
                        "custom": {"header-height": "64px"},
                        "dark": {"color": {"bg": "#111"}, "spacing": {"4": "2rem"}},
                    }
                ),
                encoding="utf-8",
            )

            result = load_theme(path)
            self.assertEqual(result.theme.name, "brand")
            css = result.theme.to_css()
            self.assertIn("  --color-primary: #ff0066;\n", css)
            self.assertIn("  --font-weight-bold: 700;\n", css)
            self.assertIn("  --header-height: 64px;\n", css)
            self.assertIn("    --color-bg: #111;\n", css)
            self.assertEqual(len(result.warnings), 1)
            self.assertIn("spacing", result.warnings[0])

    def test_extends_preset(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.json"
            path.write_text(json.dumps({"extends_preset": True, "color": {"ring": "#000"}}), encoding="utf-8")
            theme = load_theme(path).theme
            self.assertEqual(theme.color_value("ring"), "#000")
            self.assertEqual(theme.color_value("gray-50"), "#fafafa")

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ThemeFileError):
                load_theme(path)

    def test_validation_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.json"
            path.write_text(json.dumps({"color": ["red"]}), encoding="utf-8")
            with self.assertRaises(ThemeFileError):
                load_theme(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(ThemeFileError):
            load_theme(Path("/nonexistent/theme.json"))

    def test_newer_schema_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "theme.json"
            path.write_text(json.dumps({"schema_version": 99}), encoding="utf-8")
            with self.assertRaises(ThemeFileError):
                load_theme(path)

    def test_write_then_load_preserves_css(self) -> None:
        original = Theme("brand").color("a", "#111").spacing("1", "4px").dark().custom("glow", "red").done()
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "out" / "theme.json"
            write_theme(original, path)
            loaded = load_theme(path).theme
        self.assertEqual(loaded.to_css(), original.to_css())

    def test_from_theme(self) -> None:
        theme_file = ThemeFile.from_theme(Theme().color("a", "#111"))
        self.assertEqual(theme_file.color, {"a": "#111"})
        self.assertEqual(theme_file.dark, {})


if __name__ == "__main__":
    unittest.main()
