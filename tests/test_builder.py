"""Tests for the fluent Style / Rule builder."""

from __future__ import annotations

import threading
import unittest

from stylekit.errors import MissingSelectorError, UsageError
from stylekit.styles.builder import Rule, Style, rule, style, unique_class
from stylekit.styles.selectors import cls
from stylekit.values.colors import black, blue, red, white
from stylekit.values.functions import rotate, translate_x
from stylekit.values.keywords import ease, ease_out, flex
from stylekit.values.motion import animation, infinite, prop_color, prop_transform, trans, transition
from stylekit.values.units import deg, percent, px, rem, s, seconds


class TestBuild(unittest.TestCase):
    def test_build_is_idempotent(self) -> None:
        b = style().display(flex).padding(px(10))
        self.assertEqual(b.build(), b.build())
        self.assertEqual(b.build(), "display: flex; padding: 10px;")

    def test_insertion_order_not_alphabetical(self) -> None:
        b = style().set("z-index", 1).set("color", red).set("align-items", "center")
        self.assertEqual(b.build(), "z-index: 1; color: red; align-items: center;")

    def test_overwrite_keeps_original_position(self) -> None:
        b = style().set("color", "red").set("margin", "0").set("color", "blue")
        out = b.build()
        self.assertEqual(out, "color: blue; margin: 0;")
        self.assertEqual(out.count("color:"), 1)
        self.assertNotIn("red", out)

    def test_empty_builder(self) -> None:
        self.assertEqual(style().build(), "")
        self.assertTrue(style().is_empty())

    def test_shorthand_and_longhand_coexist(self) -> None:
        b = style().margin(px(0)).margin_top(px(4))
        self.assertEqual(b.build(), "margin: 0px; margin-top: 4px;")

    def test_style_is_a_value(self) -> None:
        b = style().color(white)
        self.assertEqual(str(b), "color: white;")
        self.assertEqual(b.css(), b.build())

    def test_chaining_returns_same_instance(self) -> None:
        b = style()
        self.assertIs(b.color(red), b)
        r = rule(".x")
        self.assertIs(r.color(red), r)
        self.assertIsInstance(r.padding(px(1)), Rule)


class TestTypedSetters(unittest.TestCase):
    def test_multi_value_setters_space_join(self) -> None:
        self.assertEqual(style().margin(px(10), px(20)).build(), "margin: 10px 20px;")
        self.assertEqual(
            style().padding(px(1), px(2), px(3), px(4)).build(),
            "padding: 1px 2px 3px 4px;",
        )
        self.assertEqual(style().border(px(1), "solid", black).build(), "border: 1px solid black;")
        self.assertEqual(
            style().transform(translate_x(px(5)), rotate(deg(45))).build(),
            "transform: translateX(5px) rotate(45deg);",
        )

    def test_snake_case_names(self) -> None:
        self.assertEqual(style().background_color(blue).build(), "background-color: blue;")
        self.assertEqual(style().z_index(10).build(), "z-index: 10;")
        self.assertEqual(
            style().webkit_font_smoothing("antialiased").build(),
            "-webkit-font-smoothing: antialiased;",
        )

    def test_numbers_and_strings(self) -> None:
        self.assertEqual(style().opacity(0.5).build(), "opacity: 0.5;")
        self.assertEqual(style().opacity(1.0).build(), "opacity: 1;")
        self.assertEqual(style().font_family("Inter, sans-serif").build(), "font-family: Inter, sans-serif;")

    def test_unsafe_escape_hatch(self) -> None:
        self.assertEqual(style().unsafe("-ms-overflow-style", "none").build(), "-ms-overflow-style: none;")
        self.assertEqual(style().prop("field-sizing", "content").build(), "field-sizing: content;")


class TestSpecialSetters(unittest.TestCase):
    def test_custom_property(self) -> None:
        self.assertEqual(style().var("gap", rem(1)).build(), "--gap: 1rem;")
        self.assertEqual(style().var("--gap", rem(1)).build(), "--gap: 1rem;")

    def test_axis_helpers(self) -> None:
        self.assertEqual(
            style().margin_x(px(8)).build(),
            "margin-left: 8px; margin-right: 8px;",
        )
        self.assertEqual(
            style().padding_y(px(4)).build(),
            "padding-top: 4px; padding-bottom: 4px;",
        )

    def test_grid_placement(self) -> None:
        self.assertEqual(style().grid_column(1, 3).build(), "grid-column: 1 / 3;")
        self.assertEqual(style().grid_row("span 2").build(), "grid-row: span 2;")
        self.assertEqual(
            style().grid_template_areas("header header", "side main").build(),
            'grid-template-areas: "header header" "side main";',
        )

    def test_aspect_ratio(self) -> None:
        self.assertEqual(style().aspect_ratio(16, 9).build(), "aspect-ratio: 16 / 9;")

    def test_content_quotes_strings(self) -> None:
        self.assertEqual(style().content("→").build(), "content: '→';")

    def test_transition_single(self) -> None:
        b = style().transition(prop_color, seconds(0.3), ease_out)
        self.assertEqual(b.build(), "transition: color 0.3s ease-out;")

    def test_transition_layers_comma_joined(self) -> None:
        b = style().transition(trans(prop_color, s(0.3)), trans(prop_transform, s(0.2), ease))
        self.assertEqual(b.build(), "transition: color 0.3s, transform 0.2s ease;")

    def test_transition_value(self) -> None:
        b = style().transition(transition(prop_color, s(1)))
        self.assertEqual(b.build(), "transition: color 1s;")

    def test_animation_layers(self) -> None:
        b = style().animation(animation("spin", s(1)).iteration_count(infinite), animation("fadeIn", s(0.5)))
        self.assertEqual(b.build(), "animation: spin 1s infinite, fadeIn 0.5s;")

    def test_container(self) -> None:
        self.assertEqual(style().container("card", "inline-size").build(), "container: card / inline-size;")


class TestShortcuts(unittest.TestCase):
    def test_flex_center(self) -> None:
        self.assertEqual(
            style().flex_center().build(),
            "display: flex; justify-content: center; align-items: center;",
        )

    def test_grid(self) -> None:
        self.assertEqual(
            style().grid(3, px(16)).build(),
            "display: grid; grid-template-columns: repeat(3, 1fr); gap: 16px;",
        )

    def test_truncate(self) -> None:
        self.assertEqual(
            style().truncate().build(),
            "overflow: hidden; text-overflow: ellipsis; white-space: nowrap;",
        )

    def test_absolute_fill_and_center(self) -> None:
        self.assertEqual(style().absolute_fill().build(), "position: absolute; inset: 0;")
        self.assertEqual(style().center_x().bold().build(), "margin: 0 auto; font-weight: 700;")

    def test_full(self) -> None:
        self.assertEqual(style().full().build(), "width: 100%; height: 100%;")
        self.assertEqual(style().width(percent(50)).full_width().build(), "width: 100%;")


class TestRule(unittest.TestCase):
    def test_rule_wrapping(self) -> None:
        self.assertEqual(rule(".btn").set("padding", "10px").to_rule(), ".btn { padding: 10px; }")

    def test_rule_with_several_declarations(self) -> None:
        r = rule(".btn").padding(px(10), px(20)).color(white)
        self.assertEqual(r.to_rule(), ".btn { padding: 10px 20px; color: white; }")

    def test_empty_rule(self) -> None:
        self.assertEqual(rule("p").to_rule(), "p { }")

    def test_rule_from_selector_builder(self) -> None:
        r = rule(cls("card").hover()).color(red)
        self.assertEqual(r.to_rule(), ".card:hover { color: red; }")

    def test_missing_selector_raises(self) -> None:
        b = style().color(red)
        with self.assertRaises(MissingSelectorError) as ctx:
            b.to_rule()
        self.assertIsInstance(ctx.exception, UsageError)
        self.assertIn("rule(selector)", str(ctx.exception))
        # State is unaffected by the failed call
        self.assertEqual(b.build(), "color: red;")


class TestMapOperations(unittest.TestCase):
    def test_to_map_is_a_copy(self) -> None:
        b = style().color(red)
        m = b.to_map()
        m["color"] = "blue"
        self.assertEqual(b.build(), "color: red;")

    def test_len_and_contains(self) -> None:
        b = style().color(red).margin(px(0))
        self.assertEqual(len(b), 2)
        self.assertIn("color", b)
        self.assertNotIn("padding", b)

    def test_merge_last_write_wins(self) -> None:
        base = style().color(red).margin(px(0))
        base.merge(style().color(blue).padding(px(2)))
        self.assertEqual(base.build(), "color: blue; margin: 0px; padding: 2px;")

    def test_copy_is_independent(self) -> None:
        original = rule(".a").color(red)
        clone = original.copy()
        clone.color(blue)
        self.assertEqual(original.to_rule(), ".a { color: red; }")
        self.assertEqual(clone.to_rule(), ".a { color: blue; }")
        self.assertIsInstance(clone, Rule)

    def test_block_lines(self) -> None:
        lines = style().color(red).block(".x")
        self.assertEqual(lines, ["  .x {", "    color: red;", "  }"])


class TestUniqueClass(unittest.TestCase):
    def test_names_are_unique_and_prefixed(self) -> None:
        a = unique_class()
        b = unique_class()
        self.assertNotEqual(a, b)
        self.assertTrue(a.startswith("sk-"))
        self.assertTrue(unique_class("btn").startswith("btn-"))

    def test_concurrent_generation(self) -> None:
        names: list[str] = []
        lock = threading.Lock()

        def worker() -> None:
            local = [unique_class() for _ in range(200)]
            with lock:
                names.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(names), len(set(names)))


class TestStyleClass(unittest.TestCase):
    def test_generated_setter_metadata(self) -> None:
        self.assertEqual(Style.background_color.__name__, "background_color")
        self.assertIn("background-color", Style.background_color.__doc__)


if __name__ == "__main__":
    unittest.main()
