"""Tests for cascade layers."""

from __future__ import annotations

import unittest

from stylekit.styles import layer as layers
from stylekit.styles.builder import rule
from stylekit.styles.layer import LayerBuilder, layer
from stylekit.styles.media import md
from stylekit.values.units import px


class TestLayerStatements(unittest.TestCase):
    def test_order_and_declare(self) -> None:
        self.assertEqual(layers.order("reset", "base", "components"), "@layer reset, base, components;")
        self.assertEqual(layers.declare("utilities"), "@layer utilities;")

    def test_import_into(self) -> None:
        self.assertEqual(layers.import_into("base", "/base.css"), "@import url('/base.css') layer(base);")
        self.assertEqual(
            layers.import_into("print", "/print.css", "print"),
            "@import url('/print.css') layer(print) print;",
        )


class TestLayerBlocks(unittest.TestCase):
    def test_layer_with_rules_and_raw_css(self) -> None:
        out = layer("base", rule("body").margin(0), "a { color: inherit; }")
        self.assertEqual(out, "@layer base {\n  body { margin: 0; }\n  a { color: inherit; }\n}")

    def test_anonymous(self) -> None:
        self.assertEqual(layers.anonymous(rule(".x").gap(px(2))), "@layer {\n  .x { gap: 2px; }\n}")

    def test_builder_indents_nested_blocks(self) -> None:
        nested = md().rule(".col", rule(".col").width("50%"))
        out = layers.named("components").rule(rule(".card").padding(px(8))).media(nested.build()).build()
        self.assertEqual(
            out,
            "@layer components {\n"
            "  .card { padding: 8px; }\n"
            "  @media (min-width: 768px) {\n"
            "    .col {\n"
            "      width: 50%;\n"
            "    }\n"
            "  }\n"
            "}",
        )

    def test_add_accepts_values(self) -> None:
        out = LayerBuilder("m").add(md()).build()
        self.assertEqual(out, "@layer m {\n  @media (min-width: 768px) {\n  }\n}")


if __name__ == "__main__":
    unittest.main()
