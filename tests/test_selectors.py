"""Tests for selector composition."""

from __future__ import annotations

import unittest

from stylekit.errors import UsageError
from stylekit.styles import selectors as sel
from stylekit.styles.selectors import cls, id_, select, tag, universal


class TestSelectorBuilder(unittest.TestCase):
    def test_compound_selector(self) -> None:
        self.assertEqual(tag("button").cls("primary").hover().build(), "button.primary:hover")

    def test_combinators(self) -> None:
        self.assertEqual(cls("card").child().tag("img").build(), ".card > img")
        self.assertEqual(cls("nav").descendant("a").build(), ".nav a")
        self.assertEqual(tag("h1").adjacent(tag("p")).build(), "h1 + p")
        self.assertEqual(tag("h1").sibling("p").build(), "h1 ~ p")
        self.assertEqual(tag("h1").or_(tag("h2")).build(), "h1, h2")

    def test_id_and_universal(self) -> None:
        self.assertEqual(id_("main").descendant(universal()).build(), "#main *")

    def test_attributes(self) -> None:
        self.assertEqual(tag("input").attr("disabled").build(), "input[disabled]")
        self.assertEqual(tag("input").attr("type", "text").build(), 'input[type="text"]')
        self.assertEqual(tag("a").attr("href", "https", op="^=").build(), 'a[href^="https"]')

    def test_attribute_value_has_single_operator(self) -> None:
        out = tag("input").attr("type", "checkbox").checked().adjacent("label").build()
        self.assertEqual(out, 'input[type="checkbox"]:checked + label')
        self.assertNotIn("==", out)
        self.assertEqual(cls("btn").raw(sel.attr_starts_with("data-size", "l")).build(), '.btn[data-size^="l"]')

    def test_pseudo_elements(self) -> None:
        self.assertEqual(cls("tip").after().build(), ".tip::after")
        self.assertEqual(cls("x").pseudo_element("marker").build(), ".x::marker")

    def test_functional_pseudo_classes(self) -> None:
        self.assertEqual(tag("li").not_(sel.last_child).build(), "li:not(:last-child)")
        self.assertEqual(cls("card").has(cls("icon"), ".badge").build(), ".card:has(.icon, .badge)")
        self.assertEqual(select().is_("h1", "h2").build(), ":is(h1, h2)")

    def test_str_and_css(self) -> None:
        s = cls("a")
        self.assertEqual(str(s), ".a")
        self.assertEqual(s.css(), s.build())

    def test_no_validation(self) -> None:
        nested = select().not_(sel.not_(".a")).build()
        self.assertEqual(nested, ":not(:not(.a))")


class TestSelectorFunctions(unittest.TestCase):
    def test_has_is_where_not(self) -> None:
        self.assertEqual(sel.has(".active"), ":has(.active)")
        self.assertEqual(sel.is_(".a", ".b"), ":is(.a, .b)")
        self.assertEqual(sel.where(cls("x")), ":where(.x)")
        self.assertEqual(sel.not_(".hidden"), ":not(.hidden)")

    def test_functional_requires_argument(self) -> None:
        for fn in (sel.has, sel.is_, sel.where, sel.not_):
            with self.subTest(fn=fn.__name__):
                with self.assertRaises(UsageError):
                    fn()

    def test_nth(self) -> None:
        self.assertEqual(sel.nth_child("2n+1"), ":nth-child(2n+1)")
        self.assertEqual(sel.nth_child(3), ":nth-child(3)")
        self.assertEqual(sel.nth_last_of_type(2), ":nth-last-of-type(2)")

    def test_constants(self) -> None:
        self.assertEqual(sel.first_child, ":first-child")
        self.assertEqual(sel.focus_visible, ":focus-visible")
        self.assertEqual(sel.before, "::before")
        self.assertEqual(sel.first_letter, "::first-letter")

    def test_attribute_helpers(self) -> None:
        self.assertEqual(sel.attr("disabled"), "[disabled]")
        self.assertEqual(sel.attr_equals("type", "button"), '[type="button"]')
        self.assertEqual(sel.attr_contains("class", "btn"), '[class*="btn"]')
        self.assertEqual(sel.attr_ends_with("href", ".pdf"), '[href$=".pdf"]')
        self.assertEqual(sel.attr_contains_word("rel", "external"), '[rel~="external"]')
        self.assertEqual(sel.attr_starts_with_prefix("lang", "en"), '[lang|="en"]')

    def test_combinator_helpers(self) -> None:
        self.assertEqual(sel.descendant(".nav", "a"), ".nav a")
        self.assertEqual(sel.child(cls("list"), "li"), ".list > li")
        self.assertEqual(sel.adjacent("h1", "p"), "h1 + p")
        self.assertEqual(sel.sibling("h1", "p"), "h1 ~ p")

    def test_view_transitions(self) -> None:
        self.assertEqual(sel.view_transition_old("main"), "::view-transition-old(main)")
        self.assertEqual(sel.view_transition_group_all, "::view-transition-group(*)")

    def test_scrollbars(self) -> None:
        self.assertEqual(sel.scrollbar, "::-webkit-scrollbar")
        self.assertEqual(sel.scrollbar_thumb_hover_of(".content"), ".content::-webkit-scrollbar-thumb:hover")


if __name__ == "__main__":
    unittest.main()
