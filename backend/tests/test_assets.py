"""
Campus Web — Asset Registry Tests
===================================

What we test:
    ✅ Fresh registry is empty
    ✅ Descending priority with stable ties
    ✅ Rendering is repeatable and non-destructive
    ✅ Duplicates are kept
    ✅ Non-numeric priorities are stored as 0
"""

import pytest

from campusweb.presentation.assets import AssetEntry, AssetRegistry, script_tag, stylesheet


class TestAssetRegistry:
    def setup_method(self):
        self.registry = AssetRegistry()

    def test_new_registry_is_empty(self):
        assert self.registry.styles == []
        assert self.registry.scripts == []
        assert self.registry.is_empty()
        assert self.registry.render_styles() == ""
        assert self.registry.render_scripts() == ""

    def test_scripts_render_by_descending_priority_with_stable_ties(self):
        for content, priority in [("A", 1), ("B", 3), ("C", 3), ("D", 0)]:
            self.registry.add_script(content, priority)

        assert self.registry.render_scripts() == "B\nC\nA\nD"

    def test_styles_use_the_same_ordering(self):
        self.registry.add_style("low", -5)
        self.registry.add_style("first-default")
        self.registry.add_style("high", 10)
        self.registry.add_style("second-default")

        assert self.registry.render_styles().split("\n") == [
            "high",
            "first-default",
            "second-default",
            "low",
        ]

    def test_render_is_idempotent_and_non_destructive(self):
        self.registry.add_style("a", 1)
        self.registry.add_style("b", 2)

        first = self.registry.render_styles()
        second = self.registry.render_styles()

        assert first == second == "b\na"
        assert self.registry.styles == [AssetEntry("a", 1), AssetEntry("b", 2)]

    def test_duplicates_are_preserved(self):
        self.registry.add_style("same")
        self.registry.add_style("same")
        assert self.registry.render_styles() == "same\nsame"

    def test_styles_and_scripts_are_separate(self):
        self.registry.add_style("style")
        self.registry.add_script("script")
        assert self.registry.render_styles() == "style"
        assert self.registry.render_scripts() == "script"

    @pytest.mark.parametrize(
        "priority", ["5", None, object(), True, float("inf"), float("-inf"), float("nan")]
    )
    def test_non_numeric_priority_is_stored_as_zero(self, priority):
        self.registry.add_style("odd", priority)
        assert self.registry.styles[0].priority == 0

    def test_float_priority_is_truncated(self):
        self.registry.add_script("x", 2.9)
        assert self.registry.scripts[0].priority == 2

    def test_later_registrations_appear_in_next_render(self):
        self.registry.add_style("one")
        assert self.registry.render_styles() == "one"
        self.registry.add_style("two", 1)
        assert self.registry.render_styles() == "two\none"


class TestFragmentHelpers:
    def test_stylesheet(self):
        assert stylesheet("/css/catalog.css") == '<link rel="stylesheet" href="/css/catalog.css">'

    def test_stylesheet_escapes_href(self):
        assert '"' not in stylesheet('/css/x".css').split('href="')[1][:-2]

    def test_script_tag(self):
        assert script_tag("/js/main.js") == '<script src="/js/main.js"></script>'
        assert script_tag("/js/main.js", defer=True) == '<script src="/js/main.js" defer></script>'
