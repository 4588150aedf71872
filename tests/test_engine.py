"""
Tests for the style engine layer.

Tests cover:
- InMemoryStyleEngine class names and CSS rendering
- Dynamic (function) values and linked sheets
- bind_classes for plain and variant classes
"""

from chuk_mcp_stylesheet.compiler import VariantResolver, compile_stylesheet
from chuk_mcp_stylesheet.engine import (
    InMemoryStyleEngine,
    StyleEngine,
    StyleSheet,
    bind_classes,
    format_value,
    hyphenate,
)


class TestHelpers:
    """Tests for value formatting helpers."""

    def test_hyphenate(self):
        """camelCase properties become CSS property names."""
        assert hyphenate("borderTopWidth") == "border-top-width"
        assert hyphenate("color") == "color"
        assert hyphenate("-webkit-transition") == "-webkit-transition"

    def test_format_value(self):
        """Lists are comma-joined, nested lists space-joined."""
        assert format_value(0) == "0"
        assert format_value("red") == "red"
        assert format_value(["a", "b"]) == "a, b"
        assert format_value([["1px", "solid", "red"], ["2px", "dashed"]]) == (
            "1px solid red, 2px dashed"
        )


class TestInMemoryStyleEngine:
    """Tests for InMemoryStyleEngine."""

    def test_protocols(self):
        """The engine and its sheets satisfy the engine protocols."""
        engine = InMemoryStyleEngine()
        sheet = engine.create_style_sheet({"box": {"color": "red"}})
        assert isinstance(engine, StyleEngine)
        assert isinstance(sheet, StyleSheet)

    def test_generated_class_names(self):
        """Class names include the sheet and rule index."""
        engine = InMemoryStyleEngine()
        first = engine.create_style_sheet({"a": {"color": "red"}, "b": {"color": "blue"}})
        second = engine.create_style_sheet({"a": {"color": "red"}})

        assert first.classes == {"a": "a-0-0", "b": "b-0-1"}
        assert second.classes == {"a": "a-1-0"}

    def test_attach_and_detach(self):
        """Only attached sheets are rendered by the engine."""
        engine = InMemoryStyleEngine()
        sheet = engine.create_style_sheet({"a": {"color": "red"}})

        assert not sheet.attached
        assert engine.to_css() == ""

        sheet.attach()
        assert engine.attached_sheets() == [sheet]
        assert ".a-0-0" in engine.to_css()

        sheet.detach()
        assert engine.attached_sheets() == []

    def test_render_css(self):
        """Pseudo-selectors expand '&' and media queries wrap rules."""
        engine = InMemoryStyleEngine()
        sheet = engine.create_style_sheet(
            {
                "box": {
                    "color": "red",
                    "fontSize": "12px",
                    "&:hover": {"color": "blue"},
                    "@media (max-width: 600px)": {"color": "green"},
                }
            }
        )

        assert sheet.to_css() == (
            ".box-0-0 {\n"
            "  color: red;\n"
            "  font-size: 12px;\n"
            "}\n"
            ".box-0-0:hover {\n"
            "  color: blue;\n"
            "}\n"
            "@media (max-width: 600px) {\n"
            "  .box-0-0 {\n"
            "    color: green;\n"
            "  }\n"
            "}\n"
        )

    def test_render_compiled_stylesheet(self, button_description):
        """A compiled stylesheet renders every rule."""
        compiled = compile_stylesheet(button_description)
        sheet = InMemoryStyleEngine().create_style_sheet(compiled.rule_tree)
        css = sheet.to_css()

        assert ".button-0-0:hover {" in css
        assert ".button-primary-0-1 {\n  color: white;\n}" in css
        assert ".icon-0-2 {\n  width: 16px;\n}" in css

    def test_dynamic_values_linked(self):
        """Linked sheets resolve function values on update."""
        sheet = InMemoryStyleEngine().create_style_sheet(
            {"box": {"color": lambda props: props["color"], "margin": 0}},
            link=True,
        )

        assert sheet.to_css() == ".box-0-0 {\n  margin: 0;\n}\n"

        sheet.update({"color": "red"})
        assert "color: red;" in sheet.to_css()

        sheet.update({"color": "blue"})
        assert "color: blue;" in sheet.to_css()

    def test_dynamic_values_unlinked(self):
        """Unlinked sheets ignore updates."""
        sheet = InMemoryStyleEngine().create_style_sheet(
            {"box": {"color": lambda props: props["color"]}},
        )
        sheet.update({"color": "red"})
        assert sheet.to_css() == ""


class TestBindClasses:
    """Tests for bind_classes."""

    def test_plain_and_variant_classes(self, button_description):
        """Plain classes bind to strings, variant classes to resolvers."""
        compiled = compile_stylesheet(button_description)
        engine = InMemoryStyleEngine()
        bound = bind_classes(engine, compiled)

        assert bound.sheet.attached
        assert bound["icon"] == "icon-0-2"

        resolver = bound["button"]
        assert isinstance(resolver, VariantResolver)
        assert resolver("primary") == "button-0-0 button-primary-0-1"
        assert resolver("plain") == "button-0-0"
        assert resolver("missing") is None

    def test_only_authored_classes_bound(self, button_description):
        """Variant classes are reached through their base class only."""
        bound = bind_classes(InMemoryStyleEngine(), compile_stylesheet(button_description))
        assert set(bound.classes) == {"button", "icon"}
        assert "button-primary" not in bound

    def test_dynamic_binding(self):
        """Dynamic binding links the sheet and forwards updates."""
        compiled = compile_stylesheet({"box": {"color": lambda props: props["tone"]}})
        bound = bind_classes(InMemoryStyleEngine(), compiled, dynamic=True)

        assert bound.sheet.link
        bound.update({"tone": "teal"})
        assert "color: teal;" in bound.sheet.to_css()

    def test_detach(self):
        """Detaching releases the sheet from the engine."""
        engine = InMemoryStyleEngine()
        bound = bind_classes(engine, compile_stylesheet({"box": {"color": "red"}}))
        bound.detach()
        assert engine.attached_sheets() == []
