#!/usr/bin/env python3
"""
Example: Rendering Library Stylesheets to CSS.

This loads stylesheets from the built-in library, binds them to an
in-memory style engine and prints the generated CSS and class names.
Dynamic (function) values are resolved when the sheet is updated.

Usage:
    python examples/render_css.py
"""

from pathlib import Path

from chuk_mcp_stylesheet.compiler import compile_stylesheet
from chuk_mcp_stylesheet.engine import InMemoryStyleEngine, bind_classes
from chuk_mcp_stylesheet.stylesheets import StylesheetLoader


def main() -> None:
    """Render library stylesheets."""
    library_path = Path(__file__).parent.parent / "src/chuk_mcp_stylesheet/stylesheets/library"
    loader = StylesheetLoader(library_path=library_path)
    engine = InMemoryStyleEngine()

    print("Available stylesheets:")
    for meta in loader.list_stylesheets():
        print(f"  {meta.name}: {meta.description} ({meta.class_count} classes)")
    print()

    document = loader.get_stylesheet("buttons")
    if not document:
        print("Failed to load stylesheet")
        return

    bound = bind_classes(engine, document.compile())

    print("Bound classes:")
    print(f"  icon -> {bound['icon']!r}")
    button = bound["button"]
    for variant in button:
        print(f"  button({variant!r}) -> {button(variant)!r}")
    print()

    print("CSS:")
    print(engine.to_css())

    # Dynamic values come from a property bag
    dynamic = compile_stylesheet({"badge": {"color": lambda props: props["tone"]}})
    badge = bind_classes(engine, dynamic, dynamic=True)
    for tone in ["teal", "tomato"]:
        badge.update({"tone": tone})
        print(badge.sheet.to_css())


if __name__ == "__main__":
    main()
