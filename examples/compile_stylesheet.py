#!/usr/bin/env python3
"""
Example: Compiling a Stylesheet Description.

This demonstrates how a nested stylesheet description compiles into a
JSS-style rule tree plus a variant table, and how compile errors report
the offending key.

Usage:
    python examples/compile_stylesheet.py
"""

import json

from chuk_mcp_stylesheet.compiler import StylesheetError, compile_stylesheet, validate_stylesheet


def main() -> None:
    """Compile a small stylesheet and show the output."""
    print("CHUK Stylesheet Compiler Demo")
    print("=" * 40)
    print()

    description = {
        "button": {
            "padding": "8px 16px",
            ":hover": {"opacity": 0.9},
            "@media (max-width: 600px)": {
                "padding": "6px 12px",
                ":active": {"opacity": 0.8},
            },
            "@variants": {
                "primary": {"color": "white", "background": "#1e6fd9"},
                "plain": None,
            },
        },
        "icon": {"width": "16px", "height": "16px"},
    }

    compiled = compile_stylesheet(description)

    print("Rule tree:")
    print(json.dumps(compiled.rule_tree, indent=2))
    print()

    print("Variant table:")
    print(json.dumps(compiled.classes, indent=2))
    print()

    resolver = compiled.resolver("button")
    print("Variant lookups:")
    for variant in ["primary", "plain", "huge"]:
        print(f"  button({variant!r}) -> {resolver(variant)!r}")
    print()

    # Invalid descriptions fail on the first problem found
    print("Compile errors:")
    broken = [
        {"box": {":hover": {":focus": {"color": "green"}}}},
        {"box": {"@variants": {"a": {"color": "red"}}, "color": "blue"}},
        {"box": {"123invalid": "x"}},
        {"box": {}},
    ]
    for candidate in broken:
        try:
            compile_stylesheet(candidate)
        except StylesheetError as e:
            print(f"  {e}")
    print()

    # The validator reports problems instead of raising
    print("Validation:")
    result = validate_stylesheet({"box": {"hover": {"color": "red"}}})
    print(f"  {result}")


if __name__ == "__main__":
    main()
