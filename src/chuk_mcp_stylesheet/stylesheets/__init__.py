"""
Stylesheet library - authored stylesheet descriptions on disk.

Stylesheets are YAML documents whose `classes` mapping is compiled by
chuk_mcp_stylesheet.compiler. Library stylesheets ship with the package;
project stylesheets override them by name.
"""

from chuk_mcp_stylesheet.stylesheets.loader import StylesheetLoader

__all__ = [
    "StylesheetLoader",
]
