"""
Style engine layer - attaches compiled rule trees.

The engine is passed in explicitly wherever sheets are created; there is
no shared engine instance.
"""

from chuk_mcp_stylesheet.engine.base import StyleEngine, StyleSheet
from chuk_mcp_stylesheet.engine.binder import BoundClasses, bind_classes
from chuk_mcp_stylesheet.engine.memory import (
    InMemoryStyleEngine,
    InMemoryStyleSheet,
    format_value,
    hyphenate,
)

__all__ = [
    "BoundClasses",
    "InMemoryStyleEngine",
    "InMemoryStyleSheet",
    "StyleEngine",
    "StyleSheet",
    "bind_classes",
    "format_value",
    "hyphenate",
]
