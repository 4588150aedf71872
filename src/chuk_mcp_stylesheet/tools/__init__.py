"""
MCP tool implementations.

Tools are organized by domain:
- stylesheets - Stylesheet discovery and storage
- compilation - Compile, validate, render and variant lookup
"""

from chuk_mcp_stylesheet.tools.compilation import register_compilation_tools
from chuk_mcp_stylesheet.tools.stylesheets import register_stylesheet_tools

__all__ = [
    "register_compilation_tools",
    "register_stylesheet_tools",
]
