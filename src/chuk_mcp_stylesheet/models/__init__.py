"""
Pydantic models for the stylesheet system.

This module provides:
- CompiledStylesheet: Rule tree and variant table from the compiler
- StylesheetDocument: A named stylesheet description loaded from YAML
- StylesheetMetadata: Summary used for listings
"""

from chuk_mcp_stylesheet.models.stylesheet import (
    CompiledStylesheet,
    StylesheetDocument,
    StylesheetMetadata,
)

__all__ = [
    "CompiledStylesheet",
    "StylesheetDocument",
    "StylesheetMetadata",
]
