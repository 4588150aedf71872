#!/usr/bin/env python3
"""
Async Stylesheet MCP Server using chuk-mcp-server

This server provides MCP tools for authoring and compiling stylesheet
descriptions into JSS-style rule trees. Stylesheets are YAML documents
you own: copy one from the library and customize it.

The server provides tools for:
- Listing, describing, copying and saving stylesheets
- Compiling stylesheets to rule trees and variant tables
- Validating stylesheets (errors, warnings, info)
- Rendering stylesheets to CSS files
- Resolving variant names to class names
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_stylesheet.stylesheets import StylesheetLoader
from chuk_mcp_stylesheet.tools import (
    register_compilation_tools,
    register_stylesheet_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-stylesheet")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
STYLESHEETS_DIR = BASE_PATH / "stylesheets"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "stylesheets" / "library"

# Create managers
stylesheet_loader = StylesheetLoader(
    library_path=LIBRARY_PATH,
    project_path=STYLESHEETS_DIR,
)

# Register all tools
stylesheet_tools = register_stylesheet_tools(mcp, stylesheet_loader)
compilation_tools = register_compilation_tools(mcp, stylesheet_loader, OUTPUT_DIR)

# Export tool functions for direct access
stylesheet_list = stylesheet_tools["stylesheet_list"]
stylesheet_describe = stylesheet_tools["stylesheet_describe"]
stylesheet_copy_to_project = stylesheet_tools["stylesheet_copy_to_project"]
stylesheet_save = stylesheet_tools["stylesheet_save"]

stylesheet_compile = compilation_tools["stylesheet_compile"]
stylesheet_validate = compilation_tools["stylesheet_validate"]
stylesheet_render_css = compilation_tools["stylesheet_render_css"]
stylesheet_resolve_variant = compilation_tools["stylesheet_resolve_variant"]

logger.info("CHUK Stylesheet MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Stylesheets dir: {STYLESHEETS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
