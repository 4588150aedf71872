#!/usr/bin/env python3
"""
Command-line entry point for the stylesheet compiler MCP server.

Serves the stylesheet tools (list, describe, save, compile, validate,
render CSS, resolve variants) over stdio for MCP clients, or over HTTP.
Project stylesheets are read from ./stylesheets and rendered CSS is
written to ./output, relative to the working directory.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Parse arguments and run the server on the chosen transport."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-stylesheet",
        description="MCP server that compiles nested stylesheet descriptions into JSS rule trees",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio for MCP clients that spawn the server, http to serve on a port (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for the http transport (default: 8000)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log each compiled rule tree and variant table",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Importing the server module registers the tools
    from chuk_mcp_stylesheet.async_server import OUTPUT_DIR, STYLESHEETS_DIR, mcp

    logger.info("Project stylesheets: %s, CSS output: %s", STYLESHEETS_DIR, OUTPUT_DIR)

    if args.transport == "stdio":
        logger.info("Serving stylesheet tools over stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Serving stylesheet tools over http on port %d", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
