"""
Stylesheet tools - MCP tools for stylesheet discovery and storage.

Tools for listing stylesheets, describing them, copying library
stylesheets into the project and saving new ones.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chuk_mcp_stylesheet.compiler import StylesheetError
from chuk_mcp_stylesheet.constants import ErrorMessages, SuccessMessages
from chuk_mcp_stylesheet.models import StylesheetDocument
from chuk_mcp_stylesheet.stylesheets import StylesheetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_stylesheet_tools(
    mcp: ChukMCPServer,
    loader: StylesheetLoader,
) -> dict[str, Any]:
    """
    Register stylesheet management tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The stylesheet loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_list() -> str:
        """
        List available stylesheets.

        Returns all stylesheets from the library and project with
        basic metadata.

        Returns:
            JSON string with list of stylesheet summaries

        Example:
            stylesheet_list()
        """
        try:
            stylesheets = loader.list_stylesheets()

            return json.dumps(
                {
                    "status": "success",
                    "stylesheets": [
                        {
                            "name": s.name,
                            "description": s.description,
                            "class_count": s.class_count,
                            "variant_classes": s.variant_classes,
                        }
                        for s in stylesheets
                    ],
                    "count": len(stylesheets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list stylesheets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_list"] = stylesheet_list

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_describe(name: str) -> str:
        """
        Get detailed information about a stylesheet.

        Compiles the stylesheet and returns its classes with their
        variants, plus the original YAML.

        Args:
            name: Stylesheet name

        Returns:
            JSON string with stylesheet details

        Example:
            stylesheet_describe(name="buttons")
        """
        try:
            document = loader.get_stylesheet(name)
            if document is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STYLESHEET_NOT_FOUND.format(name=name)}
                )

            compiled = document.compile()

            return json.dumps(
                {
                    "status": "success",
                    "stylesheet": {
                        "name": document.name,
                        "description": document.description,
                        "classes": {
                            class_name: {
                                "variants": compiled.variant_names(class_name),
                            }
                            for class_name in compiled.base_classes
                        },
                        "rule_count": len(compiled.rule_tree),
                        "yaml": yaml.safe_dump(
                            document.to_yaml_dict(), default_flow_style=False, sort_keys=False
                        ),
                    },
                }
            )
        except StylesheetError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_describe"] = stylesheet_describe

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_copy_to_project(name: str) -> str:
        """
        Copy a library stylesheet to the project for customization.

        Args:
            name: Stylesheet name

        Returns:
            JSON string with path to copied stylesheet

        Example:
            stylesheet_copy_to_project(name="buttons")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.STYLESHEET_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": "Stylesheet copied to project",
                    "path": str(path),
                    "hint": "You can now customize this stylesheet by editing the YAML file",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_copy_to_project"] = stylesheet_copy_to_project

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_save(
        name: str,
        source: str,
        description: str = "",
        overwrite: bool = False,
    ) -> str:
        """
        Save a stylesheet to the project.

        The source is a YAML (or JSON) mapping of class names to class
        blocks. It must compile before it is saved.

        Args:
            name: Stylesheet name
            source: YAML/JSON class mapping
            description: Optional description
            overwrite: Replace an existing project stylesheet

        Returns:
            JSON string with path to the saved stylesheet

        Example:
            stylesheet_save(name="cards", source="card: {padding: 8px}")
        """
        try:
            classes = yaml.safe_load(source)
            document = StylesheetDocument(name=name, description=description, classes=classes)
            compiled = document.compile()
            path = loader.save_to_project(document, overwrite=overwrite)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "class_count": len(compiled.base_classes),
                    "message": SuccessMessages.STYLESHEET_SAVED.format(name=name, path=path),
                }
            )
        except StylesheetError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except (ValueError, ValidationError, yaml.YAMLError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to save stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_save"] = stylesheet_save

    return tools
