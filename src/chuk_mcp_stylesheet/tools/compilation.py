"""
Compilation tools - MCP tools for compiling and rendering stylesheets.

Every tool accepts either the name of a stored stylesheet or inline
YAML/JSON source for the class mapping.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_stylesheet.compiler import (
    StylesheetError,
    StyleRuleCompiler,
    StylesheetValidator,
)
from chuk_mcp_stylesheet.constants import ErrorMessages, SuccessMessages
from chuk_mcp_stylesheet.engine import InMemoryStyleEngine, bind_classes
from chuk_mcp_stylesheet.stylesheets import StylesheetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def load_description(
    loader: StylesheetLoader,
    name: str | None,
    source: str | None,
) -> tuple[str, Any]:
    """
    Get a stylesheet description by name or from inline source.

    Args:
        loader: Stylesheet loader used for named lookups
        name: Stored stylesheet name
        source: Inline YAML/JSON class mapping (takes precedence)

    Returns:
        Tuple of (label, description)

    Raises:
        ValueError: If neither is given or the name is unknown
    """
    if source is not None:
        return name or "inline", yaml.safe_load(source)

    if not name:
        raise ValueError(ErrorMessages.NO_SOURCE)

    document = loader.get_stylesheet(name)
    if document is None:
        raise ValueError(ErrorMessages.STYLESHEET_NOT_FOUND.format(name=name))
    return document.name, document.classes


def register_compilation_tools(
    mcp: ChukMCPServer,
    loader: StylesheetLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register compilation/render tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The stylesheet loader
        output_dir: Directory for rendered CSS files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    compiler = StyleRuleCompiler()
    validator = StylesheetValidator()

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_compile(
        name: str | None = None,
        source: str | None = None,
    ) -> str:
        """
        Compile a stylesheet to a JSS rule tree.

        Returns the normalized rule tree (pseudo-selectors as '&:hover',
        media queries verbatim, variant classes as siblings) and the
        variant table for classes that declare @variants.

        Args:
            name: Stored stylesheet name
            source: Inline YAML/JSON class mapping

        Returns:
            JSON string with rule tree and variant table

        Example:
            stylesheet_compile(name="buttons")
        """
        try:
            label, description = load_description(loader, name, source)
            compiled = compiler.compile(description)

            return json.dumps(
                {
                    "status": "success",
                    "rule_tree": compiled.rule_tree,
                    "classes": compiled.classes,
                    "message": SuccessMessages.STYLESHEET_COMPILED.format(
                        count=len(compiled.base_classes), name=label
                    ),
                },
                default=str,
            )
        except StylesheetError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except (ValueError, yaml.YAMLError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to compile stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_compile"] = stylesheet_compile

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_validate(
        name: str | None = None,
        source: str | None = None,
    ) -> str:
        """
        Validate a stylesheet.

        Reports the first compile error, plus warnings such as
        single-variant maps and property values that look like
        misspelled pseudo-selectors.

        Args:
            name: Stored stylesheet name
            source: Inline YAML/JSON class mapping

        Returns:
            JSON string with validation results

        Example:
            stylesheet_validate(source="button: {hover: {color: red}}")
        """
        try:
            _label, description = load_description(loader, name, source)
            result = validator.validate(description)

            def issues(items: list) -> list[dict[str, Any]]:
                return [
                    {"code": i.code, "message": i.message, "location": i.location} for i in items
                ]

            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "errors": issues(result.errors),
                    "warnings": issues(result.warnings),
                    "info": issues(result.infos),
                }
            )
        except (ValueError, yaml.YAMLError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to validate stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_validate"] = stylesheet_validate

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_render_css(
        name: str | None = None,
        source: str | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Render a stylesheet to a CSS file.

        Compiles the stylesheet, attaches it to an in-memory engine and
        writes the generated CSS with engine class names.

        Args:
            name: Stored stylesheet name
            source: Inline YAML/JSON class mapping
            output_name: Optional output filename (without .css extension)

        Returns:
            JSON string with file path, CSS text and class names

        Example:
            stylesheet_render_css(name="buttons")
        """
        try:
            label, description = load_description(loader, name, source)
            compiled = compiler.compile(description)

            engine = InMemoryStyleEngine()
            bound = bind_classes(engine, compiled)
            css = engine.to_css()

            filename = f"{output_name or label}.css"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(css)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "css": css,
                    "classes": {
                        class_name: value if isinstance(value, str) else value.variants
                        for class_name, value in bound.classes.items()
                    },
                    "message": SuccessMessages.STYLESHEET_RENDERED.format(
                        name=label, path=output_path
                    ),
                }
            )
        except StylesheetError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except (ValueError, yaml.YAMLError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render stylesheet")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_render_css"] = stylesheet_render_css

    @mcp.tool  # type: ignore[arg-type]
    async def stylesheet_resolve_variant(
        class_name: str,
        variant: str,
        name: str | None = None,
        source: str | None = None,
    ) -> str:
        """
        Resolve a variant name to its class name.

        An unknown variant is not an error: the result is null and
        'found' is false.

        Args:
            class_name: Class that declares the variants
            variant: Variant name
            name: Stored stylesheet name
            source: Inline YAML/JSON class mapping

        Returns:
            JSON string with the resolved variant class name

        Example:
            stylesheet_resolve_variant(name="buttons", class_name="button", variant="primary")
        """
        try:
            _label, description = load_description(loader, name, source)
            compiled = compiler.compile(description)

            if class_name not in compiled.base_classes:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.CLASS_NOT_FOUND.format(class_name=class_name),
                    }
                )

            resolver = compiled.resolver(class_name)
            resolved = resolver(variant) if resolver is not None else None

            return json.dumps(
                {
                    "status": "success",
                    "class_name": class_name,
                    "variant": variant,
                    "resolved": resolved,
                    "found": resolved is not None,
                    "available": compiled.variant_names(class_name),
                }
            )
        except StylesheetError as e:
            return json.dumps({"status": "error", "code": e.code, "message": str(e)})
        except (ValueError, yaml.YAMLError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve variant")
            return json.dumps({"status": "error", "message": str(e)})

    tools["stylesheet_resolve_variant"] = stylesheet_resolve_variant

    return tools
