"""
Stylesheet models - authored documents and compiled output.

A StylesheetDocument is what lives in a YAML file. Its `classes` mapping
is the stylesheet description the compiler consumes. A CompiledStylesheet
is what the compiler hands to the CSS engine and to view code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from chuk_mcp_stylesheet.constants import VARIANTS_KEY

if TYPE_CHECKING:
    from chuk_mcp_stylesheet.compiler.variants import VariantResolver


class CompiledStylesheet(BaseModel):
    """
    Output of compiling a stylesheet description.

    `rule_tree` is shaped for a JSS-style engine: one entry per class
    (variant classes are siblings of their base class), pseudo-selectors
    rewritten as `&:hover`, media queries kept verbatim.

    `classes` maps a base class name to its variant name table. Classes
    without @variants are absent.
    """

    rule_tree: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Normalized rule tree keyed by class name",
    )
    classes: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Variant name -> variant class name, per base class",
    )
    base_classes: tuple[str, ...] = Field(
        default=(),
        description="Class names declared by the author, in source order",
    )

    model_config = {"frozen": True}

    def class_names(self) -> list[str]:
        """All class names in the rule tree, variant classes included."""
        return list(self.rule_tree)

    def has_variants(self, class_name: str) -> bool:
        """Check if a class declared @variants."""
        return class_name in self.classes

    def variant_names(self, class_name: str) -> list[str]:
        """Variant names declared by a class (empty if none)."""
        return list(self.classes.get(class_name, {}))

    def resolver(self, class_name: str) -> VariantResolver | None:
        """
        Get the variant resolver for a class.

        Returns None for classes that declared no variants.
        """
        from chuk_mcp_stylesheet.compiler.variants import VariantResolver

        variants = self.classes.get(class_name)
        if variants is None:
            return None
        return VariantResolver(class_name, variants)


class StylesheetDocument(BaseModel):
    """A named stylesheet description as stored in YAML."""

    schema_version: str = Field("stylesheet/v1", alias="schema")
    name: str = Field(..., description="Stylesheet name")
    description: str = Field("", description="Stylesheet description")
    classes: dict[str, Any] = Field(
        default_factory=dict,
        description="Class name -> class block",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def compile(self) -> CompiledStylesheet:
        """Compile this document's classes."""
        from chuk_mcp_stylesheet.compiler.rules import compile_stylesheet

        return compile_stylesheet(self.classes)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "classes": self.classes,
        }


class StylesheetMetadata(BaseModel):
    """Lightweight metadata for listing stylesheets."""

    name: str
    description: str
    class_count: int
    variant_classes: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_document(cls, document: StylesheetDocument) -> StylesheetMetadata:
        """Create metadata from a document without compiling it."""
        variant_classes = [
            name
            for name, block in document.classes.items()
            if isinstance(block, dict) and VARIANTS_KEY in block
        ]
        return cls(
            name=document.name,
            description=document.description,
            class_count=len(document.classes),
            variant_classes=variant_classes,
        )
