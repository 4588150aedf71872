"""
Class binder - turns a compiled stylesheet into class strings for views.

Binding creates and attaches an engine sheet, then maps each authored
class to what view code uses:
- a class without variants maps to its generated class string
- a class with variants maps to a VariantResolver returning
  "<base> <variant>" (or just "<base>" for variants without CSS)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chuk_mcp_stylesheet.compiler.variants import VariantResolver
from chuk_mcp_stylesheet.engine.base import StyleEngine, StyleSheet
from chuk_mcp_stylesheet.models.stylesheet import CompiledStylesheet


@dataclass
class BoundClasses:
    """Class strings and variant resolvers backed by an attached sheet."""

    sheet: StyleSheet
    classes: dict[str, str | VariantResolver]

    def __getitem__(self, class_name: str) -> str | VariantResolver:
        return self.classes[class_name]

    def __contains__(self, class_name: object) -> bool:
        return class_name in self.classes

    def update(self, props: Mapping[str, Any]) -> BoundClasses:
        """Push a property bag to the sheet's dynamic values."""
        self.sheet.update(props)
        return self

    def detach(self) -> None:
        """Detach the underlying sheet."""
        self.sheet.detach()


def bind_classes(
    engine: StyleEngine,
    compiled: CompiledStylesheet,
    *,
    dynamic: bool = False,
) -> BoundClasses:
    """
    Create, attach and bind a sheet for a compiled stylesheet.

    Args:
        engine: Engine that creates the sheet
        compiled: Compiler output
        dynamic: Link the sheet so update() recomputes function values

    Returns:
        BoundClasses for the authored classes
    """
    sheet = engine.create_style_sheet(compiled.rule_tree, link=dynamic).attach()

    bound: dict[str, str | VariantResolver] = {}
    for class_name in compiled.base_classes:
        engine_class = sheet.classes[class_name]
        variants = compiled.classes.get(class_name)

        if variants is None:
            bound[class_name] = engine_class
            continue

        engine_variants: dict[str, str] = {}
        for variant_name, variant_class_name in variants.items():
            variant_engine_class = sheet.classes.get(variant_class_name)
            engine_variants[variant_name] = (
                f"{engine_class} {variant_engine_class}" if variant_engine_class else engine_class
            )
        bound[class_name] = VariantResolver(class_name, engine_variants)

    return BoundClasses(sheet=sheet, classes=bound)
