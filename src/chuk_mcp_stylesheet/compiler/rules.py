"""
Style Rule Compiler - compiles stylesheet descriptions to JSS rule trees.

A stylesheet description maps class names to blocks. A block holds CSS
property declarations, pseudo-selector sub-blocks (":hover"), media
query sub-blocks ("@media ...") and at most one "@variants" map, which
must be the last key of a class block.

The compiler:
1. Classifies every key once (KeyKind) in a fixed precedence
2. Checks the key kind against the current NestingState
3. Builds each nested rule node bottom-up and links it into its parent
4. Emits variant classes as top-level siblings of their base class

Example:
    compile_stylesheet({
        "button": {
            "color": "black",
            ":hover": {"color": "blue"},
            "@variants": {"primary": {"background": "navy"}, "plain": None},
        }
    })

    rule_tree == {
        "button": {"color": "black", "&:hover": {"color": "blue"}},
        "button-primary": {"background": "navy"},
    }
    classes == {"button": {"primary": "button-primary", "plain": "button-plain"}}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_stylesheet.compiler.errors import (
    OrderError,
    ScopeError,
    StructureError,
    StyleSyntaxError,
)
from chuk_mcp_stylesheet.constants import (
    ALLOWED_KINDS,
    MEDIA_QUERY_PATTERN,
    PROPERTY_PATTERN,
    PSEUDO_SELECTOR_PATTERN,
    SELF_REFERENCE,
    VARIANT_SEPARATOR,
    VARIANTS_KEY,
    ErrorMessages,
    KeyKind,
    NestingState,
)
from chuk_mcp_stylesheet.models.stylesheet import CompiledStylesheet

logger = logging.getLogger(__name__)

# Error raised when a key kind is not allowed in the current state
_SCOPE_ERRORS: dict[KeyKind, tuple[str, str]] = {
    KeyKind.VARIANTS: (ScopeError.VARIANTS_NOT_TOP_LEVEL, ErrorMessages.VARIANTS_NOT_TOP_LEVEL),
    KeyKind.PSEUDO_SELECTOR: (ScopeError.PSEUDO_NESTED, ErrorMessages.PSEUDO_NESTED),
    KeyKind.MEDIA_QUERY: (ScopeError.MEDIA_INVALID_SCOPE, ErrorMessages.MEDIA_INVALID_SCOPE),
}


def classify_key(key: Any) -> KeyKind:
    """
    Classify a block key by its syntax.

    Precedence: @variants, pseudo-selector, media query, CSS property.
    Anything else (including non-string keys) is INVALID.

    Args:
        key: Block key

    Returns:
        The key kind
    """
    if not isinstance(key, str):
        return KeyKind.INVALID
    if key == VARIANTS_KEY:
        return KeyKind.VARIANTS
    if PSEUDO_SELECTOR_PATTERN.match(key):
        return KeyKind.PSEUDO_SELECTOR
    if MEDIA_QUERY_PATTERN.match(key):
        return KeyKind.MEDIA_QUERY
    if PROPERTY_PATTERN.match(key):
        return KeyKind.PROPERTY
    return KeyKind.INVALID


@dataclass
class BlockResult:
    """
    Compiled form of one block.

    `rules` is the node to link into the parent. `siblings` holds variant
    class rules that belong at the top of the rule tree, and `variants`
    the variant name table for the class.
    """

    rules: dict[str, Any] = field(default_factory=dict)
    siblings: dict[str, dict[str, Any]] = field(default_factory=dict)
    variants: dict[str, str] = field(default_factory=dict)


class StyleRuleCompiler:
    """
    Compiles a stylesheet description to a rule tree and variant table.

    The compiler is stateless; one instance can compile any number of
    descriptions, from any number of threads.
    """

    def compile(self, description: Mapping[str, Any]) -> CompiledStylesheet:
        """
        Compile a stylesheet description.

        Args:
            description: Class name -> class block

        Returns:
            CompiledStylesheet with rule tree and variant table

        Raises:
            StylesheetError: On the first invalid block or key found
        """
        self._require_block(description, None, ())

        rule_tree: dict[str, dict[str, Any]] = {}
        classes: dict[str, dict[str, str]] = {}
        # Authored and variant class names, including variants without CSS
        claimed: set[str] = set()

        for class_name, block in description.items():
            if not isinstance(class_name, str) or not class_name:
                raise StyleSyntaxError(
                    ErrorMessages.INVALID_KEY.format(key=class_name),
                    key=class_name,
                    path=(class_name,),
                )

            result = self.compile_block(block, NestingState.TOP_LEVEL, class_name, (class_name,))

            self._claim(claimed, class_name)
            for variant_class_name in result.variants.values():
                self._claim(claimed, variant_class_name)

            rule_tree[class_name] = result.rules
            rule_tree.update(result.siblings)

            # Only classes that declared variants get a table entry
            if result.variants:
                classes[class_name] = result.variants

        compiled = CompiledStylesheet(
            rule_tree=rule_tree,
            classes=classes,
            base_classes=tuple(description),
        )
        logger.debug("Compiled stylesheet: %s", {"rule_tree": rule_tree, "classes": classes})
        return compiled

    def compile_block(
        self,
        block: Any,
        state: NestingState,
        class_name: str,
        path: tuple[Any, ...],
    ) -> BlockResult:
        """
        Compile one block in the given nesting state.

        Args:
            block: Block mapping
            state: Current nesting state
            class_name: Class the block belongs to (variant class inside variants)
            path: Keys from the class down to this block, for error locations

        Returns:
            BlockResult with the compiled node and any variant output
        """
        self._require_block(block, class_name, path)

        result = BlockResult()
        variants_index = self._variants_index(block)

        for index, (key, value) in enumerate(block.items()):
            key_path = (*path, key)

            # No key may follow @variants
            if variants_index is not None and index > variants_index:
                raise OrderError(
                    ErrorMessages.VARIANTS_NOT_LAST.format(key=key),
                    key=key,
                    class_name=class_name,
                    path=key_path,
                )

            kind = classify_key(key)

            if kind is KeyKind.INVALID:
                raise StyleSyntaxError(
                    ErrorMessages.INVALID_KEY.format(key=key),
                    key=key,
                    class_name=class_name,
                    path=key_path,
                )

            if kind not in ALLOWED_KINDS[state]:
                code, message = _SCOPE_ERRORS[kind]
                raise ScopeError(
                    message,
                    code=code,
                    key=key,
                    class_name=class_name,
                    path=key_path,
                )

            if kind is KeyKind.VARIANTS:
                self._compile_variants(value, class_name, key_path, result)
            elif kind is KeyKind.PSEUDO_SELECTOR:
                nested = self.compile_block(value, NestingState.PSEUDO_SELECTOR, class_name, key_path)
                result.rules[SELF_REFERENCE + key] = nested.rules
            elif kind is KeyKind.MEDIA_QUERY:
                nested = self.compile_block(value, NestingState.MEDIA_QUERY, class_name, key_path)
                result.rules[key] = nested.rules
            else:
                # Property values are opaque; the engine resolves them
                result.rules[key] = value

        return result

    def _compile_variants(
        self,
        variant_blocks: Any,
        class_name: str,
        path: tuple[Any, ...],
        result: BlockResult,
    ) -> None:
        """Compile a @variants map into sibling rules and the variant table."""
        self._require_block(variant_blocks, class_name, path)

        for variant_name, variant_block in variant_blocks.items():
            if not isinstance(variant_name, str) or not variant_name:
                raise StyleSyntaxError(
                    ErrorMessages.INVALID_KEY.format(key=variant_name),
                    key=variant_name,
                    class_name=class_name,
                    path=(*path, variant_name),
                )

            variant_class_name = f"{class_name}{VARIANT_SEPARATOR}{variant_name}"
            result.variants[variant_name] = variant_class_name

            # Don't add CSS for empty variants
            if not variant_block:
                continue

            nested = self.compile_block(
                variant_block,
                NestingState.VARIANT,
                variant_class_name,
                (*path, variant_name),
            )
            result.siblings[variant_class_name] = nested.rules

    def _require_block(self, block: Any, class_name: str | None, path: tuple[Any, ...]) -> None:
        """Reject empty blocks and values that are not mappings."""
        if not isinstance(block, Mapping):
            if not block:
                raise StructureError(
                    ErrorMessages.EMPTY_BLOCK,
                    code=StructureError.EMPTY_BLOCK,
                    class_name=class_name,
                    path=path,
                )
            raise StructureError(
                ErrorMessages.INVALID_BLOCK.format(type_name=type(block).__name__),
                code=StructureError.INVALID_BLOCK,
                class_name=class_name,
                path=path,
            )

        if len(block) == 0:
            raise StructureError(
                ErrorMessages.EMPTY_BLOCK,
                code=StructureError.EMPTY_BLOCK,
                class_name=class_name,
                path=path,
            )

    def _variants_index(self, block: Mapping[Any, Any]) -> int | None:
        """Position of the @variants key in a block, or None."""
        keys = list(block)
        if VARIANTS_KEY not in keys:
            return None
        return keys.index(VARIANTS_KEY)

    def _claim(self, claimed: set[str], class_name: str) -> None:
        """Reserve a class name, rejecting name collisions."""
        if class_name in claimed:
            raise StructureError(
                ErrorMessages.DUPLICATE_CLASS.format(class_name=class_name),
                code=StructureError.DUPLICATE_CLASS,
                class_name=class_name,
                path=(class_name,),
            )
        claimed.add(class_name)


def compile_stylesheet(description: Mapping[str, Any]) -> CompiledStylesheet:
    """
    Convenience function to compile a stylesheet description.

    Args:
        description: Class name -> class block

    Returns:
        CompiledStylesheet with rule tree and variant table
    """
    compiler = StyleRuleCompiler()
    return compiler.compile(description)
