"""
Constants and enums for the stylesheet system.

No magic strings - use enums and Literal types for constrained values.
"""

import re
from enum import Enum
from typing import Literal


class NestingState(str, Enum):
    """
    Which kind of block the compiler is currently inside.

    The state decides which key kinds are legal at each depth.
    """

    TOP_LEVEL = "top-level"  # Directly inside a class block
    VARIANT = "variant"  # Inside a variant block
    MEDIA_QUERY = "media-query"  # Inside an @media block
    PSEUDO_SELECTOR = "pseudo-selector"  # Inside a :hover style block


class KeyKind(str, Enum):
    """Syntactic kind of a key in a stylesheet block."""

    PROPERTY = "property"
    PSEUDO_SELECTOR = "pseudo-selector"
    MEDIA_QUERY = "media-query"
    VARIANTS = "variants"
    INVALID = "invalid"


# Literal key that introduces a variant map
VARIANTS_KEY = "@variants"

# Key patterns, checked in this order after VARIANTS_KEY
PSEUDO_SELECTOR_PATTERN = re.compile(r"^:[:a-zA-Z]")
MEDIA_QUERY_PATTERN = re.compile(r"^@media")
PROPERTY_PATTERN = re.compile(r"^[a-zA-Z-]")

# Prefix the CSS engine uses to refer to the enclosing rule
SELF_REFERENCE = "&"

# Joins a class name and a variant name into the variant class name
VARIANT_SEPARATOR = "-"

# Key kinds allowed in each nesting state
ALLOWED_KINDS: dict[NestingState, frozenset[KeyKind]] = {
    NestingState.TOP_LEVEL: frozenset(
        {KeyKind.PROPERTY, KeyKind.PSEUDO_SELECTOR, KeyKind.MEDIA_QUERY, KeyKind.VARIANTS}
    ),
    NestingState.VARIANT: frozenset(
        {KeyKind.PROPERTY, KeyKind.PSEUDO_SELECTOR, KeyKind.MEDIA_QUERY}
    ),
    NestingState.MEDIA_QUERY: frozenset({KeyKind.PROPERTY, KeyKind.PSEUDO_SELECTOR}),
    NestingState.PSEUDO_SELECTOR: frozenset({KeyKind.PROPERTY}),
}

# Schema versions - frozen for v1
SchemaVersion = Literal["stylesheet/v1"]


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_BLOCK = "Empty blocks not allowed"
    INVALID_BLOCK = "Expected a block mapping, got {type_name}"
    DUPLICATE_CLASS = "Class '{class_name}' is defined more than once"
    VARIANTS_NOT_LAST = "@variants must be the last block (found '{key}' after it)"
    VARIANTS_NOT_TOP_LEVEL = "@variants blocks are only allowed at the top level of a class block"
    PSEUDO_NESTED = "Pseudo-selector blocks cannot be nested"
    MEDIA_INVALID_SCOPE = "@media queries only allowed at top level or in variants"
    INVALID_KEY = "Invalid key '{key}'"
    STYLESHEET_NOT_FOUND = "Stylesheet '{name}' not found."
    CLASS_NOT_FOUND = "Class '{class_name}' not found in stylesheet."
    NO_SOURCE = "Provide either a stylesheet name or inline source."


class SuccessMessages:
    """Standardized success messages."""

    STYLESHEET_COMPILED = "Compiled {count} classes from '{name}'."
    STYLESHEET_RENDERED = "Rendered '{name}' to {path}."
    STYLESHEET_SAVED = "Saved stylesheet '{name}' to {path}."
