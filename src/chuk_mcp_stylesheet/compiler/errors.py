"""
Compiler error types.

Every compile failure is fatal for that compile call: the first
violation found aborts compilation and no partial result is returned.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class StylesheetError(ValueError):
    """Base class for stylesheet compile failures."""

    code = "stylesheet-error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        key: Any = None,
        class_name: str | None = None,
        path: Sequence[Any] = (),
    ):
        self.message = message
        self.code = code or self.code
        self.key = key
        self.class_name = class_name
        self.path = tuple(path)
        super().__init__(message)

    @property
    def location(self) -> str | None:
        """Slash-separated path from the class down to the offending key."""
        if not self.path:
            return None
        return "/".join(str(part) for part in self.path)

    def __str__(self) -> str:
        location = f" at {self.location}" if self.location else ""
        return f"{self.code}: {self.message}{location}"


class StructureError(StylesheetError):
    """A block is empty, is not a mapping, or a class name is defined twice."""

    EMPTY_BLOCK = "empty-block"
    INVALID_BLOCK = "invalid-block"
    DUPLICATE_CLASS = "duplicate-class"

    code = EMPTY_BLOCK


class OrderError(StylesheetError):
    """A key follows @variants in the same block."""

    VARIANTS_NOT_LAST = "variants-not-last"

    code = VARIANTS_NOT_LAST


class ScopeError(StylesheetError):
    """A block kind appears somewhere it is not allowed."""

    VARIANTS_NOT_TOP_LEVEL = "variants-not-top-level"
    PSEUDO_NESTED = "pseudo-nested"
    MEDIA_INVALID_SCOPE = "media-invalid-scope"

    code = VARIANTS_NOT_TOP_LEVEL


class StyleSyntaxError(StylesheetError):
    """A key matches none of the recognised key patterns."""

    INVALID_KEY = "invalid-key"

    code = INVALID_KEY
