"""
Variant resolution - maps logical variant names to class strings.

Lookups happen at use time, after compilation. A miss is not fatal: it
logs a warning and returns None so the caller can render without the
variant class.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)


class VariantResolver:
    """
    Resolves variant names for one class.

    Call the resolver with a variant name to get its class string.
    """

    def __init__(self, class_name: str, variants: Mapping[str, str]):
        """
        Initialize the resolver.

        Args:
            class_name: Base class the variants belong to
            variants: Variant name -> class string
        """
        self.class_name = class_name
        self._variants = dict(variants)

    @property
    def variants(self) -> dict[str, str]:
        """Copy of the variant table."""
        return dict(self._variants)

    def __call__(self, variant_name: str) -> str | None:
        class_string = self._variants.get(variant_name)
        if class_string is None:
            logger.warning("Invalid variant %r for class %r", variant_name, self.class_name)
        return class_string

    def __contains__(self, variant_name: object) -> bool:
        return variant_name in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return f"VariantResolver({self.class_name!r}, {sorted(self._variants)})"
