"""
In-memory style engine - a reference StyleEngine that renders CSS text.

Class names are generated as "<rule>-<sheet>-<index>" from a per-engine
sheet counter, so two sheets built from the same rule tree never share
class names. Property values that are callables are "dynamic": they are
left out of the CSS until update() supplies a property bag.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from chuk_mcp_stylesheet.constants import MEDIA_QUERY_PATTERN, SELF_REFERENCE

logger = logging.getLogger(__name__)

_UPPERCASE_RE = re.compile(r"[A-Z]")


def hyphenate(property_name: str) -> str:
    """Convert a camelCase property name to CSS form (fontSize -> font-size)."""
    return _UPPERCASE_RE.sub(lambda m: "-" + m.group(0).lower(), property_name)


def format_value(value: Any) -> str:
    """
    Format a property value as CSS text.

    Lists become comma-separated values; nested lists are space-separated
    inside each comma group, e.g. [["1px", "solid"], ["2px", "dashed"]].
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(
            " ".join(str(part) for part in item) if isinstance(item, (list, tuple)) else str(item)
            for item in value
        )
    return str(value)


class InMemoryStyleSheet:
    """A sheet whose "attachment" is an in-memory flag and CSS text."""

    def __init__(
        self,
        rule_tree: Mapping[str, Mapping[str, Any]],
        sheet_index: int,
        link: bool = False,
    ):
        """
        Initialize the sheet.

        Args:
            rule_tree: Normalized rule tree
            sheet_index: Engine-wide sheet number, used in class names
            link: Whether update() recomputes dynamic values
        """
        self.rule_tree = rule_tree
        self.sheet_index = sheet_index
        self.link = link
        self.attached = False
        self.classes: dict[str, str] = {
            name: f"{name}-{sheet_index}-{index}" for index, name in enumerate(rule_tree)
        }
        self._props: dict[str, Any] | None = None

    def attach(self) -> InMemoryStyleSheet:
        """Mark the sheet as attached."""
        self.attached = True
        return self

    def detach(self) -> InMemoryStyleSheet:
        """Mark the sheet as detached."""
        self.attached = False
        return self

    def update(self, props: Mapping[str, Any]) -> InMemoryStyleSheet:
        """Store the property bag used to resolve dynamic values."""
        if not self.link:
            logger.debug("Ignoring update on unlinked sheet %d", self.sheet_index)
            return self
        self._props = dict(props)
        return self

    def to_css(self) -> str:
        """Render the sheet as CSS text."""
        chunks: list[str] = []
        for name, rules in self.rule_tree.items():
            chunks.extend(self._render_rule(f".{self.classes[name]}", rules, ""))
        return "\n".join(chunks) + ("\n" if chunks else "")

    def _resolve(self, value: Any) -> Any:
        """Resolve a dynamic value, or return None if it can't be yet."""
        if not callable(value):
            return value
        if self._props is None:
            return None
        return value(self._props)

    def _render_rule(self, selector: str, rules: Mapping[str, Any], indent: str) -> list[str]:
        """Render one rule and its nested rules."""
        declarations: list[str] = []
        nested: list[str] = []

        for key, value in rules.items():
            if key.startswith(SELF_REFERENCE):
                nested.extend(self._render_rule(selector + key[1:], value, indent))
            elif MEDIA_QUERY_PATTERN.match(key):
                inner = self._render_rule(selector, value, indent + "  ")
                if inner:
                    nested.append(f"{indent}{key} {{\n" + "\n".join(inner) + f"\n{indent}}}")
            else:
                resolved = self._resolve(value)
                if resolved is None:
                    continue
                declarations.append(f"{indent}  {hyphenate(key)}: {format_value(resolved)};")

        lines: list[str] = []
        if declarations:
            lines.append(f"{indent}{selector} {{\n" + "\n".join(declarations) + f"\n{indent}}}")
        lines.extend(nested)
        return lines

    def __repr__(self) -> str:
        state = "attached" if self.attached else "detached"
        return f"InMemoryStyleSheet({self.sheet_index}, {len(self.classes)} rules, {state})"


class InMemoryStyleEngine:
    """
    Reference StyleEngine that keeps sheets in memory.

    Useful for rendering CSS files and for tests; a browser-backed engine
    would implement the same StyleEngine protocol.
    """

    def __init__(self) -> None:
        self.sheets: list[InMemoryStyleSheet] = []

    def create_style_sheet(
        self,
        rule_tree: Mapping[str, Mapping[str, Any]],
        *,
        link: bool = False,
    ) -> InMemoryStyleSheet:
        """
        Create a sheet from a rule tree.

        Args:
            rule_tree: Normalized rule tree
            link: Whether update() recomputes dynamic values

        Returns:
            A new, detached sheet
        """
        sheet = InMemoryStyleSheet(rule_tree, sheet_index=len(self.sheets), link=link)
        self.sheets.append(sheet)
        return sheet

    def attached_sheets(self) -> list[InMemoryStyleSheet]:
        """Get the sheets that are currently attached."""
        return [sheet for sheet in self.sheets if sheet.attached]

    def to_css(self) -> str:
        """Render all attached sheets as one CSS document."""
        return "".join(sheet.to_css() for sheet in self.attached_sheets())
