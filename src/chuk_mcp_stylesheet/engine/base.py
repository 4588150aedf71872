"""
Style engine interface.

The engine is the collaborator that turns a compiled rule tree into a
live sheet: it generates concrete class names, attaches the sheet to
its presentation layer and, for linked sheets, recomputes function
values from a property bag on update. The compiler never talks to an
engine; the engine is handed to whoever attaches sheets.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StyleSheet(Protocol):
    """A sheet created by a StyleEngine."""

    classes: Mapping[str, str]
    attached: bool

    def attach(self) -> StyleSheet: ...

    def detach(self) -> StyleSheet: ...

    def update(self, props: Mapping[str, Any]) -> StyleSheet: ...


@runtime_checkable
class StyleEngine(Protocol):
    """Creates sheets from normalized rule trees."""

    def create_style_sheet(
        self,
        rule_tree: Mapping[str, Mapping[str, Any]],
        *,
        link: bool = False,
    ) -> StyleSheet: ...
