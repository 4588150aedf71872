"""
Stylesheet loader - discovers and loads stylesheet descriptions.

Stylesheets can come from:
1. Built-in library (shipped with package)
2. Project stylesheets (user's project/stylesheets directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_stylesheet.models.stylesheet import StylesheetDocument, StylesheetMetadata

logger = logging.getLogger(__name__)


class StylesheetLoader:
    """
    Discovers and loads stylesheet documents.

    Stylesheets are loaded from YAML files in the library and project
    directories. Project stylesheets override library stylesheets with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the stylesheet loader.

        Args:
            library_path: Path to built-in stylesheet library
            project_path: Path to project stylesheets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, StylesheetDocument] = {}

    def list_stylesheets(self) -> list[StylesheetMetadata]:
        """
        List all available stylesheets.

        Returns stylesheets from both library and project, with project
        stylesheets taking precedence.
        """
        stylesheets: dict[str, StylesheetMetadata] = {}

        # Load library stylesheets
        if self.library_path.exists():
            for path in sorted(self.library_path.glob("*.yaml")):
                document = self._load_file(path)
                if document:
                    stylesheets[document.name] = StylesheetMetadata.from_document(document)

        # Load project stylesheets (override library)
        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                document = self._load_file(path)
                if document:
                    stylesheets[document.name] = StylesheetMetadata.from_document(document)

        return list(stylesheets.values())

    def get_stylesheet(self, name: str) -> StylesheetDocument | None:
        """
        Get a stylesheet by name.

        Project stylesheets take precedence over library stylesheets.

        Args:
            name: Stylesheet name

        Returns:
            StylesheetDocument if found, None otherwise
        """
        # Check cache
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                document = self._load_file(path)
                if document:
                    self._cache[name] = document
                    return document

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library stylesheet to the project for customization.

        Args:
            name: Stylesheet name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        # Find in library
        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        # Create project stylesheets directory
        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Stylesheet already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def save_to_project(self, document: StylesheetDocument, overwrite: bool = False) -> Path:
        """
        Save a stylesheet document to the project directory.

        Args:
            document: Document to save
            overwrite: Replace an existing project stylesheet

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{document.name}.yaml"
        if dest_file.exists() and not overwrite:
            raise ValueError(f"Stylesheet already exists in project: {document.name}")

        dest_file.write_text(
            yaml.safe_dump(document.to_yaml_dict(), default_flow_style=False, sort_keys=False)
        )
        self._cache[document.name] = document

        return dest_file

    def _load_file(self, path: Path) -> StylesheetDocument | None:
        """Load a stylesheet from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_document(data, path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning("Skipping unreadable stylesheet %s: %s", path, e)
            return None

    def _parse_document(self, data: Any, default_name: str) -> StylesheetDocument:
        """Parse a document from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a mapping at top level, got {type(data).__name__}")

        return StylesheetDocument.model_validate(
            {
                "schema": data.get("schema", "stylesheet/v1"),
                "name": data.get("name", default_name),
                "description": data.get("description", ""),
                "classes": data.get("classes") or {},
            }
        )

    def clear_cache(self) -> None:
        """Clear the stylesheet cache."""
        self._cache.clear()
