"""
Stylesheet Validator - reports problems in a stylesheet description.

Validates:
- The description compiles (the first compile failure becomes an error)
- Variant maps declare more than one variant
- Empty variants (class name only) are flagged as info
- Property values that are mappings (usually a missing ':' or '@media')
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_stylesheet.compiler.errors import StylesheetError
from chuk_mcp_stylesheet.compiler.rules import StyleRuleCompiler, classify_key
from chuk_mcp_stylesheet.constants import SELF_REFERENCE, KeyKind
from chuk_mcp_stylesheet.models.stylesheet import CompiledStylesheet


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Prevents compilation
    WARNING = "warning"  # Compiles but probably not what was meant
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Result of validating a stylesheet description."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []
        self.compiled: CompiledStylesheet | None = None

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Add an info issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get all info issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.INFO]

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class StylesheetValidator:
    """Validates stylesheet descriptions."""

    def __init__(self) -> None:
        self.compiler = StyleRuleCompiler()

    def validate(self, description: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a stylesheet description.

        Compile failures are reported as a single error; the remaining
        checks only run on descriptions that compile.

        Args:
            description: Class name -> class block

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        try:
            compiled = self.compiler.compile(description)
        except StylesheetError as e:
            result.add_error(
                e.code.replace("-", "_").upper(),
                e.message,
                e.location,
            )
            return result

        result.compiled = compiled
        self._validate_variants(compiled, result)
        self._validate_values(compiled, result)

        return result

    def _validate_variants(self, compiled: CompiledStylesheet, result: ValidationResult) -> None:
        """Flag single-variant maps and variants without CSS."""
        for class_name, variants in compiled.classes.items():
            if len(variants) == 1:
                variant_name = next(iter(variants))
                result.add_warning(
                    "SINGLE_VARIANT",
                    f"Class '{class_name}' declares only one variant: {variant_name}",
                    f"{class_name}/@variants",
                )

            for variant_name, variant_class_name in variants.items():
                if variant_class_name not in compiled.rule_tree:
                    result.add_info(
                        "EMPTY_VARIANT",
                        f"Variant '{variant_name}' of '{class_name}' adds no CSS",
                        f"{class_name}/@variants/{variant_name}",
                    )

    def _validate_values(self, compiled: CompiledStylesheet, result: ValidationResult) -> None:
        """Flag property values that look like misspelled sub-blocks."""
        for class_name, rules in compiled.rule_tree.items():
            self._check_rules(rules, class_name, result)

    def _check_rules(self, rules: dict[str, Any], location: str, result: ValidationResult) -> None:
        for key, value in rules.items():
            if key.startswith(SELF_REFERENCE) or classify_key(key) is KeyKind.MEDIA_QUERY:
                self._check_rules(value, f"{location}/{key}", result)
            elif isinstance(value, Mapping):
                result.add_warning(
                    "MAPPING_VALUE",
                    f"Property '{key}' has a mapping value; did you mean ':{key}'?",
                    f"{location}/{key}",
                )


def validate_stylesheet(description: Mapping[str, Any]) -> ValidationResult:
    """
    Convenience function to validate a stylesheet description.

    Args:
        description: Class name -> class block

    Returns:
        ValidationResult with any issues found
    """
    validator = StylesheetValidator()
    return validator.validate(description)
