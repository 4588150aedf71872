"""
Compilation pipeline - turns stylesheet descriptions into JSS rule trees.

The pipeline:
    Stylesheet YAML → StylesheetDocument (in-memory)
    → StyleRuleCompiler (state-checked recursive walk)
    → CompiledStylesheet (rule tree + variant table)
    → StyleEngine sheet (see chuk_mcp_stylesheet.engine)
"""

from chuk_mcp_stylesheet.compiler.errors import (
    OrderError,
    ScopeError,
    StructureError,
    StylesheetError,
    StyleSyntaxError,
)
from chuk_mcp_stylesheet.compiler.rules import (
    BlockResult,
    StyleRuleCompiler,
    classify_key,
    compile_stylesheet,
)
from chuk_mcp_stylesheet.compiler.validator import (
    StylesheetValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_stylesheet,
)
from chuk_mcp_stylesheet.compiler.variants import VariantResolver

__all__ = [
    # Compiler
    "BlockResult",
    "StyleRuleCompiler",
    "classify_key",
    "compile_stylesheet",
    # Errors
    "OrderError",
    "ScopeError",
    "StructureError",
    "StyleSyntaxError",
    "StylesheetError",
    # Validation
    "StylesheetValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "validate_stylesheet",
    # Variants
    "VariantResolver",
]
