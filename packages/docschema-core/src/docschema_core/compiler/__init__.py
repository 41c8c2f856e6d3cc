"""Compiler module for docschema.

This module exports the schema compiler and its building blocks:
- SchemaCompiler / compile_schema: Recursive type -> JSON Schema compiler
- classify / TypeCategory: Ordered type classification
- extract_tags / extract_tag_entries / get_description: Annotation extraction
- apply_constraints: Tag-driven constraint application
"""

from __future__ import annotations

from docschema_core.compiler.classifier import (
    TypeCategory,
    classify,
    enum_member_values,
    is_true_literal,
)
from docschema_core.compiler.compiler import SchemaCompiler, compile_schema
from docschema_core.compiler.constraints import (
    apply_constraints,
    parse_float_tag,
    parse_int_tag,
    parse_tag_value,
)
from docschema_core.compiler.extractor import (
    extract_tag_entries,
    extract_tags,
    get_description,
)

__all__: list[str] = [
    # Compiler
    "SchemaCompiler",
    "compile_schema",
    # Classification
    "TypeCategory",
    "classify",
    "enum_member_values",
    "is_true_literal",
    # Annotation extraction
    "extract_tags",
    "extract_tag_entries",
    "get_description",
    # Constraint application
    "apply_constraints",
    "parse_float_tag",
    "parse_int_tag",
    "parse_tag_value",
]
