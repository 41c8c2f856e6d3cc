"""docschema-core: Compile documented types to JSON Schema.

This package provides:
- SchemaCompiler / compile_schema: Type descriptor -> JSON Schema node
- TypeModel: Accessor protocol for host type systems
- PythonTypeModel: TypeModel over Python typing annotations
- Tag-driven constraints from docstring annotations (@minimum, @format, ...)
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Compiler
from docschema_core.compiler import (
    SchemaCompiler,
    TypeCategory,
    apply_constraints,
    classify,
    compile_schema,
    extract_tags,
    get_description,
)

# Error types
from docschema_core.errors import (
    CompilationError,
    DocSchemaError,
    ExportError,
    IgnoreConflictError,
    RecursiveTypeError,
    UnsupportedTypeError,
)

# JSON Schema export
from docschema_core.export import ExportConfig, export_schema

# Models
from docschema_core.schemas import DocSymbol, DocTag, JSONSchema, SchemaNode, TagEntry

# Type models
from docschema_core.type_model import (
    Member,
    PythonTypeModel,
    Symbol,
    TypeFlags,
    TypeModel,
    Undefined,
    parse_docstring,
)

__all__ = [
    "__version__",
    # Compiler
    "SchemaCompiler",
    "compile_schema",
    "TypeCategory",
    "classify",
    "extract_tags",
    "get_description",
    "apply_constraints",
    # Errors
    "DocSchemaError",
    "CompilationError",
    "UnsupportedTypeError",
    "IgnoreConflictError",
    "RecursiveTypeError",
    "ExportError",
    # Export
    "export_schema",
    "ExportConfig",
    # Models
    "SchemaNode",
    "JSONSchema",
    "DocSymbol",
    "DocTag",
    "TagEntry",
    # Type models
    "TypeModel",
    "TypeFlags",
    "Symbol",
    "Member",
    "PythonTypeModel",
    "Undefined",
    "parse_docstring",
]
