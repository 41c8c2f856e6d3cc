"""Type-model accessors for docschema-core.

This module exports:
- TypeModel, Symbol, RawTag: protocols the compiler depends on
- TypeFlags, Member: values exchanged through the protocol
- PythonTypeModel: TypeModel over Python typing introspection
- Undefined: marker for members that may be absent
- parse_docstring: docstring -> DocSymbol parser
"""

from __future__ import annotations

from docschema_core.type_model.docstrings import (
    attribute_docstrings,
    class_docstring,
    parse_docstring,
)
from docschema_core.type_model.protocol import (
    LITERAL_FLAGS,
    Member,
    RawTag,
    Symbol,
    TypeFlags,
    TypeModel,
)
from docschema_core.type_model.python_types import (
    PythonTypeModel,
    Undefined,
    strip_annotations,
)

__all__: list[str] = [
    # Protocol
    "TypeModel",
    "Symbol",
    "RawTag",
    "TypeFlags",
    "LITERAL_FLAGS",
    "Member",
    # Python implementation
    "PythonTypeModel",
    "Undefined",
    "strip_annotations",
    # Docstrings
    "parse_docstring",
    "class_docstring",
    "attribute_docstrings",
]
