"""Data models for docschema-core.

This module exports:
- SchemaNode / JSONSchema: compiled JSON Schema node
- DocSymbol, DocTag, TagEntry: documentation annotation models
- Tag name constants consumed by the constraint applicator
"""

from __future__ import annotations

from docschema_core.schemas.annotations import DocSymbol, DocTag, TagEntry
from docschema_core.schemas.schema_node import (
    ARRAY_TAGS,
    DEFAULT_TAG,
    EXTENSION_PREFIX,
    IGNORE_TAG,
    INTEGER_TAG,
    NUMERIC_TAGS,
    NUMERIC_TYPES,
    RECOGNIZED_TAGS,
    STRING_LENGTH_TAGS,
    STRING_TEXT_TAGS,
    EnumValue,
    JSONSchema,
    SchemaNode,
    SchemaType,
    extension_key,
)

__all__: list[str] = [
    # Schema node
    "SchemaNode",
    "JSONSchema",
    "SchemaType",
    "EnumValue",
    "extension_key",
    # Annotations
    "DocSymbol",
    "DocTag",
    "TagEntry",
    # Tag names
    "RECOGNIZED_TAGS",
    "NUMERIC_TAGS",
    "NUMERIC_TYPES",
    "INTEGER_TAG",
    "STRING_LENGTH_TAGS",
    "STRING_TEXT_TAGS",
    "ARRAY_TAGS",
    "DEFAULT_TAG",
    "IGNORE_TAG",
    "EXTENSION_PREFIX",
]
