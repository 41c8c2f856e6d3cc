"""JSON Schema node model produced by the compiler.

A compiled schema is a plain ``dict`` so that it serializes directly with
``json.dumps`` and compares naturally in tests. ``JSONSchema`` documents the
recognized keys; extension keys (``x-<tag>``) may be added on top of them.

Field presence follows the omit-if-absent rule: a key is only present when
the compiler or a tag set it. An empty ``required`` list is never emitted.
"""

from __future__ import annotations

from typing import Any, Literal, TypedDict

SchemaType = Literal["string", "number", "integer", "boolean", "object", "array", "null"]
"""Values allowed under the ``type`` key."""

EnumValue = str | int | float | bool
"""Values allowed inside an ``enum`` list."""

SchemaNode = dict[str, Any]
"""A compiled JSON Schema fragment."""

EXTENSION_PREFIX = "x-"

NUMERIC_TYPES: frozenset[str] = frozenset({"number", "integer"})

# Tags consumed by the constraint applicator. Any other tag becomes an
# ``x-`` extension field.
NUMERIC_TAGS = ("minimum", "maximum", "multipleOf")
INTEGER_TAG = "integer"
STRING_LENGTH_TAGS = ("minLength", "maxLength")
STRING_TEXT_TAGS = ("pattern", "format")
ARRAY_TAGS = ("minItems", "maxItems")
DEFAULT_TAG = "default"

RECOGNIZED_TAGS: frozenset[str] = frozenset(
    {
        *NUMERIC_TAGS,
        INTEGER_TAG,
        *STRING_LENGTH_TAGS,
        *STRING_TEXT_TAGS,
        *ARRAY_TAGS,
        DEFAULT_TAG,
    }
)

IGNORE_TAG = "ignore"
"""Member tag that removes an optional member from the schema."""


class JSONSchema(TypedDict, total=False):
    """Recognized keys of a compiled schema node.

    ``x-`` extension keys cannot be spelled in a TypedDict and are carried as
    extra dict entries.
    """

    type: SchemaType
    description: str
    const: Any
    enum: list[EnumValue]
    items: JSONSchema
    properties: dict[str, JSONSchema]
    required: list[str]
    # String validations
    minLength: int
    maxLength: int
    pattern: str
    format: str
    # Number validations
    minimum: int | float
    maximum: int | float
    multipleOf: int | float
    # Array validations
    minItems: int
    maxItems: int
    default: Any


def extension_key(tag_name: str) -> str:
    """Return the schema key used for an unrecognized tag."""
    return f"{EXTENSION_PREFIX}{tag_name}"
