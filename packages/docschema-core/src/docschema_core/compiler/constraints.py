"""Constraint application from documentation tags.

Layers tag-derived keywords onto a schema node that already has its base
shape. Validation keywords are gated by the node's ``type``:

- numeric tags (minimum, maximum, multipleOf, integer) on number/integer
- string tags (minLength, maxLength, pattern, format) on string
- array tags (minItems, maxItems) on array

``default`` applies to every shape. Any other tag is carried over as an
``x-`` extension field.

Malformed tag values are dropped with a debug log; applying constraints
never fails.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from docschema_core.schemas import (
    ARRAY_TAGS,
    DEFAULT_TAG,
    INTEGER_TAG,
    NUMERIC_TAGS,
    NUMERIC_TYPES,
    RECOGNIZED_TAGS,
    STRING_LENGTH_TAGS,
    STRING_TEXT_TAGS,
    SchemaNode,
    extension_key,
)

logger = logging.getLogger(__name__)

# Leading numeric prefix, so "10px" reads as 10 and "px" is rejected.
FLOAT_PREFIX_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
INT_PREFIX_PATTERN = re.compile(r"\s*([+-]?\d+)")


def apply_constraints(
    node: SchemaNode,
    tags: Mapping[str, str],
    description: str | None = None,
) -> None:
    """Apply description and tags to a schema node in place.

    Args:
        node: Schema node with its base shape already assigned.
        tags: Ordered tag name -> raw text mapping.
        description: Description text, if any.

    Example:
        >>> node = {"type": "number"}
        >>> apply_constraints(node, {"minimum": "0", "integer": ""}, "Age")
        >>> node
        {'type': 'integer', 'description': 'Age', 'minimum': 0}
    """
    if description:
        node["description"] = description

    schema_type = node.get("type")

    if schema_type in NUMERIC_TYPES:
        for name in NUMERIC_TAGS:
            value = parse_float_tag(tags, name)
            if value is not None:
                node[name] = value
        # After the range tags, so they stay attached to the integer node
        if INTEGER_TAG in tags:
            node["type"] = "integer"

    if schema_type == "string":
        for name in STRING_LENGTH_TAGS:
            length = parse_int_tag(tags, name)
            if length is not None:
                node[name] = length
        for name in STRING_TEXT_TAGS:
            if name in tags:
                node[name] = tags[name]

    if schema_type == "array":
        for name in ARRAY_TAGS:
            count = parse_int_tag(tags, name)
            if count is not None:
                node[name] = count

    if DEFAULT_TAG in tags:
        node[DEFAULT_TAG] = parse_tag_value(tags[DEFAULT_TAG])

    for name, text in tags.items():
        if name not in RECOGNIZED_TAGS:
            node[extension_key(name)] = parse_tag_value(text)


def parse_float_tag(tags: Mapping[str, str], name: str) -> int | float | None:
    """Parse a numeric tag value.

    Reads the leading numeric prefix of the text. Integral values are
    returned as ``int`` so they serialize without a trailing ``.0``.

    Returns:
        Parsed number, or None when the tag is missing or not numeric.
    """
    if name not in tags:
        return None

    match = FLOAT_PREFIX_PATTERN.match(tags[name])
    if match is None:
        _log_dropped(name, tags[name])
        return None

    value = float(match.group(1))
    if not math.isfinite(value):
        _log_dropped(name, tags[name])
        return None
    return int(value) if value.is_integer() else value


def parse_int_tag(tags: Mapping[str, str], name: str) -> int | None:
    """Parse an integer tag value from its leading digits.

    Returns:
        Parsed integer, or None when the tag is missing or not numeric.
    """
    if name not in tags:
        return None

    match = INT_PREFIX_PATTERN.match(tags[name])
    if match is None:
        _log_dropped(name, tags[name])
        return None
    return int(match.group(1))


def parse_tag_value(text: str) -> Any:
    """Parse tag text as strict JSON, falling back to the raw text.

    ``NaN`` and ``Infinity`` are not JSON and stay strings.

    Example:
        >>> parse_tag_value("42"), parse_tag_value('"ok"'), parse_tag_value("hello")
        (42, 'ok', 'hello')
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not a JSON value: {name}")


def _log_dropped(name: str, text: str) -> None:
    logger.debug(
        "Ignoring unparseable tag value",
        extra={"tag": name, "text": text},
    )
