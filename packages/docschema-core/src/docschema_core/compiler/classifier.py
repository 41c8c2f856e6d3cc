"""Type classification for the schema compiler.

Maps a type descriptor to exactly one TypeCategory. Host type flags can
overlap (an enum is also a union, an array is also an object), so rules are
checked in a fixed order and the first match wins:

 1. string              9. enum-like union with string/number members
 2. string literal     10. any other union
 3. number             11. array
 4. number literal     12. tuple
 5. boolean            13. struct / object
 6. boolean literal    14. intersection
 7. null               15. unsupported
 8. undefined
"""

from __future__ import annotations

import enum
from typing import Any

from docschema_core.type_model.protocol import TypeFlags, TypeModel


class TypeCategory(enum.Enum):
    """Closed set of classification outcomes, in decision order."""

    STRING = "string"
    STRING_LITERAL = "string-literal"
    NUMBER = "number"
    NUMBER_LITERAL = "number-literal"
    BOOLEAN = "boolean"
    BOOLEAN_LITERAL = "boolean-literal"
    NULL = "null"
    UNDEFINED = "undefined"
    ENUM = "enum"
    UNION = "union"
    ARRAY = "array"
    TUPLE = "tuple"
    OBJECT = "object"
    INTERSECTION = "intersection"
    UNSUPPORTED = "unsupported"


# Rules 1-8: a single flag decides the category.
FLAG_CATEGORIES: tuple[tuple[TypeFlags, TypeCategory], ...] = (
    (TypeFlags.STRING, TypeCategory.STRING),
    (TypeFlags.STRING_LITERAL, TypeCategory.STRING_LITERAL),
    (TypeFlags.NUMBER, TypeCategory.NUMBER),
    (TypeFlags.NUMBER_LITERAL, TypeCategory.NUMBER_LITERAL),
    (TypeFlags.BOOLEAN, TypeCategory.BOOLEAN),
    (TypeFlags.BOOLEAN_LITERAL, TypeCategory.BOOLEAN_LITERAL),
    (TypeFlags.NULL, TypeCategory.NULL),
    (TypeFlags.UNDEFINED, TypeCategory.UNDEFINED),
)


def classify(type_: Any, type_model: TypeModel) -> TypeCategory:
    """Return the category of a type descriptor.

    Args:
        type_: Type descriptor.
        type_model: Type model that produced the descriptor.

    Returns:
        The first matching category.
    """
    flags = type_model.get_flags(type_)

    for flag, category in FLAG_CATEGORIES:
        if flag in flags:
            return category

    if TypeFlags.ENUM_LIKE in flags and enum_member_values(type_, type_model):
        return TypeCategory.ENUM
    if TypeFlags.UNION in flags:
        return TypeCategory.UNION
    if type_model.is_array_type(type_):
        return TypeCategory.ARRAY
    if type_model.is_tuple_type(type_):
        return TypeCategory.TUPLE
    if TypeFlags.OBJECT in flags:
        return TypeCategory.OBJECT
    if TypeFlags.INTERSECTION in flags:
        return TypeCategory.INTERSECTION
    return TypeCategory.UNSUPPORTED


def enum_member_values(type_: Any, type_model: TypeModel) -> list[str | int | float]:
    """Collect string and number literal values of an enum-like union.

    Members of any other kind, boolean literals included, are skipped.
    """
    if TypeFlags.UNION not in type_model.get_flags(type_):
        return []

    values: list[str | int | float] = []
    for member in type_model.get_union_members(type_):
        member_flags = type_model.get_flags(member)
        if member_flags & (TypeFlags.STRING_LITERAL | TypeFlags.NUMBER_LITERAL):
            values.append(type_model.get_literal_value(member))
    return values


def is_true_literal(type_: Any, type_model: TypeModel) -> bool:
    """Return whether a boolean literal type is ``true``.

    Type models expose no boolean literal accessor, so the rendered type
    text decides.
    """
    return type_model.type_to_string(type_).strip().lower() == "true"
