"""Schema compiler for docschema.

This module implements the recursive compiler that turns a type descriptor
into a JSON Schema node:

1. Read the description and tags of the type's symbol
2. Classify the type (see ``classifier``)
3. Build the base node, compiling array elements and struct members
   recursively
4. Apply the type's tags to the assembled node

Struct members get a second, member-level pass: the member's own tags are
applied onto the child node after its type has been compiled, so member
annotations can refine what the type alone implies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any

from docschema_core.compiler.classifier import (
    TypeCategory,
    classify,
    enum_member_values,
    is_true_literal,
)
from docschema_core.compiler.constraints import apply_constraints
from docschema_core.compiler.extractor import extract_tags, get_description
from docschema_core.errors import (
    IgnoreConflictError,
    RecursiveTypeError,
    UnsupportedTypeError,
)
from docschema_core.schemas import IGNORE_TAG, EnumValue, SchemaNode
from docschema_core.type_model.protocol import LITERAL_FLAGS, Member, TypeFlags, TypeModel
from docschema_core.type_model.python_types import PythonTypeModel

logger = logging.getLogger(__name__)

# Struct types on the active recursion path: type id -> rendered name
ActivePath = dict[Hashable, str]


class SchemaCompiler:
    """Compile type descriptors to JSON Schema nodes.

    The compiler holds no per-call state, so one instance can serve
    independent compilations.

    Example:
        >>> from typing import Literal
        >>> from docschema_core.type_model import PythonTypeModel
        >>> compiler = SchemaCompiler(PythonTypeModel())
        >>> compiler.compile(Literal["a", "b"])
        {'enum': ['a', 'b']}
    """

    def __init__(self, type_model: TypeModel) -> None:
        """Initialize the SchemaCompiler.

        Args:
            type_model: Accessor answering questions about type descriptors.
        """
        self.type_model = type_model
        self._builders: dict[TypeCategory, Callable[[Any, ActivePath], SchemaNode]] = {
            TypeCategory.STRING: self._build_string,
            TypeCategory.STRING_LITERAL: self._build_string_literal,
            TypeCategory.NUMBER: self._build_number,
            TypeCategory.NUMBER_LITERAL: self._build_number_literal,
            TypeCategory.BOOLEAN: self._build_boolean,
            TypeCategory.BOOLEAN_LITERAL: self._build_boolean_literal,
            TypeCategory.NULL: self._build_null,
            TypeCategory.UNDEFINED: self._build_null,
            TypeCategory.ENUM: self._build_enum,
            TypeCategory.UNION: self._build_union,
            TypeCategory.ARRAY: self._build_array,
            TypeCategory.TUPLE: self._reject_tuple,
            TypeCategory.OBJECT: self._build_object,
            TypeCategory.INTERSECTION: self._reject_intersection,
            TypeCategory.UNSUPPORTED: self._reject_unsupported,
        }

    def compile(self, type_: Any) -> SchemaNode:
        """Compile a type descriptor to a JSON Schema node.

        Args:
            type_: Type descriptor understood by the compiler's type model.

        Returns:
            A fresh schema node. Empty ``required`` lists are omitted.

        Raises:
            UnsupportedTypeError: For tuples, intersections, non-literal
                unions and unclassifiable types.
            IgnoreConflictError: If a required member is marked @ignore.
            RecursiveTypeError: If a struct type contains itself.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Compiling schema",
                extra={"type_name": self.type_model.type_to_string(type_)},
            )
        return self._compile(type_, {})

    def _compile(self, type_: Any, active: ActivePath) -> SchemaNode:
        symbol = self.type_model.get_symbol(type_)
        tags = extract_tags(symbol)
        description = get_description(symbol)

        category = classify(type_, self.type_model)
        node = self._builders[category](type_, active)

        apply_constraints(node, tags, description)
        return node

    def _build_string(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "string"}

    def _build_string_literal(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "string", "const": self.type_model.get_literal_value(type_)}

    def _build_number(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "number"}

    def _build_number_literal(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "number", "const": self.type_model.get_literal_value(type_)}

    def _build_boolean(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "boolean"}

    def _build_boolean_literal(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"type": "boolean", "const": is_true_literal(type_, self.type_model)}

    def _build_null(self, type_: Any, active: ActivePath) -> SchemaNode:
        # undefined has no JSON counterpart and is emitted as null as well
        return {"type": "null"}

    def _build_enum(self, type_: Any, active: ActivePath) -> SchemaNode:
        return {"enum": enum_member_values(type_, self.type_model)}

    def _build_union(self, type_: Any, active: ActivePath) -> SchemaNode:
        """Compile a union made only of literals to an enum."""
        values: list[EnumValue] = []
        for member in self.type_model.get_union_members(type_):
            flags = self.type_model.get_flags(member)
            if not flags & LITERAL_FLAGS:
                values = []
                break
            if TypeFlags.BOOLEAN_LITERAL in flags:
                values.append(is_true_literal(member, self.type_model))
            else:
                values.append(self.type_model.get_literal_value(member))

        if not values:
            raise UnsupportedTypeError(
                "complex union",
                self.type_model.type_to_string(type_),
            )
        return {"enum": values}

    def _build_array(self, type_: Any, active: ActivePath) -> SchemaNode:
        node: SchemaNode = {"type": "array"}
        element_type = self.type_model.get_element_type(type_)
        if element_type is not None:
            node["items"] = self._compile(element_type, active)
        return node

    def _build_object(self, type_: Any, active: ActivePath) -> SchemaNode:
        type_id = self.type_model.get_type_id(type_)
        type_name = self.type_model.type_to_string(type_)
        if type_id in active:
            raise RecursiveTypeError(type_name, [*active.values(), type_name])

        properties: dict[str, SchemaNode] = {}
        required: list[str] = []

        active[type_id] = type_name
        try:
            for member in self.type_model.get_members(type_):
                member_tags = extract_tags(member.symbol)
                is_optional = member.optional or self._includes_undefined(member.type)

                if IGNORE_TAG in member_tags:
                    if not is_optional:
                        raise IgnoreConflictError(
                            member.name,
                            internal_details=f"Member '{member.name}' of {type_name} is required",
                        )
                    logger.debug(
                        "Skipping ignored optional member",
                        extra={"type_name": type_name, "member": member.name},
                    )
                    continue

                properties[member.name] = self._compile_member(member, member_tags, active)
                if not is_optional:
                    required.append(member.name)
        finally:
            del active[type_id]

        node: SchemaNode = {"type": "object", "properties": properties}
        if required:
            node["required"] = required
        return node

    def _compile_member(
        self,
        member: Member,
        member_tags: dict[str, str],
        active: ActivePath,
    ) -> SchemaNode:
        child = self._compile(member.type, active)
        apply_constraints(child, member_tags, get_description(member.symbol))
        return child

    def _includes_undefined(self, type_: Any) -> bool:
        flags = self.type_model.get_flags(type_)
        if TypeFlags.UNDEFINED in flags:
            return True
        if TypeFlags.UNION not in flags:
            return False
        return any(
            TypeFlags.UNDEFINED in self.type_model.get_flags(member)
            for member in self.type_model.get_union_members(type_)
        )

    def _reject_tuple(self, type_: Any, active: ActivePath) -> SchemaNode:
        raise UnsupportedTypeError("tuple", self.type_model.type_to_string(type_))

    def _reject_intersection(self, type_: Any, active: ActivePath) -> SchemaNode:
        raise UnsupportedTypeError("intersection", self.type_model.type_to_string(type_))

    def _reject_unsupported(self, type_: Any, active: ActivePath) -> SchemaNode:
        raise UnsupportedTypeError("unsupported", self.type_model.type_to_string(type_))


def compile_schema(type_: Any, type_model: TypeModel | None = None) -> SchemaNode:
    """Compile a type to a JSON Schema node.

    Args:
        type_: Type descriptor to compile.
        type_model: Type model for the descriptor. Defaults to
            PythonTypeModel, which accepts Python annotations.

    Returns:
        The compiled schema node.

    Example:
        >>> compile_schema(list[str])
        {'type': 'array', 'items': {'type': 'string'}}
    """
    return SchemaCompiler(type_model or PythonTypeModel()).compile(type_)
