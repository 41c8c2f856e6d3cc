"""Type model over Python ``typing`` introspection.

PythonTypeModel lets the schema compiler work on ordinary Python
annotations. Type descriptors are annotation objects (``str``,
``list[int]``, ``Literal["a", "b"]``, a TypedDict, a dataclass, a pydantic
model, ...). Documentation comes from class docstrings, attribute
docstrings and ``Annotated[..., Doc("...")]`` metadata.

Mapping summary:
- str -> string; int, float -> number; bool -> boolean; None -> null
- Undefined (marker class) -> undefined
- Literal[x] -> literal; Literal[x, y] and X | Y -> union
- Enum subclasses -> enum-like union of their members
- list/set/frozenset/Sequence -> array; tuple/NamedTuple -> tuple
- TypedDict, dataclass, pydantic BaseModel, annotated class -> struct
- dict and other mappings are not supported
"""

from __future__ import annotations

import collections.abc
import dataclasses
import enum
import types
import typing
from collections.abc import Hashable, Sequence
from typing import Any, ClassVar, Literal, Union

import typing_extensions
from pydantic import BaseModel
from typing_extensions import get_args, get_origin, is_typeddict

from docschema_core.errors import UnsupportedTypeError
from docschema_core.type_model.docstrings import (
    attribute_docstrings,
    class_docstring,
    parse_docstring,
)
from docschema_core.type_model.protocol import Member, Symbol, TypeFlags


class Undefined:
    """Marker for a value that may be absent.

    ``nickname: str | Undefined`` declares a member that may be left out of
    an instance, the same as a member declared optional. On its own it
    compiles to ``{"type": "null"}``.
    """


NONE_TYPES: tuple[Any, ...] = (None, type(None))

ARRAY_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        set,
        frozenset,
        collections.abc.Collection,
        collections.abc.Iterable,
        collections.abc.MutableSequence,
        collections.abc.MutableSet,
        collections.abc.Sequence,
        collections.abc.Set,
    }
)

MAPPING_ORIGINS: frozenset[Any] = frozenset(
    {dict, collections.abc.Mapping, collections.abc.MutableMapping}
)

UNION_ORIGINS: frozenset[Any] = frozenset({Union, types.UnionType})

ANNOTATED_FORMS: frozenset[Any] = frozenset({typing.Annotated, typing_extensions.Annotated})

# Type qualifiers that only affect TypedDict requiredness or mutability.
QUALIFIERS: frozenset[Any] = frozenset(
    {
        typing.Required,
        typing.NotRequired,
        typing_extensions.Required,
        typing_extensions.NotRequired,
        typing_extensions.ReadOnly,
    }
)

ALIAS_TYPES: tuple[type, ...] = tuple(
    {
        typing_extensions.TypeAliasType,
        getattr(typing, "TypeAliasType", typing_extensions.TypeAliasType),
    }
)


def _unwrap_once(type_: Any) -> Any | None:
    """Return the annotation wrapped by an alias, qualifier or Annotated."""
    if isinstance(type_, ALIAS_TYPES):
        return type_.__value__
    if isinstance(type_, typing.NewType):
        return type_.__supertype__
    origin = get_origin(type_)
    if origin in ANNOTATED_FORMS or origin in QUALIFIERS:
        return get_args(type_)[0]
    return None


def strip_annotations(type_: Any) -> Any:
    """Remove aliases, qualifiers and Annotated layers from an annotation."""
    inner = _unwrap_once(type_)
    while inner is not None:
        type_ = inner
        inner = _unwrap_once(type_)
    return type_


def _is_plain_class(type_: Any) -> bool:
    return isinstance(type_, type) and get_origin(type_) is None


def _literal_value(value: Any) -> Any:
    return value.value if isinstance(value, enum.Enum) else value


def _literal_flags(value: Any) -> TypeFlags:
    value = _literal_value(value)
    if isinstance(value, bool):
        return TypeFlags.BOOLEAN_LITERAL
    if isinstance(value, (int, float)):
        return TypeFlags.NUMBER_LITERAL
    if isinstance(value, str):
        return TypeFlags.STRING_LITERAL
    if value is None:
        return TypeFlags.NULL
    return TypeFlags.NONE


def _split_undefined(hint: Any) -> tuple[Any, bool]:
    """Split ``X | Undefined`` into ``X`` and whether Undefined was present.

    Qualifiers are dropped and Annotated metadata is kept on the result.
    """
    current = hint
    metadata: tuple[Any, ...] = ()
    while True:
        origin = get_origin(current)
        if origin in QUALIFIERS:
            current = get_args(current)[0]
        elif origin in ANNOTATED_FORMS:
            metadata += current.__metadata__
            current = get_args(current)[0]
        else:
            break

    if get_origin(current) not in UNION_ORIGINS or Undefined not in get_args(current):
        return hint, False

    remaining = tuple(arg for arg in get_args(current) if arg is not Undefined)
    stripped: Any = Union[remaining]
    if metadata:
        stripped = typing.Annotated[(stripped, *metadata)]
    return stripped, True


class PythonTypeModel:
    """TypeModel implementation for Python annotations.

    Example:
        >>> from docschema_core import compile_schema
        >>> compile_schema(list[str], PythonTypeModel())
        {'type': 'array', 'items': {'type': 'string'}}
    """

    def get_symbol(self, type_: Any) -> Symbol | None:
        """Return the class docstring symbol, else the Annotated Doc symbol."""
        inner = strip_annotations(type_)
        if self._is_documented_class(inner):
            symbol = parse_docstring(class_docstring(inner), inner.__qualname__)
            if symbol is not None:
                return symbol
        return self._annotation_symbol(type_)

    def get_flags(self, type_: Any) -> TypeFlags:
        type_ = strip_annotations(type_)

        if type_ is str:
            return TypeFlags.STRING
        if type_ is bool:
            return TypeFlags.BOOLEAN
        if type_ is int or type_ is float:
            return TypeFlags.NUMBER
        if type_ in NONE_TYPES:
            return TypeFlags.NULL
        if type_ is Undefined:
            return TypeFlags.UNDEFINED
        if isinstance(type_, enum.Enum):
            return _literal_flags(type_)

        origin = get_origin(type_)
        if origin is Literal:
            values = get_args(type_)
            if len(values) == 1:
                return _literal_flags(values[0])
            return TypeFlags.UNION
        if origin in UNION_ORIGINS:
            return TypeFlags.UNION
        if _is_plain_class(type_) and issubclass(type_, enum.Enum):
            return TypeFlags.ENUM_LIKE | TypeFlags.UNION
        if self.is_array_type(type_) or self.is_tuple_type(type_) or self._is_struct(type_):
            return TypeFlags.OBJECT
        return TypeFlags.NONE

    def get_literal_value(self, type_: Any) -> str | int | float:
        type_ = strip_annotations(type_)
        if isinstance(type_, enum.Enum):
            return _literal_value(type_)  # type: ignore[no-any-return]
        if get_origin(type_) is Literal and len(get_args(type_)) == 1:
            return _literal_value(get_args(type_)[0])  # type: ignore[no-any-return]
        raise TypeError(f"Not a single-value literal type: {self.type_to_string(type_)}")

    def get_union_members(self, type_: Any) -> Sequence[Any]:
        type_ = strip_annotations(type_)
        origin = get_origin(type_)

        if origin is Literal:
            return [Literal[value] for value in get_args(type_)]
        if origin in UNION_ORIGINS:
            members: list[Any] = []
            for member in get_args(type_):
                inner = strip_annotations(member)
                if get_origin(inner) is Literal and len(get_args(inner)) > 1:
                    members.extend(self.get_union_members(inner))
                else:
                    members.append(member)
            return members
        if _is_plain_class(type_) and issubclass(type_, enum.Enum):
            return list(type_)
        return []

    def is_array_type(self, type_: Any) -> bool:
        type_ = strip_annotations(type_)
        return type_ in ARRAY_ORIGINS or get_origin(type_) in ARRAY_ORIGINS

    def get_element_type(self, type_: Any) -> Any | None:
        args = get_args(strip_annotations(type_))
        return args[0] if args else None

    def is_tuple_type(self, type_: Any) -> bool:
        type_ = strip_annotations(type_)
        if type_ is tuple or get_origin(type_) is tuple:
            return True
        return _is_plain_class(type_) and issubclass(type_, tuple) and hasattr(type_, "_fields")

    def get_members(self, type_: Any) -> Sequence[Member]:
        """Return struct members in declaration order.

        A member annotated ``X | Undefined`` is reported as an optional
        member of type ``X``.

        Raises:
            UnsupportedTypeError: If member annotations cannot be resolved.
        """
        type_ = strip_annotations(type_)
        if not _is_plain_class(type_) or type_ in MAPPING_ORIGINS:
            return []

        if issubclass(type_, BaseModel):
            # Annotations are already resolved by pydantic; BaseModel's own
            # ClassVar hints reference names that only exist for type checkers.
            docs = attribute_docstrings(type_)
            return [
                self._member(
                    field.alias or name,
                    field.annotation,
                    not field.is_required(),
                    docs.get(name) or field.description,
                )
                for name, field in type_.model_fields.items()
            ]

        try:
            hints = typing_extensions.get_type_hints(type_, include_extras=True)
        except (NameError, TypeError) as e:
            raise UnsupportedTypeError(
                "unsupported",
                self.type_to_string(type_),
                internal_details=f"Member annotations of {type_.__qualname__} unresolved: {e}",
            ) from e

        docs = attribute_docstrings(type_)

        if is_typeddict(type_):
            optional_keys = type_.__optional_keys__
            return [
                self._member(name, hint, name in optional_keys, docs.get(name))
                for name, hint in hints.items()
            ]

        if dataclasses.is_dataclass(type_):
            return [
                self._member(
                    field.name,
                    hints.get(field.name, field.type),
                    field.default is not dataclasses.MISSING
                    or field.default_factory is not dataclasses.MISSING,
                    docs.get(field.name),
                )
                for field in dataclasses.fields(type_)
            ]

        return [
            self._member(name, hint, hasattr(type_, name), docs.get(name))
            for name, hint in hints.items()
            if get_origin(hint) is not ClassVar and hint is not ClassVar
        ]

    def type_to_string(self, type_: Any) -> str:
        type_ = strip_annotations(type_)
        if isinstance(type_, enum.Enum):
            return repr(type_.value)
        if get_origin(type_) is Literal and len(get_args(type_)) == 1:
            return repr(_literal_value(get_args(type_)[0]))
        if type_ in NONE_TYPES:
            return "None"
        if _is_plain_class(type_):
            return type_.__qualname__
        return repr(type_).replace("typing.", "").replace("typing_extensions.", "")

    def get_type_id(self, type_: Any) -> Hashable:
        key = strip_annotations(type_)
        try:
            hash(key)
        except TypeError:
            return id(key)
        return key  # type: ignore[no-any-return]

    def _is_struct(self, type_: Any) -> bool:
        # Mappings carry no member names, so dict[K, V] has no struct form.
        if not _is_plain_class(type_) or type_ in MAPPING_ORIGINS:
            return False
        if is_typeddict(type_) or dataclasses.is_dataclass(type_):
            return True
        if issubclass(type_, BaseModel):
            return True
        return type_.__module__ != "builtins" and bool(getattr(type_, "__annotations__", None))

    def _is_documented_class(self, type_: Any) -> bool:
        """Only declared enums and structs lend their docstring to a schema."""
        if not _is_plain_class(type_) or type_ is Undefined:
            return False
        return issubclass(type_, enum.Enum) or self._is_struct(type_)

    def _annotation_symbol(self, type_: Any) -> Symbol | None:
        """Return the first ``Doc`` found in Annotated metadata, outermost first."""
        current: Any = type_
        while current is not None:
            if get_origin(current) in ANNOTATED_FORMS:
                for metadata in current.__metadata__:
                    documentation = getattr(metadata, "documentation", None)
                    if isinstance(documentation, str):
                        return parse_docstring(documentation, self.type_to_string(current))
            current = _unwrap_once(current)
        return None

    def _member(self, name: str, hint: Any, optional: bool, docstring: str | None) -> Member:
        hint, may_be_undefined = _split_undefined(hint)
        return Member(name, hint, optional or may_be_undefined, parse_docstring(docstring, name))
