"""Type-model accessor interface consumed by the schema compiler.

The compiler never inspects host types directly. Everything it needs to
know about a type descriptor is asked through ``TypeModel``:

- symbol resolution (own symbol, else alias symbol)
- category flags and literal values
- union member, array element and struct member enumeration
- tuple detection
- human-readable rendering for errors and boolean literal detection

Type descriptors are opaque to the compiler; only the type model that
produced them can interpret them.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class TypeFlags(enum.Flag):
    """Host type categories.

    Flags are not mutually exclusive: an enum is ``ENUM_LIKE | UNION`` and
    arrays and tuples are ``OBJECT``. The classifier resolves overlaps by
    checking rules in a fixed order.
    """

    NONE = 0
    STRING = enum.auto()
    STRING_LITERAL = enum.auto()
    NUMBER = enum.auto()
    NUMBER_LITERAL = enum.auto()
    BOOLEAN = enum.auto()
    BOOLEAN_LITERAL = enum.auto()
    NULL = enum.auto()
    UNDEFINED = enum.auto()
    ENUM_LIKE = enum.auto()
    UNION = enum.auto()
    OBJECT = enum.auto()
    INTERSECTION = enum.auto()


LITERAL_FLAGS = TypeFlags.STRING_LITERAL | TypeFlags.NUMBER_LITERAL | TypeFlags.BOOLEAN_LITERAL
"""Flags of the literal categories that may appear in an enum."""


@runtime_checkable
class RawTag(Protocol):
    """A tag as stored on a symbol, before its text is flattened."""

    @property
    def name(self) -> str: ...

    @property
    def text(self) -> Sequence[str]: ...


@runtime_checkable
class Symbol(Protocol):
    """Declaration handle carrying documentation and tags."""

    @property
    def name(self) -> str: ...

    @property
    def documentation(self) -> Sequence[str]: ...

    @property
    def tags(self) -> Sequence[RawTag]: ...


@dataclass(frozen=True)
class Member:
    """One named member of a struct-like type.

    Attributes:
        name: Property name as it appears in the schema.
        type: Type descriptor of the member.
        optional: Whether the member is declared optional.
        symbol: Documentation of the member declaration, if any.
    """

    name: str
    type: Any
    optional: bool = False
    symbol: Symbol | None = None


@runtime_checkable
class TypeModel(Protocol):
    """Queries the schema compiler needs answered about a type descriptor."""

    def get_symbol(self, type_: Any) -> Symbol | None:
        """Return the declared symbol, else the alias symbol, else None."""
        ...

    def get_flags(self, type_: Any) -> TypeFlags:
        """Return the category flags of the type."""
        ...

    def get_literal_value(self, type_: Any) -> str | int | float:
        """Return the value of a string or number literal type."""
        ...

    def get_union_members(self, type_: Any) -> Sequence[Any]:
        """Return union (or enum) members in declaration order."""
        ...

    def is_array_type(self, type_: Any) -> bool: ...

    def get_element_type(self, type_: Any) -> Any | None:
        """Return the element type of an array, or None when unresolved."""
        ...

    def is_tuple_type(self, type_: Any) -> bool: ...

    def get_members(self, type_: Any) -> Sequence[Member]:
        """Return struct members in declaration order."""
        ...

    def type_to_string(self, type_: Any) -> str:
        """Render the type for error messages and boolean literal detection."""
        ...

    def get_type_id(self, type_: Any) -> Hashable:
        """Return a stable identity for the type, used to detect recursion."""
        ...
