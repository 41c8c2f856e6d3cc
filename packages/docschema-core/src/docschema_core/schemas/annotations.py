"""Documentation annotation models.

A declaration's documentation comment is modelled as a symbol holding:
- documentation: free-text fragments forming the description
- tags: ordered ``@name text`` annotations, each with raw text fragments

DocSymbol and DocTag are the concrete, immutable implementation used by the
Python type model. Other type models may hand the compiler any object that
satisfies the ``Symbol`` protocol in ``docschema_core.type_model.protocol``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DocTag(BaseModel):
    """One raw tag attached to a documented declaration.

    Attributes:
        name: Tag name without the leading ``@``.
        text: Raw text fragments following the tag name.

    Example:
        >>> DocTag(name="minimum", text=("10",))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Tag name without '@'")
    text: tuple[str, ...] = Field(default=(), description="Raw text fragments")


class DocSymbol(BaseModel):
    """Documentation attached to a declaration.

    Attributes:
        name: Declaration name, used in log messages only.
        documentation: Description text fragments.
        tags: Tags in declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="", description="Declaration name")
    documentation: tuple[str, ...] = Field(default=(), description="Description fragments")
    tags: tuple[DocTag, ...] = Field(default=(), description="Tags in declaration order")


class TagEntry(BaseModel):
    """A tag with its text flattened to a single string.

    Text is untyped until the constraint applicator parses it.

    Attributes:
        name: Tag name without the leading ``@``.
        text: Concatenated tag text (empty for flag tags such as ``@ignore``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    text: str = Field(default="")
