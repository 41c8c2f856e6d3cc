"""Annotation extraction from documented symbols.

Reads the description and tags of a symbol handed out by the type model.
Pure lookups: nothing is cached and the symbol is never modified.
"""

from __future__ import annotations

from docschema_core.schemas import TagEntry
from docschema_core.type_model.protocol import Symbol


def extract_tag_entries(symbol: Symbol | None) -> list[TagEntry]:
    """Return every tag of the symbol with its text flattened.

    Text fragments are concatenated without separators. Repeated tags are
    all kept, in declaration order.

    Args:
        symbol: Documented declaration, or None.

    Returns:
        Tag entries in declaration order; empty when symbol is None.
    """
    if symbol is None:
        return []

    return [TagEntry(name=tag.name, text="".join(tag.text)) for tag in symbol.tags]


def extract_tags(symbol: Symbol | None) -> dict[str, str]:
    """Return the tags of a symbol as an ordered name -> text mapping.

    A repeated tag keeps the position of its first occurrence and the text
    of its last one.

    Example:
        >>> from docschema_core.schemas import DocSymbol, DocTag
        >>> symbol = DocSymbol(
        ...     tags=(
        ...         DocTag(name="minimum", text=("1",)),
        ...         DocTag(name="format", text=("email",)),
        ...     )
        ... )
        >>> extract_tags(symbol)
        {'minimum': '1', 'format': 'email'}
    """
    return {entry.name: entry.text for entry in extract_tag_entries(symbol)}


def get_description(symbol: Symbol | None) -> str | None:
    """Return the concatenated documentation text of a symbol.

    Returns:
        Description, or None when the symbol is missing or undocumented.
    """
    if symbol is None:
        return None

    documentation = "".join(symbol.documentation)
    return documentation or None
