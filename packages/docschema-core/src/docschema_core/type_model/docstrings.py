"""Docstring annotation parsing.

Python declarations are documented with docstrings. Tags use the JSDoc
convention of a line starting with ``@name``::

    class Person(TypedDict):
        \"\"\"A registered user.

        @additionalInfo internal
        \"\"\"

        age: int
        \"\"\"Age in years.

        @minimum 0
        @integer
        \"\"\"

Class attributes have no runtime docstring, so attribute docstrings (a
string literal directly after an annotated assignment) are read from the
class source with ``ast``, the same convention Sphinx autodoc uses.
"""

from __future__ import annotations

import ast
import inspect
import logging
import re
import textwrap
from typing import Any

from docschema_core.schemas import DocSymbol, DocTag

logger = logging.getLogger(__name__)

TAG_LINE_PATTERN = re.compile(r"^@(?P<name>[A-Za-z_][\w.-]*)(?:\s+(?P<text>.*))?$")


def parse_docstring(docstring: str | None, name: str = "") -> DocSymbol | None:
    """Parse a docstring into a DocSymbol.

    Lines before the first tag line form the description. Each tag runs
    until the next tag line; continuation lines are joined with newlines.

    Args:
        docstring: Raw docstring text.
        name: Declaration name recorded on the symbol.

    Returns:
        Parsed symbol, or None when the docstring is missing or blank.

    Example:
        >>> symbol = parse_docstring("User name.\\n@minLength 1")
        >>> symbol.documentation
        ('User name.',)
        >>> symbol.tags[0].name, symbol.tags[0].text
        ('minLength', ('1',))
    """
    if not docstring or not docstring.strip():
        return None

    description_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []

    for line in inspect.cleandoc(docstring).splitlines():
        match = TAG_LINE_PATTERN.match(line.strip())
        if match:
            text = match.group("text")
            tags.append((match.group("name"), [text] if text else []))
        elif tags:
            tags[-1][1].append(line)
        else:
            description_lines.append(line)

    description = "\n".join(description_lines).strip()
    return DocSymbol(
        name=name,
        documentation=(description,) if description else (),
        tags=tuple(
            DocTag(name=tag_name, text=_tag_text(lines)) for tag_name, lines in tags
        ),
    )


def _tag_text(lines: list[str]) -> tuple[str, ...]:
    text = "\n".join(lines).strip()
    return (text,) if text else ()


def class_docstring(cls: type) -> str | None:
    """Return the docstring written on the class itself.

    Inherited docstrings and the signature docstring generated by
    ``dataclasses`` are not documentation of the class and are skipped.
    """
    doc = cls.__dict__.get("__doc__")
    if not isinstance(doc, str):
        return None
    if getattr(cls, "__dataclass_fields__", None) is not None and doc.startswith(
        f"{cls.__name__}("
    ):
        return None
    return doc


def attribute_docstrings(cls: type) -> dict[str, str]:
    """Collect attribute docstrings of a class and its bases.

    Derived classes override docs of inherited attributes.

    Args:
        cls: Class to inspect.

    Returns:
        Mapping of attribute name to raw docstring. Classes whose source is
        unavailable (builtins, dynamically created classes) contribute
        nothing.
    """
    docs: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        if klass is object or klass.__module__ == "builtins":
            continue
        docs.update(_own_attribute_docstrings(klass))
    return docs


def _own_attribute_docstrings(cls: type) -> dict[str, str]:
    try:
        source = inspect.getsource(cls)
    except (OSError, TypeError):
        logger.debug(
            "Class source unavailable, attribute docstrings skipped",
            extra={"class_name": cls.__qualname__},
        )
        return {}

    try:
        tree = ast.parse(textwrap.dedent(source))
    except SyntaxError:
        logger.debug(
            "Class source could not be parsed, attribute docstrings skipped",
            extra={"class_name": cls.__qualname__},
        )
        return {}

    class_def = next(
        (node for node in tree.body if isinstance(node, ast.ClassDef)),
        None,
    )
    if class_def is None:
        return {}

    docs: dict[str, str] = {}
    body = class_def.body
    for stmt, following in zip(body, body[1:]):
        name = _assigned_name(stmt)
        if name is None:
            continue
        docstring = _string_statement(following)
        if docstring is not None:
            docs[name] = docstring
    return docs


def _assigned_name(stmt: ast.stmt) -> str | None:
    if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
        return stmt.target.id
    if (
        isinstance(stmt, ast.Assign)
        and len(stmt.targets) == 1
        and isinstance(stmt.targets[0], ast.Name)
    ):
        return stmt.targets[0].id
    return None


def _string_statement(stmt: ast.stmt) -> str | None:
    if isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Constant):
        value: Any = stmt.value.value
        if isinstance(value, str):
            return value
    return None
