"""JSON Schema export functions for docschema.

This module compiles a type and wraps the result as a standalone JSON
Schema Draft 2020-12 document for IDE autocomplete and cross-language
validation, optionally writing it to disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from docschema_core.compiler import SchemaCompiler
from docschema_core.errors import ExportError
from docschema_core.schemas import SchemaNode
from docschema_core.type_model import PythonTypeModel, TypeModel

logger = logging.getLogger(__name__)

JSON_SCHEMA_DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


class ExportConfig(BaseModel):
    """Settings for exported schema documents.

    Attributes:
        schema_uri: Meta-schema URI written under ``$schema``.
        schema_id: Optional document URI written under ``$id``.
        indent: JSON indentation of written files (None for compact output).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_uri: str = Field(
        default=JSON_SCHEMA_DRAFT_2020_12,
        min_length=1,
        description="Meta-schema URI",
    )
    schema_id: str | None = Field(default=None, description="Document $id")
    indent: int | None = Field(default=2, ge=0, description="JSON indentation")


def export_schema(
    type_: Any,
    output_path: Path | str | None = None,
    *,
    type_model: TypeModel | None = None,
    config: ExportConfig | None = None,
) -> dict[str, Any]:
    """Compile a type and export it as a JSON Schema document.

    Args:
        type_: Type descriptor to compile.
        output_path: Optional path to write the schema file. Parent
            directories are created as needed.
        type_model: Type model for the descriptor (defaults to
            PythonTypeModel).
        config: Export settings (defaults to ExportConfig()).

    Returns:
        Dictionary containing the JSON Schema document.

    Raises:
        CompilationError: If the type cannot be compiled.
        ExportError: If the file cannot be written.

    Example:
        >>> schema = export_schema(Person)
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'

        >>> # Export to file
        >>> export_schema(Person, Path("schemas/person.schema.json"))
    """
    config = config or ExportConfig()
    compiler = SchemaCompiler(type_model or PythonTypeModel())

    schema = build_document(compiler.compile(type_), config)

    if output_path is not None:
        _write_schema_file(schema, output_path, config.indent)

    return schema


def build_document(node: SchemaNode, config: ExportConfig) -> dict[str, Any]:
    """Wrap a compiled node with ``$schema`` and ``$id`` metadata.

    Metadata keys come first; the node itself is not modified.
    """
    document: dict[str, Any] = {"$schema": config.schema_uri}
    if config.schema_id:
        document["$id"] = config.schema_id
    document.update(node)
    return document


def _write_schema_file(schema: dict[str, Any], path: Path | str, indent: int | None) -> None:
    """Write schema to JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.
        indent: JSON indentation.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    output_path = Path(path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(schema, indent=indent) + "\n")
    except OSError as e:
        raise ExportError(str(output_path), internal_details=str(e)) from e

    logger.info(
        "Schema exported",
        extra={"output_path": str(output_path), "keys": len(schema)},
    )
