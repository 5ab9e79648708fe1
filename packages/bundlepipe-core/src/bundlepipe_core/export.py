"""JSON Schema export functions for bundlepipe.

This module exports JSON Schema Draft 2020-12 documents generated from the
Pydantic models, for IDE autocomplete on bundlepipe.yaml and for
validating artifact manifests in other languages.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from bundlepipe_core.compiler.models import Artifact
from bundlepipe_core.schemas import BuildFile

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_BASE_URL = "https://bundlepipe.dev/schemas"


def export_build_file_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the bundlepipe.yaml JSON Schema.

    Args:
        output_path: Optional path to write the schema file. Parent
            directories are created as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_build_file_schema()
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'
    """
    return _export(BuildFile, "bundlepipe.schema.json", output_path)


def export_artifact_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the Artifact JSON Schema.

    Args:
        output_path: Optional path to write the schema file.

    Returns:
        Dictionary containing the JSON Schema.
    """
    return _export(Artifact, "artifact.schema.json", output_path)


def _export(
    model: type[BaseModel],
    file_name: str,
    output_path: Path | str | None,
) -> dict[str, Any]:
    schema = model.model_json_schema()

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = f"{SCHEMA_BASE_URL}/{file_name}"

    # Models forbid unknown keys
    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to a JSON file, creating parent directories."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2))
