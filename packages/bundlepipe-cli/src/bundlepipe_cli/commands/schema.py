"""bundlepipe schema command - Export JSON Schema."""

from __future__ import annotations

from pathlib import Path

import click

from bundlepipe_cli.errors import handle_permission_error
from bundlepipe_cli.output import success


@click.group()
def schema() -> None:
    """Manage JSON Schema for IDE support.

    **Commands:**

    - `bundlepipe schema export` - Export the bundlepipe.yaml JSON Schema
    - `bundlepipe schema export-artifact` - Export the Artifact JSON Schema
    """
    pass


@schema.command("export")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/bundlepipe.schema.json",
    help="Output path [default: ./schemas/bundlepipe.schema.json]",
)
def export_schema(output_path: str) -> None:
    """Export the bundlepipe.yaml JSON Schema.

    Examples:

        bundlepipe schema export

        bundlepipe schema export --output custom/path/schema.json
    """
    from bundlepipe_core import export_build_file_schema

    try:
        export_build_file_schema(Path(output_path))
    except PermissionError:
        handle_permission_error(output_path, "write to")

    success(f"Schema exported to {output_path}")


@schema.command("export-artifact")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="./schemas/artifact.schema.json",
    help="Output path [default: ./schemas/artifact.schema.json]",
)
def export_artifact(output_path: str) -> None:
    """Export the Artifact JSON Schema."""
    from bundlepipe_core import export_artifact_schema

    try:
        export_artifact_schema(Path(output_path))
    except PermissionError:
        handle_permission_error(output_path, "write to")

    success(f"Artifact schema exported to {output_path}")
