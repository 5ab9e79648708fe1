"""bundlepipe validate command - Validate bundlepipe.yaml without building."""

from __future__ import annotations

import click

from bundlepipe_cli.build_file import load_build_file
from bundlepipe_cli.errors import CLIError
from bundlepipe_cli.output import success


@click.command()
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./bundlepipe.yaml",
    help="Path to bundlepipe.yaml [default: ./bundlepipe.yaml]",
)
def validate(file_path: str) -> None:
    """Validate bundlepipe.yaml.

    Checks the file against the build file schema and checks that every
    bundle names a `src` and a `dst`. The bundler is not invoked.

    Examples:

        bundlepipe validate

        bundlepipe validate --file web/bundlepipe.yaml
    """
    build = load_build_file(file_path)

    from bundlepipe_core.compiler import validate_bundle_specs

    errors = validate_bundle_specs(build.bundles)
    if errors:
        details = "\n".join(f"  - {message}" for message in errors)
        raise CLIError(f"Invalid bundles in {file_path}:\n{details}")

    success(f"Configuration valid ({len(build.bundles)} bundle(s))")
