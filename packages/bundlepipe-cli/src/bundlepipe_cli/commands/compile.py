"""bundlepipe compile command - Build every bundle and write the artifacts."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from bundlepipe_cli.build_file import load_build_file
from bundlepipe_cli.emit import write_artifacts
from bundlepipe_cli.errors import EXIT_SYSTEM_ERROR, CLIError, handle_permission_error
from bundlepipe_cli.output import print_build_tree, success

if TYPE_CHECKING:
    from bundlepipe_core import BuildObserver, BuildResult


def summary_observer(always: bool) -> BuildObserver:
    """Return an observer that logs each build and prints its module tree.

    The tree is printed for every bundle when ``always`` is set, otherwise
    only for bundles whose effective options set ``summary: true``.
    """
    from bundlepipe_core import chain_observers, log_build

    def _print_tree(result: BuildResult) -> None:
        if always or result.options.get("summary") is True:
            print_build_tree(result)

    return chain_observers(log_build, _print_tree)


@click.command("compile")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=False),
    default="./bundlepipe.yaml",
    help="Path to bundlepipe.yaml [default: ./bundlepipe.yaml]",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default="dist/",
    help="Output directory [default: dist/]",
)
@click.option(
    "-b",
    "--bundler",
    "bundler_path",
    type=str,
    default=None,
    help="Bundler import path (package.module:attr), overrides bundlepipe.yaml",
)
@click.option(
    "--summary",
    is_flag=True,
    default=False,
    help="Print the module tree of every bundle.",
)
def compile_cmd(
    file_path: str,
    output_path: str,
    bundler_path: str | None,
    summary: bool,
) -> None:
    """Build every bundle in bundlepipe.yaml.

    Bundles are built one after another, in file order. Each bundle is
    written to the output directory under its `dst`, with its source map
    next to it as `<dst>.map` when source maps are enabled.

    Examples:

        bundlepipe compile

        bundlepipe compile --output build/js/ --summary

        bundlepipe compile --bundler acme_build.jspm:JspmBundler
    """
    build = load_build_file(file_path)

    path = bundler_path or build.bundler
    if path is None:
        raise CLIError(
            f"No bundler configured in {file_path}.\n"
            "Set 'bundler: package.module:attr' or pass --bundler."
        )

    # Import here to avoid heavy imports at CLI startup
    from bundlepipe_core import BundlepipeError, CompileOrchestrator, load_bundler

    try:
        bundler = load_bundler(path)
        orchestrator = CompileOrchestrator(bundler, summary_observer(summary))
        artifacts = asyncio.run(orchestrator.compile(build.to_request()))
    except BundlepipeError as e:
        raise CLIError(f"Compilation failed: {e.user_message}") from None

    output = Path(output_path)
    try:
        written = write_artifacts(artifacts, output)
    except PermissionError:
        handle_permission_error(output_path, "write to")
    except ValueError as e:
        raise CLIError(str(e), exit_code=EXIT_SYSTEM_ERROR) from None

    success(f"Compiled {len(artifacts)} bundle(s) to {output} ({len(written)} files)")
