"""CLI entry point for bundlepipe.

Subcommands are imported on first use, so ``bundlepipe --help`` does not
import the compile pipeline.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from bundlepipe_cli import __version__
from bundlepipe_cli.output import set_no_color

# Command docstrings use markdown lists and code spans
rclick.rich_click.TEXT_MARKUP = "markdown"

# Command name -> "module:attr" of the click command
LAZY_COMMANDS = {
    "compile": "bundlepipe_cli.commands.compile:compile_cmd",
    "validate": "bundlepipe_cli.commands.validate:validate",
    "schema": "bundlepipe_cli.commands.schema:schema",
}


class LazyGroup(rclick.RichGroup):
    """Rich group whose subcommands are resolved from import paths.

    Attributes:
        lazy_subcommands: Command name to ``"module:attr"`` import path.
    """

    def __init__(self, *args: Any, lazy_subcommands: dict[str, str], **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.lazy_subcommands = lazy_subcommands

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(self.lazy_subcommands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        path = self.lazy_subcommands.get(cmd_name)
        if path is None:
            return None
        module_name, _, attr_name = path.partition(":")
        command: click.Command = getattr(importlib.import_module(module_name), attr_name)
        return command


@click.command(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS)
@click.version_option(version=__version__, prog_name="bundlepipe")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
def cli() -> None:
    """bundlepipe - Bundle orchestration for build pipelines.

    Build the bundles listed in bundlepipe.yaml with a pluggable module
    bundler and write them, with source maps, to an output directory.

    **Getting Started:**

    - `bundlepipe validate` - Validate your bundlepipe.yaml
    - `bundlepipe compile` - Build every bundle
    - `bundlepipe schema export` - Export JSON Schema for IDE support
    """
