"""Rich console output utilities for bundlepipe-cli.

This module provides formatted console output with Rich, supporting
colored success/error/warning messages, module tree rendering for build
summaries, and the NO_COLOR environment variable.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.tree import Tree

if TYPE_CHECKING:
    from bundlepipe_core.compiler.models import BuildResult

# Rich respects NO_COLOR on its own; --no-color is handled by set_no_color()
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(force_terminal=force_terminal, no_color=no_color or _force_no_color)


# Default console instance
console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark.

    Example:
        >>> success("Compiled 2 bundles")
        ✓ Compiled 2 bundles
    """
    console.print(f"[green]✓[/green] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red X.

    Example:
        >>> error("missing dst")
        ✗ missing dst
    """
    console.print(f"[red]✗[/red] {message}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print an informational message."""
    console.print(message, **kwargs)


def build_tree(result: BuildResult) -> Tree:
    """Build a Rich tree of the modules included in a bundle.

    Args:
        result: Successful build result.

    Returns:
        Tree rooted at the bundle's ``dst``, one leaf per module.
    """
    label = f"[bold]{result.spec.dst}[/bold] [dim]({result.mode}, {result.spec.src})[/dim]"
    tree = Tree(label)
    for module in result.output.modules:
        tree.add(module)
    if result.output.source_map is not None:
        tree.add("[dim]source map[/dim]")
    return tree


def print_build_tree(result: BuildResult) -> None:
    """Print the module tree of a bundle."""
    console.print(build_tree(result))


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Note:
        This updates the module-level console instance.
    """
    global console
    console = create_console(no_color=no_color)
