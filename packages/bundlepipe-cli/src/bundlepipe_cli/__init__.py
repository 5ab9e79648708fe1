"""bundlepipe-cli: Command line interface for bundlepipe.

Provides the ``bundlepipe`` command with compile, validate and schema
subcommands.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
