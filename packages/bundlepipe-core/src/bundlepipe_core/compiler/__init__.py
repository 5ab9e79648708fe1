"""Compiler module for bundlepipe.

This module exports the compile pipeline and its models:
- CompileOrchestrator: Configure the bundler and build every spec in order
- BundleDispatcher: Build one spec with the library or standalone operation
- OptionResolver: Merge global and per-bundle options
- validate_bundle_spec: Check a spec for src and dst
- Artifact, BundleOutput, BuildResult: Output models
- log_build, chain_observers: Build observers
"""

from __future__ import annotations

from bundlepipe_core.compiler.models import Artifact, BuildResult, BundleOutput
from bundlepipe_core.compiler.reporting import BuildObserver, chain_observers, log_build
from bundlepipe_core.compiler.option_resolver import (
    SOURCE_MAPS_KEY,
    EffectiveOptions,
    OptionResolver,
    resolve_options,
)
from bundlepipe_core.compiler.validator import validate_bundle_spec, validate_bundle_specs
from bundlepipe_core.compiler.dispatcher import BundleDispatcher
from bundlepipe_core.compiler.orchestrator import CompileOrchestrator, compile_bundles

__all__: list[str] = [
    # Orchestration
    "CompileOrchestrator",
    "compile_bundles",
    "BundleDispatcher",
    # Options
    "OptionResolver",
    "EffectiveOptions",
    "resolve_options",
    "SOURCE_MAPS_KEY",
    # Validation
    "validate_bundle_spec",
    "validate_bundle_specs",
    # Reporting
    "BuildObserver",
    "log_build",
    "chain_observers",
    # Models
    "Artifact",
    "BundleOutput",
    "BuildResult",
]
