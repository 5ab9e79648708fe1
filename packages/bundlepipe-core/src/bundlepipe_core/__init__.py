"""bundlepipe-core: Bundle orchestration for build pipelines.

This package provides:
- CompileRequest / BundleSpec: Pydantic input models
- CompileOrchestrator: Configure a bundler and build every bundle in order
- Artifact: Output contract consumed by the downstream pipeline
- Bundler: Protocol for external module bundlers, and load_bundler()
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Compiler and output models
from bundlepipe_core.compiler import (
    Artifact,
    BuildObserver,
    BuildResult,
    BundleDispatcher,
    BundleOutput,
    CompileOrchestrator,
    EffectiveOptions,
    OptionResolver,
    chain_observers,
    compile_bundles,
    log_build,
    resolve_options,
    validate_bundle_spec,
)

# Bundler capability
from bundlepipe_core.bundler import Bundler, load_bundler

# Error types
from bundlepipe_core.errors import (
    BundleError,
    BundlepipeError,
    ConfigurationError,
    ValidationError,
)

# JSON Schema export functions
from bundlepipe_core.export import (
    export_artifact_schema,
    export_build_file_schema,
)

# Schema models
from bundlepipe_core.schemas import (
    BUILD_FILE_NAME,
    BuildFile,
    BundleSpec,
    CompileRequest,
)

__all__ = [
    "__version__",
    # Compiler
    "CompileOrchestrator",
    "compile_bundles",
    "BundleDispatcher",
    "OptionResolver",
    "EffectiveOptions",
    "resolve_options",
    "validate_bundle_spec",
    "Artifact",
    "BundleOutput",
    "BuildResult",
    "BuildObserver",
    "log_build",
    "chain_observers",
    # Bundler
    "Bundler",
    "load_bundler",
    # Errors
    "BundlepipeError",
    "ValidationError",
    "BundleError",
    "ConfigurationError",
    # JSON Schema exports
    "export_build_file_schema",
    "export_artifact_schema",
    # Schema models
    "BundleSpec",
    "CompileRequest",
    "BuildFile",
    "BUILD_FILE_NAME",
]
