"""Schema definitions for bundlepipe.

Input models:
- BundleSpec: One requested bundle (src, dst, sfx, options)
- CompileRequest: Global config, bundle options and ordered bundles
- BuildFile: Root schema for bundlepipe.yaml
"""

from __future__ import annotations

from bundlepipe_core.schemas.bundle_spec import BundleSpec
from bundlepipe_core.schemas.compile_request import (
    BUILD_FILE_NAME,
    BuildFile,
    CompileRequest,
)

__all__: list[str] = [
    "BundleSpec",
    "CompileRequest",
    "BuildFile",
    "BUILD_FILE_NAME",
]
