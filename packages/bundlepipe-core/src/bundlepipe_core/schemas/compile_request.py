"""CompileRequest and BuildFile models for bundlepipe.

This module defines the top-level inputs of a compile run:
- CompileRequest: bundler config, global bundle options and bundle specs
- BuildFile: the YAML form of a CompileRequest (bundlepipe.yaml), which
  also names the bundler implementation to load
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bundlepipe_core.errors import ConfigurationError
from bundlepipe_core.schemas.bundle_spec import BundleSpec

# Default build file name looked up by the CLI
BUILD_FILE_NAME = "bundlepipe.yaml"


class CompileRequest(BaseModel):
    """Input of one compile run.

    Attributes:
        config: Global bundler configuration passed to ``configure``.
        bundle_options: Defaults applied to every bundle before per-bundle
            overrides (``bundleOptions`` in YAML/JSON).
        bundles: Bundle specs, compiled in this order.

    Example:
        >>> request = CompileRequest.model_validate(
        ...     {
        ...         "bundleOptions": {"minify": True},
        ...         "bundles": [{"src": "a", "dst": "a.js"}],
        ...     }
        ... )
        >>> request.bundle_options
        {'minify': True}
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Global bundler configuration",
    )
    bundle_options: dict[str, Any] = Field(
        default_factory=dict,
        alias="bundleOptions",
        description="Options applied to every bundle before per-bundle overrides",
    )
    bundles: list[BundleSpec] = Field(
        default_factory=list,
        description="Bundles to build, in output order",
    )

    @field_validator("config", "bundle_options", mode="before")
    @classmethod
    def default_empty_mapping(cls, v: Any) -> Any:
        """Treat null config or bundleOptions as empty."""
        return {} if v is None else v

    @field_validator("bundles", mode="before")
    @classmethod
    def default_empty_bundles(cls, v: Any) -> Any:
        """Treat a null bundle list as empty."""
        return [] if v is None else v


class BuildFile(CompileRequest):
    """Root model for bundlepipe.yaml.

    Attributes:
        bundler: Import path of the bundler implementation
            (``"package.module:attr"``). The CLI ``--bundler`` option
            takes precedence.

    Example:
        >>> build = BuildFile.from_yaml("bundlepipe.yaml")
        >>> request = build.to_request()
    """

    bundler: str | None = Field(
        default=None,
        pattern=r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$",
        description="Bundler import path (package.module:attr)",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> BuildFile:
        """Load and validate a BuildFile from a YAML file.

        Args:
            path: Path to bundlepipe.yaml.

        Returns:
            Validated BuildFile instance.

        Raises:
            FileNotFoundError: If file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            pydantic.ValidationError: If schema validation fails.
            ConfigurationError: If the document is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Build file must contain a mapping",
                file_path=str(path),
                internal_details=f"top-level YAML type is {type(data).__name__}",
            )

        return cls.model_validate(data)

    def to_request(self) -> CompileRequest:
        """Return the CompileRequest described by this build file."""
        return CompileRequest(
            config=self.config,
            bundle_options=self.bundle_options,
            bundles=self.bundles,
        )
