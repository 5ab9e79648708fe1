"""BundleSpec model for bundlepipe.

This module defines the BundleSpec model that describes one requested
build unit: an entry point, an output path, the bundling mode and
per-bundle option overrides.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BundleSpec(BaseModel):
    """One requested bundle.

    ``src`` and ``dst`` are optional at the model level so that a missing
    field is reported by the bundle validator as ``missing src`` /
    ``missing dst`` instead of a generic schema error.

    Attributes:
        src: Entry point identifier of the bundle.
        dst: Output path or file name of the bundle.
        sfx: Build a self-executing (standalone) bundle instead of a
            library bundle.
        options: Per-bundle bundler options. Unknown keys are passed
            through to the bundler untouched.

    Example:
        >>> spec = BundleSpec(src="app/main", dst="main.js", options={"minify": True})
        >>> spec.sfx
        False
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    src: str | None = Field(
        default=None,
        description="Entry point identifier of the bundle",
    )
    dst: str | None = Field(
        default=None,
        description="Output path or file name of the bundle",
    )
    sfx: bool = Field(
        default=False,
        description="Build a self-executing (standalone) bundle",
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Per-bundle bundler options (override bundleOptions)",
    )

    @field_validator("options", mode="before")
    @classmethod
    def default_empty_options(cls, v: Any) -> Any:
        """Treat null options (``options:`` with no value) as empty."""
        return {} if v is None else v

    @property
    def mode(self) -> str:
        """Bundling mode name, "standalone" or "library"."""
        return "standalone" if self.sfx else "library"
