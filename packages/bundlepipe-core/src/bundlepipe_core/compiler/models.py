"""Compiler models for bundlepipe.

This module defines the models exchanged with the bundler and produced by
the compile pipeline:
- BundleOutput: Normalized result of one bundler operation
- BuildResult: What the build observer receives after a successful bundle
- Artifact: One build output handed to the downstream pipeline
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bundlepipe_core.schemas import BundleSpec


class BundleOutput(BaseModel):
    """Result of a bundler operation.

    Bundlers may return this model, a mapping with ``source`` and optional
    ``sourceMap``/``source_map`` keys, or any object exposing those
    attributes. Mapping-typed source maps are serialized to JSON text.

    Attributes:
        source: Bundled source text.
        source_map: Source map text, if the bundler produced one.
        modules: Module identifiers included in the bundle, for reporting.

    Example:
        >>> output = BundleOutput.model_validate({"source": "x()", "sourceMap": "{}"})
        >>> output.source_map
        '{}'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        from_attributes=True,
    )

    source: str = Field(
        ...,
        description="Bundled source text",
    )
    source_map: str | None = Field(
        default=None,
        alias="sourceMap",
        description="Source map text",
    )
    modules: list[str] = Field(
        default_factory=list,
        description="Module identifiers included in the bundle",
    )

    @field_validator("source_map", mode="before")
    @classmethod
    def _serialize_map(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return json.dumps(value)
        return value


class BuildResult(BaseModel):
    """Successful bundle operation, as reported to the build observer.

    Attributes:
        spec: The bundle spec that was built.
        options: Effective options the bundler was called with.
        output: Normalized bundler output.
        mode: "standalone" for sfx bundles, "library" otherwise.
        duration_seconds: Wall time of the bundler call.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    spec: BundleSpec
    options: dict[str, Any] = Field(default_factory=dict)
    output: BundleOutput
    mode: Literal["standalone", "library"]
    duration_seconds: float = Field(default=0.0, ge=0.0)


class Artifact(BaseModel):
    """One build output ready for the downstream pipeline.

    ``source_map`` is ``None`` unless source maps were requested for the
    bundle, even if the bundler produced one.

    Attributes:
        path: Output path, equal to the bundle spec's ``dst``.
        contents: Bundled source as UTF-8 bytes.
        source_map: Source map text, or None.

    Example:
        >>> artifact = Artifact(path="main.js", contents=b"x()")
        >>> artifact.text
        'x()'
        >>> artifact.source_map_path is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(
        ...,
        min_length=1,
        description="Output path (bundle dst)",
    )
    contents: bytes = Field(
        ...,
        description="Bundled source bytes",
    )
    source_map: str | None = Field(
        default=None,
        description="Source map text, present only when requested",
    )

    @property
    def text(self) -> str:
        """Contents decoded as UTF-8."""
        return self.contents.decode("utf-8")

    @property
    def source_map_path(self) -> str | None:
        """Path the source map is emitted to, or None without a map."""
        if self.source_map is None:
            return None
        return f"{self.path}.map"
