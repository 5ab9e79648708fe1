"""Option resolution for bundlepipe.

This module merges the global ``bundleOptions`` of a compile request with
the per-bundle ``options`` of each spec:
- Shallow merge, per-bundle keys win on conflict
- Nested mappings are replaced, never merged
- Absent option sets count as empty mappings
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from bundlepipe_core.schemas import BundleSpec

logger = structlog.get_logger(__name__)

# Option key that controls source map emission
SOURCE_MAPS_KEY = "sourceMaps"


@dataclass(frozen=True, eq=False)
class EffectiveOptions(Mapping[str, Any]):
    """Resolved option set for one bundle.

    A read-only mapping. Compares equal to any mapping with the same items.

    Attributes:
        options: Merged options.
    """

    options: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.options[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def __repr__(self) -> str:
        return f"EffectiveOptions({self.options!r})"

    @property
    def source_maps(self) -> bool:
        """True only when the merged ``sourceMaps`` value is literally True."""
        return self.options.get(SOURCE_MAPS_KEY) is True

    def as_dict(self) -> dict[str, Any]:
        """Return a fresh mutable copy for the bundler."""
        return dict(self.options)


def resolve_options(
    global_options: Mapping[str, Any] | None,
    spec: BundleSpec,
) -> EffectiveOptions:
    """Merge global bundle options with a spec's overrides.

    Args:
        global_options: Request-level ``bundleOptions``. None means empty.
        spec: Bundle spec whose ``options`` override the globals.

    Returns:
        EffectiveOptions for the bundle. Neither input is modified.

    Example:
        >>> spec = BundleSpec(src="a", dst="a.js", options={"a": 2, "b": 3})
        >>> resolve_options({"a": 1}, spec) == {"a": 2, "b": 3}
        True
    """
    merged: dict[str, Any] = dict(global_options or {})
    merged.update(spec.options or {})
    return EffectiveOptions(merged)


class OptionResolver:
    """Resolves effective options for the bundles of one request.

    Attributes:
        global_options: Request-level ``bundleOptions``.

    Example:
        >>> resolver = OptionResolver({"minify": True})
        >>> resolver.resolve(BundleSpec(src="a", dst="a.js")).as_dict()
        {'minify': True}
    """

    def __init__(self, global_options: Mapping[str, Any] | None = None) -> None:
        self.global_options: dict[str, Any] = dict(global_options or {})

    def resolve(self, spec: BundleSpec) -> EffectiveOptions:
        """Resolve the effective options for one spec."""
        effective = resolve_options(self.global_options, spec)
        overridden = sorted(set(spec.options) & set(self.global_options))
        logger.debug(
            "options_resolved",
            dst=spec.dst,
            keys=sorted(effective),
            overridden=overridden,
            source_maps=effective.source_maps,
        )
        return effective
