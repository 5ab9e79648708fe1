"""Bundle dispatch for bundlepipe.

This module implements the BundleDispatcher that runs one bundle spec
through the bundler and turns the result into an Artifact:
- sfx specs go to ``bundle_standalone``, all others to ``bundle_library``
- Source maps are kept only when the effective options request them
- Bundler and observer failures are wrapped in BundleError, never retried
"""

from __future__ import annotations

import time
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from bundlepipe_core.bundler import Bundler
from bundlepipe_core.compiler.models import Artifact, BuildResult, BundleOutput
from bundlepipe_core.compiler.option_resolver import EffectiveOptions
from bundlepipe_core.compiler.reporting import BuildObserver, log_build
from bundlepipe_core.errors import BundleError
from bundlepipe_core.schemas import BundleSpec

logger = structlog.get_logger(__name__)


class BundleDispatcher:
    """Invoke the bundler for one spec and build its Artifact.

    Attributes:
        bundler: Bundler implementation.
        observer: Called with a BuildResult after each successful bundle
            operation, or None to skip reporting.

    Example:
        >>> dispatcher = BundleDispatcher(bundler)
        >>> artifact = await dispatcher.dispatch(spec, resolve_options({}, spec))
        >>> artifact.path == spec.dst
        True
    """

    def __init__(
        self,
        bundler: Bundler,
        observer: BuildObserver | None = log_build,
    ) -> None:
        self.bundler = bundler
        self.observer = observer

    async def dispatch(self, spec: BundleSpec, options: EffectiveOptions) -> Artifact:
        """Build one bundle.

        The spec must already be validated (``src`` and ``dst`` set).

        Args:
            spec: Bundle spec to build.
            options: Effective options for the spec.

        Returns:
            Artifact with ``path == spec.dst``.

        Raises:
            BundleError: If the bundler fails, returns unreadable output,
                omits a requested source map, or the observer fails.
        """
        src = spec.src or ""
        dst = spec.dst or ""
        log = logger.bind(src=src, dst=dst, mode=spec.mode)
        log.debug("bundle_started")

        started = time.perf_counter()
        raw = await self._invoke(spec, options.as_dict(), log)
        duration = time.perf_counter() - started

        try:
            output = BundleOutput.model_validate(raw)
        except PydanticValidationError as e:
            log.error("bundle_failed", reason="invalid_output")
            raise BundleError(
                f"Bundle '{dst}' failed: bundler returned invalid output",
                dst=dst,
                cause=e,
            ) from e

        if options.source_maps and output.source_map is None:
            log.error("bundle_failed", reason="missing_source_map")
            raise BundleError(
                f"Bundle '{dst}' failed: source map requested but not produced",
                dst=dst,
            )

        if self.observer is not None:
            result = BuildResult(
                spec=spec,
                options=options.as_dict(),
                output=output,
                mode=spec.mode,
                duration_seconds=duration,
            )
            try:
                self.observer(result)
            except Exception as e:
                log.error("bundle_failed", reason="observer_error", error=str(e))
                raise BundleError(
                    f"Bundle '{dst}' failed: build reporting error",
                    dst=dst,
                    cause=e,
                ) from e

        log.debug("bundle_completed", duration_seconds=round(duration, 3))
        return Artifact(
            path=dst,
            contents=output.source.encode("utf-8"),
            source_map=output.source_map if options.source_maps else None,
        )

    async def _invoke(
        self,
        spec: BundleSpec,
        options: dict[str, Any],
        log: Any,
    ) -> Any:
        """Call the bundle operation matching the spec's mode."""
        try:
            if spec.sfx:
                return await self.bundler.bundle_standalone(spec.src, spec.dst, options)
            return await self.bundler.bundle_library(spec.src, options)
        except Exception as e:
            log.error("bundle_failed", reason="bundler_error", error=str(e))
            raise BundleError(
                f"Bundle '{spec.dst}' failed: {e}",
                dst=spec.dst,
                cause=e,
            ) from e
