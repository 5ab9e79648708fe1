"""Compile orchestration for bundlepipe.

This module implements the CompileOrchestrator, the entry point of a
compile run:

1. Configure the bundler once with ``request.config``
2. For each bundle spec, in order: validate, resolve options, dispatch
3. Return every Artifact in input order

Bundles are built strictly one after another because bundlers keep
mutable configuration state. The first failure aborts the run and no
partial artifact list is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from bundlepipe_core.bundler import Bundler, maybe_await
from bundlepipe_core.compiler.dispatcher import BundleDispatcher
from bundlepipe_core.compiler.models import Artifact
from bundlepipe_core.compiler.option_resolver import OptionResolver
from bundlepipe_core.compiler.reporting import BuildObserver, log_build
from bundlepipe_core.compiler.validator import validate_bundle_spec
from bundlepipe_core.errors import BundleError, BundlepipeError, ValidationError
from bundlepipe_core.schemas import CompileRequest

logger = structlog.get_logger(__name__)


class CompileOrchestrator:
    """Compile a request into an ordered list of Artifacts.

    The bundler and observer are injected so that any implementation
    (including a test double) can be used.

    Attributes:
        bundler: Bundler implementation.
        observer: Build observer passed to the dispatcher.

    Example:
        >>> orchestrator = CompileOrchestrator(load_bundler("acme_build:JspmBundler"))
        >>> artifacts = await orchestrator.compile(
        ...     {"bundles": [{"src": "app/main", "dst": "main.js"}]}
        ... )
        >>> [a.path for a in artifacts]
        ['main.js']
    """

    def __init__(
        self,
        bundler: Bundler,
        observer: BuildObserver | None = log_build,
    ) -> None:
        self.bundler = bundler
        self.observer = observer

    async def compile(self, request: CompileRequest | Mapping[str, Any]) -> list[Artifact]:
        """Run every bundle of ``request`` through the bundler.

        Args:
            request: CompileRequest, or a mapping validated into one.

        Returns:
            Artifacts in the order of ``request.bundles``.

        Raises:
            ValidationError: If a mapping request is malformed, or a bundle
                spec is missing ``src`` or ``dst``.
            BundleError: If configuring, bundling or reporting fails.
        """
        if not isinstance(request, CompileRequest):
            request = _parse_request(request)

        log = logger.bind(bundle_count=len(request.bundles))
        log.info("compile_started")

        artifacts: list[Artifact] = []
        try:
            await self._configure(request.config)

            resolver = OptionResolver(request.bundle_options)
            dispatcher = BundleDispatcher(self.bundler, self.observer)

            for index, spec in enumerate(request.bundles):
                validate_bundle_spec(spec, index)
                options = resolver.resolve(spec)
                artifacts.append(await dispatcher.dispatch(spec, options))
        except BundlepipeError as e:
            log.error(
                "compile_failed",
                error_type=type(e).__name__,
                error=e.user_message,
                completed=len(artifacts),
            )
            raise

        log.info("compile_completed", artifact_count=len(artifacts))
        return artifacts

    async def _configure(self, config: dict[str, Any]) -> None:
        """Apply the global bundler configuration."""
        try:
            await maybe_await(self.bundler.configure(dict(config)))
        except Exception as e:
            raise BundleError("Bundler configuration failed", cause=e) from e


def _parse_request(request: Mapping[str, Any]) -> CompileRequest:
    """Validate a mapping into a CompileRequest."""
    try:
        return CompileRequest.model_validate(request)
    except PydanticValidationError as e:
        errors = e.errors()
        location = ".".join(str(part) for part in errors[0]["loc"]) if errors else None
        raise ValidationError(
            f"Invalid compile request: {len(errors)} error(s)",
            field=location,
            internal_details=str(e),
        ) from e


async def compile_bundles(
    request: CompileRequest | Mapping[str, Any],
    bundler: Bundler,
    observer: BuildObserver | None = log_build,
) -> list[Artifact]:
    """Compile ``request`` with ``bundler``.

    Shorthand for ``CompileOrchestrator(bundler, observer).compile(request)``.
    """
    return await CompileOrchestrator(bundler, observer).compile(request)
