"""Build result reporting for bundlepipe.

Observers are plain callables that receive a BuildResult after every
successful bundle operation. An observer that raises fails the bundle.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from bundlepipe_core.compiler.models import BuildResult

logger = structlog.get_logger(__name__)

BuildObserver = Callable[[BuildResult], None]


def log_build(result: BuildResult) -> None:
    """Log a finished bundle with structlog.

    Args:
        result: Successful build result.
    """
    logger.info(
        "bundle_built",
        src=result.spec.src,
        dst=result.spec.dst,
        mode=result.mode,
        size_bytes=len(result.output.source.encode("utf-8")),
        module_count=len(result.output.modules),
        source_map=result.output.source_map is not None,
        duration_seconds=round(result.duration_seconds, 3),
    )


def chain_observers(*observers: BuildObserver) -> BuildObserver:
    """Combine observers into one that calls each in order.

    The first observer that raises stops the chain and its exception
    propagates.

    Example:
        >>> observer = chain_observers(log_build, print_build_tree)
    """

    def _observe(result: BuildResult) -> None:
        for observer in observers:
            observer(result)

    return _observe
