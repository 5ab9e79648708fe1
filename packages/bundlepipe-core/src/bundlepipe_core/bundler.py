"""Bundler capability for bundlepipe.

The module bundler is an external collaborator. bundlepipe only relies on
the three operations of the Bundler protocol; implementations are injected
into the compile orchestrator or loaded from a ``package.module:attr``
import path with load_bundler().
"""

from __future__ import annotations

import importlib
import inspect
from collections.abc import Awaitable
from typing import Any, Protocol, TypeVar, runtime_checkable

import structlog

from bundlepipe_core.errors import ConfigurationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

# Methods an object must expose to be used as a bundler
BUNDLER_METHODS = ("configure", "bundle_library", "bundle_standalone")


@runtime_checkable
class Bundler(Protocol):
    """Operations bundlepipe needs from a module bundler.

    ``configure`` may be a plain or an async method. Bundle operations
    return a BundleOutput, a mapping with ``source`` and optional
    ``sourceMap`` keys, or an object with those attributes.
    """

    def configure(self, config: dict[str, Any]) -> None | Awaitable[None]:
        """Apply the global bundler configuration. Called once per compile."""
        ...

    async def bundle_library(self, entry: str, options: dict[str, Any]) -> Any:
        """Build a library bundle for ``entry``."""
        ...

    async def bundle_standalone(
        self,
        entry: str,
        dest: str,
        options: dict[str, Any],
    ) -> Any:
        """Build a self-executing bundle for ``entry`` written as ``dest``."""
        ...


async def maybe_await(value: T | Awaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it."""
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


def load_bundler(path: str, **kwargs: Any) -> Bundler:
    """Load a bundler from an import path.

    The attribute may be a bundler instance, or a class or factory that is
    called with ``kwargs`` to produce one.

    Args:
        path: Import path of the form ``package.module:attr``.
        **kwargs: Arguments for the bundler class or factory.

    Returns:
        Object implementing the Bundler protocol.

    Raises:
        ConfigurationError: If the path is malformed, cannot be imported,
            or does not produce a bundler.

    Example:
        >>> bundler = load_bundler("acme_build.jspm:JspmBundler", base_url="web")
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(
            f"Invalid bundler path '{path}', expected 'package.module:attr'",
            field_path="bundler",
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(
            f"Cannot import bundler module '{module_name}'",
            field_path="bundler",
            internal_details=repr(e),
        ) from e

    for attr_name in attr_path.split("."):
        try:
            target = getattr(target, attr_name)
        except AttributeError as e:
            raise ConfigurationError(
                f"Bundler '{path}' not found",
                field_path="bundler",
                internal_details=repr(e),
            ) from e

    if inspect.isclass(target) or inspect.isfunction(target):
        target = target(**kwargs)

    missing = [name for name in BUNDLER_METHODS if not callable(getattr(target, name, None))]
    if missing:
        raise ConfigurationError(
            f"'{path}' is not a bundler (missing: {', '.join(missing)})",
            field_path="bundler",
        )

    logger.debug("bundler_loaded", path=path, bundler_type=type(target).__name__)
    return target  # type: ignore[no-any-return]
