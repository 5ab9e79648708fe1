"""Shared pytest fixtures for bundlepipe-core tests.

Provides structlog configuration for output capture and a recording
bundler double whose operations are AsyncMocks.
"""

from __future__ import annotations

import sys
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

# Canned bundler output per entry point
EXPECTED_OUTPUTS: dict[str, dict[str, Any]] = {
    "a": {
        "source": "System.register('a', [], function() {});",
        "sourceMap": '{"version":3,"sources":["a.js"],"mappings":"AAAA"}',
        "modules": ["a.js", "lib/util.js"],
    },
    "foobar": {
        "source": "System.register('foobar', [], function() {});",
        "sourceMap": '{"version":3,"sources":["foobar.js"],"mappings":"AAAA"}',
        "modules": ["foobar.js"],
    },
}


def expected_output(entry: str) -> dict[str, Any]:
    """Return the canned output for ``entry`` (generic output if unknown)."""
    if entry in EXPECTED_OUTPUTS:
        return dict(EXPECTED_OUTPUTS[entry])
    return {"source": f"bundle({entry!r});", "sourceMap": "{}"}


class FakeBundler:
    """Bundler double recording every call in order.

    Attributes:
        configure: MagicMock for the configure step.
        bundle_library: AsyncMock for library bundles.
        bundle_standalone: AsyncMock for standalone bundles.
        calls: ("configure" | "library" | "standalone", entry) tuples in call order.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.configure = MagicMock(side_effect=self._configure)
        self.bundle_library = AsyncMock(side_effect=self._library)
        self.bundle_standalone = AsyncMock(side_effect=self._standalone)

    def _configure(self, config: dict[str, Any]) -> None:
        self.calls.append(("configure", config))

    async def _library(self, entry: str, options: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("library", entry))
        return expected_output(entry)

    async def _standalone(
        self,
        entry: str,
        dest: str,
        options: dict[str, Any],
    ) -> dict[str, Any]:
        self.calls.append(("standalone", entry))
        return expected_output(entry)


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def fake_bundler() -> FakeBundler:
    """Return a fresh recording bundler double."""
    return FakeBundler()


@pytest.fixture
def observer() -> MagicMock:
    """Return a build observer mock."""
    return MagicMock()


@pytest.fixture
def expected_outputs() -> dict[str, dict[str, Any]]:
    """Return the canned bundler outputs keyed by entry point."""
    return EXPECTED_OUTPUTS
