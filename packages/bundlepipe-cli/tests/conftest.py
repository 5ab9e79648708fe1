"""Shared test fixtures for bundlepipe-cli tests.

Provides CliRunner fixtures, build file helpers and an importable test
bundler module.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest
import structlog
import yaml
from click.testing import CliRunner

BUILD_FILE_NAME = "bundlepipe.yaml"

# Import path of the test bundler registered by the test_bundler_module fixture
TEST_BUNDLER_MODULE = "bundlepipe_cli_test_bundler"
TEST_BUNDLER_PATH = f"{TEST_BUNDLER_MODULE}:RecordingBundler"


class RecordingBundler:
    """Bundler double that records calls on the class."""

    calls: list[tuple[str, str]] = []

    def configure(self, config: dict[str, Any]) -> None:
        RecordingBundler.calls.append(("configure", ""))

    async def bundle_library(self, entry: str, options: dict[str, Any]) -> dict[str, Any]:
        RecordingBundler.calls.append(("library", entry))
        if entry == "broken":
            raise RuntimeError(f"cannot resolve {entry}")
        return {
            "source": f"System.register('{entry}');",
            "sourceMap": '{"version":3}',
            "modules": [f"{entry}.js", "lib/util.js"],
        }

    async def bundle_standalone(
        self, entry: str, dest: str, options: dict[str, Any]
    ) -> dict[str, Any]:
        RecordingBundler.calls.append(("standalone", entry))
        return {"source": f"(function() {{ /* {entry} */ }})();", "sourceMap": '{"version":3}'}


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Send structlog output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def test_bundler_module(monkeypatch: pytest.MonkeyPatch) -> type[RecordingBundler]:
    """Register an importable module holding RecordingBundler.

    Returns:
        The RecordingBundler class, with its call log reset.
    """
    module = ModuleType(TEST_BUNDLER_MODULE)
    module.RecordingBundler = RecordingBundler  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, TEST_BUNDLER_MODULE, module)
    RecordingBundler.calls = []
    return RecordingBundler


@pytest.fixture
def bundler_path(test_bundler_module: type[RecordingBundler]) -> str:
    """Return the import path of the registered test bundler."""
    return TEST_BUNDLER_PATH


@pytest.fixture
def write_build_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing a bundlepipe.yaml into tmp_path.

    Returns:
        Function taking the build file content (dict or raw YAML string).
    """

    def _write(content: dict[str, Any] | str, filename: str = BUILD_FILE_NAME) -> Path:
        path = tmp_path / filename
        if isinstance(content, dict):
            content = yaml.dump(content)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def valid_build_file(write_build_file: Callable[..., Path], bundler_path: str) -> Path:
    """Return a valid build file with one library and one sfx bundle."""
    return write_build_file(
        {
            "bundler": bundler_path,
            "config": {"baseURL": "web"},
            "bundleOptions": {"sourceMaps": True},
            "bundles": [
                {"src": "app/main", "dst": "main.js", "options": {"minify": True}},
                {"src": "app/boot", "dst": "boot.js", "sfx": True},
            ],
        }
    )
