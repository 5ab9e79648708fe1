"""Artifact emission for bundlepipe-cli.

Writes compiled Artifacts to an output directory: the bundle contents to
``<output>/<path>`` and, when present, the source map to
``<output>/<path>.map``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bundlepipe_core.compiler.models import Artifact


def artifact_destination(output_dir: Path, relative: str) -> Path:
    """Resolve an artifact path under ``output_dir``.

    Raises:
        ValueError: If the path escapes the output directory.
    """
    root = output_dir.resolve()
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        raise ValueError(f"Artifact path '{relative}' is outside {output_dir}")
    return target


def plan_artifacts(artifacts: list[Artifact], output_dir: Path) -> list[tuple[Path, bytes]]:
    """Resolve every file to write, bundles and maps, before writing any.

    Returns:
        ``(target, data)`` pairs, maps directly after their bundle.

    Raises:
        ValueError: If a path escapes ``output_dir`` or two files share a
            destination.
    """
    planned: list[tuple[Path, bytes]] = []
    owners: dict[Path, str] = {}

    def _add(relative: str, data: bytes) -> None:
        target = artifact_destination(output_dir, relative)
        if target in owners:
            raise ValueError(
                f"Artifact path '{relative}' collides with '{owners[target]}' in {output_dir}"
            )
        owners[target] = relative
        planned.append((target, data))

    for artifact in artifacts:
        _add(artifact.path, artifact.contents)
        if artifact.source_map_path is not None and artifact.source_map is not None:
            _add(artifact.source_map_path, artifact.source_map.encode("utf-8"))

    return planned


def write_artifacts(artifacts: list[Artifact], output_dir: Path) -> list[Path]:
    """Write artifacts and their source maps.

    Nothing is written when any destination is invalid or duplicated.

    Args:
        artifacts: Compiled artifacts, in order.
        output_dir: Directory to write into. Created if needed.

    Returns:
        Paths of every written file, maps directly after their bundle.

    Raises:
        ValueError: If an artifact path escapes ``output_dir`` or is
            used twice.
        PermissionError: If a file cannot be written.
    """
    planned = plan_artifacts(artifacts, output_dir)
    for target, data in planned:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    return [target for target, _ in planned]
