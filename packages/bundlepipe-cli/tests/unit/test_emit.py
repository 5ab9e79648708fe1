"""Tests for artifact emission."""

from __future__ import annotations

from pathlib import Path

import pytest

from bundlepipe_cli.emit import artifact_destination, plan_artifacts, write_artifacts
from bundlepipe_core.compiler import Artifact


class TestArtifactDestination:
    """Tests for artifact_destination()."""

    def test_nested_path(self, tmp_path: Path) -> None:
        """Nested paths resolve under the output directory."""
        target = artifact_destination(tmp_path, "js/app/main.js")
        assert target == (tmp_path / "js" / "app" / "main.js").resolve()

    def test_escaping_path_rejected(self, tmp_path: Path) -> None:
        """Paths leaving the output directory raise ValueError."""
        with pytest.raises(ValueError, match="outside"):
            artifact_destination(tmp_path / "dist", "../../etc/passwd")

    def test_absolute_path_rejected(self, tmp_path: Path) -> None:
        """Absolute paths elsewhere raise ValueError."""
        with pytest.raises(ValueError):
            artifact_destination(tmp_path / "dist", str(tmp_path / "other.js"))


class TestWriteArtifacts:
    """Tests for write_artifacts()."""

    def test_writes_contents_and_maps(self, tmp_path: Path) -> None:
        """Maps are written next to their bundle, in order."""
        artifacts = [
            Artifact(path="a.js", contents=b"a()", source_map='{"version":3}'),
            Artifact(path="lib/b.js", contents=b"b()"),
        ]

        written = write_artifacts(artifacts, tmp_path / "dist")

        root = (tmp_path / "dist").resolve()
        assert written == [root / "a.js", root / "a.js.map", root / "lib" / "b.js"]
        assert (root / "a.js").read_bytes() == b"a()"
        assert (root / "a.js.map").read_text() == '{"version":3}'
        assert not (root / "lib" / "b.js.map").exists()

    def test_writes_utf8_bytes_verbatim(self, tmp_path: Path) -> None:
        """Contents are written as bytes without re-encoding."""
        contents = "const s = 'é';".encode()

        write_artifacts([Artifact(path="a.js", contents=contents)], tmp_path)

        assert (tmp_path / "a.js").read_bytes() == contents

    def test_empty_list(self, tmp_path: Path) -> None:
        """No artifacts writes nothing."""
        assert write_artifacts([], tmp_path / "dist") == []

    def test_duplicate_dst_rejected_before_writing(self, tmp_path: Path) -> None:
        """Two artifacts with the same path raise and write nothing."""
        artifacts = [
            Artifact(path="a.js", contents=b"first()"),
            Artifact(path="./a.js", contents=b"second()"),
        ]

        with pytest.raises(ValueError, match="collides"):
            write_artifacts(artifacts, tmp_path / "dist")

        assert not (tmp_path / "dist").exists()

    def test_map_path_collision_rejected(self, tmp_path: Path) -> None:
        """A bundle written over another bundle's source map is rejected."""
        artifacts = [
            Artifact(path="a.js", contents=b"a()", source_map="{}"),
            Artifact(path="a.js.map", contents=b"b()"),
        ]

        with pytest.raises(ValueError, match="collides"):
            write_artifacts(artifacts, tmp_path)

        assert not (tmp_path / "a.js").exists()


class TestPlanArtifacts:
    """Tests for plan_artifacts()."""

    def test_plans_maps_after_bundles(self, tmp_path: Path) -> None:
        """Maps follow their bundle and are encoded as UTF-8."""
        planned = plan_artifacts(
            [Artifact(path="a.js", contents=b"a()", source_map='{"v":3}')], tmp_path
        )

        root = tmp_path.resolve()
        assert planned == [(root / "a.js", b"a()"), (root / "a.js.map", b'{"v":3}')]
        assert not (tmp_path / "a.js").exists()
